import time
from datetime import date, datetime, timedelta, timezone

import pytest

from core.date_range import (
    GMT_PLUS_7,
    format_compact,
    format_timestamp,
    resolve_boundary,
    resolve_date_range,
    utc_today,
)
from core.errors import DateParseError


class _FrozenDatetime(datetime):
    @classmethod
    def now(cls, tz=None):
        frozen = datetime(2023, 12, 31, 20, 0, 0, tzinfo=timezone.utc)
        return frozen.astimezone(tz) if tz is not None else frozen.replace(tzinfo=None)


class TestResolveBoundary:
    def test_start_of_day(self):
        instant = resolve_boundary("2024-01-01", end_of_day=False)
        assert instant == datetime(2024, 1, 1, 0, 0, 0, tzinfo=GMT_PLUS_7)
        assert instant.utcoffset() == timedelta(hours=7)

    def test_end_of_day(self):
        instant = resolve_boundary("2024-01-31", end_of_day=True)
        assert instant == datetime(2024, 1, 31, 23, 59, 59, tzinfo=GMT_PLUS_7)

    def test_instant_is_absolute(self):
        instant = resolve_boundary("2024-01-01", end_of_day=False)
        # 00:00 in GMT+7 is 17:00 of the previous day in UTC
        assert instant.timestamp() == datetime(2023, 12, 31, 17, 0, 0, tzinfo=timezone.utc).timestamp()

    def test_empty_uses_injected_today(self, fixed_today):
        start = resolve_boundary("", end_of_day=False, today=fixed_today)
        end = resolve_boundary(None, end_of_day=True, today=fixed_today)
        assert format_timestamp(start) == "2024-03-15 00:00:00"
        assert format_timestamp(end) == "2024-03-15 23:59:59"

    def test_empty_defaults_to_utc_today(self):
        instant = resolve_boundary("", end_of_day=False)
        assert instant.date() == utc_today()
        assert instant.utcoffset() == timedelta(hours=7)

    def test_today_is_the_utc_date(self, monkeypatch):
        # 20:00 UTC on Dec 31 is already Jan 1 in GMT+7
        monkeypatch.setattr("core.date_range.datetime", _FrozenDatetime)
        window = resolve_date_range("", "")
        assert window.doc_date_from == "2023-12-31 00:00:00"
        assert window.doc_date_to == "2023-12-31 23:59:59"
        assert window.compact_from == "20231231"

    def test_explicit_value_ignores_today(self, fixed_today):
        instant = resolve_boundary("2023-07-04", end_of_day=False, today=fixed_today)
        assert instant.date() == date(2023, 7, 4)

    @pytest.mark.parametrize(
        "value",
        ["2024-13-40", "not-a-date", "2024-02-30", "2024-1-5", "20240105", " 2024-01-05", "2024/01/05"],
    )
    def test_malformed_values_raise(self, value):
        with pytest.raises(DateParseError) as excinfo:
            resolve_boundary(value, end_of_day=False)
        assert excinfo.value.value == value
        assert isinstance(excinfo.value, ValueError)


class TestFormatting:
    def test_formats(self):
        instant = datetime(2024, 1, 31, 23, 59, 59, tzinfo=GMT_PLUS_7)
        assert format_timestamp(instant) == "2024-01-31 23:59:59"
        assert format_compact(instant) == "20240131"

    def test_other_offsets_are_rendered_in_gmt_plus_7(self):
        utc_instant = datetime(2024, 1, 31, 17, 30, 0, tzinfo=timezone.utc)
        assert format_timestamp(utc_instant) == "2024-02-01 00:30:00"
        assert format_compact(utc_instant) == "20240201"


class TestResolveDateRange:
    def test_range_strings(self):
        window = resolve_date_range("2024-01-01", "2024-01-31")
        assert window.doc_date_from == "2024-01-01 00:00:00"
        assert window.doc_date_to == "2024-01-31 23:59:59"
        assert window.compact_from == "20240101"
        assert window.compact_to == "20240131"

    def test_defaults_to_single_day(self, fixed_today):
        window = resolve_date_range("", "", today=fixed_today)
        assert window.doc_date_from == "2024-03-15 00:00:00"
        assert window.doc_date_to == "2024-03-15 23:59:59"

    def test_inverted_range_is_kept(self):
        window = resolve_date_range("2024-02-01", "2024-01-01")
        assert window.doc_date_from == "2024-02-01 00:00:00"
        assert window.doc_date_to == "2024-01-01 23:59:59"
        assert window.start > window.end

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="requires time.tzset")
    @pytest.mark.parametrize("tz", ["UTC", "America/New_York", "Pacific/Kiritimati"])
    def test_independent_of_system_timezone(self, monkeypatch, tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()
        try:
            window = resolve_date_range("2024-01-01", "2024-01-31")
        finally:
            monkeypatch.undo()
            time.tzset()
        assert window.doc_date_from == "2024-01-01 00:00:00"
        assert window.doc_date_to == "2024-01-31 23:59:59"
