"""Date boundary resolution for search queries.

The e-Tax service interprets every date in GMT+0700, so boundaries are
always built in that fixed offset. The machine's local timezone is never
consulted; `since` maps to 00:00:00 and `until` to 23:59:59 of the given
calendar day.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone

from core.domain.clock import GMT_PLUS_7, format_compact, format_timestamp
from core.domain.models import DateRange
from core.errors import DateParseError

__all__ = [
    "GMT_PLUS_7",
    "format_compact",
    "format_timestamp",
    "parse_calendar_date",
    "resolve_boundary",
    "resolve_date_range",
    "utc_today",
]

_START_OF_DAY = time(0, 0, 0)
_END_OF_DAY = time(23, 59, 59)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_today() -> date:
    """Current calendar date in UTC.

    The day is taken in UTC and only then pinned to GMT+0700, so between
    00:00 and 07:00 GMT+0700 "today" is still the previous day.
    """

    return datetime.now(timezone.utc).date()


def parse_calendar_date(value: str) -> date:
    """Parse a strict `YYYY-MM-DD` string."""

    if not _DATE_RE.match(value):
        raise DateParseError(value)
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise DateParseError(value) from exc


def resolve_boundary(
    value: str | None,
    *,
    end_of_day: bool,
    today: date | None = None,
) -> datetime:
    """Turn an optional date string into a start/end-of-day instant in GMT+0700.

    An empty value means "today" (the UTC date unless `today` is given).
    """

    if value:
        day = parse_calendar_date(value)
    else:
        day = today or utc_today()

    clock = _END_OF_DAY if end_of_day else _START_OF_DAY
    return datetime.combine(day, clock, tzinfo=GMT_PLUS_7)


def resolve_date_range(
    since: str | None,
    until: str | None,
    *,
    today: date | None = None,
) -> DateRange:
    """Resolve both ends of a search window.

    No check is made that `since` precedes `until`; the service receives
    whatever window the caller asked for.
    """

    start = resolve_boundary(since, end_of_day=False, today=today)
    end = resolve_boundary(until, end_of_day=True, today=today)
    return DateRange(start=start, end=end)
