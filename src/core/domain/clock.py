"""Fixed-offset clock helpers.

The e-Tax service interprets every timestamp in GMT+0700. Keeping the
offset and both wire formats here lets the domain models render dates
without depending on the resolver.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

GMT_PLUS_7 = timezone(timedelta(hours=7), name="GMT+0700")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
COMPACT_FORMAT = "%Y%m%d"


def format_timestamp(instant: datetime) -> str:
    """`YYYY-MM-DD HH:MM:SS` in GMT+0700."""

    return instant.astimezone(GMT_PLUS_7).strftime(TIMESTAMP_FORMAT)


def format_compact(instant: datetime) -> str:
    """`YYYYMMDD` in GMT+0700."""

    return instant.astimezone(GMT_PLUS_7).strftime(COMPACT_FORMAT)
