from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from ..errors import ParseError
from .parsers import match_format, preprocess_token
from .types import TokenFields

# Time-only tokens this far in the past still mean "today".
GRACE = timedelta(minutes=30)

# Every day-of-month 1..31 recurs within this many months.
MAX_MONTH_SCAN = 12


def _add_months(year: int, month: int, n: int) -> tuple[int, int]:
    idx = year * 12 + (month - 1) + n
    return idx // 12, idx % 12 + 1


def _day_bearing(fields: TokenFields, now: datetime) -> datetime:
    """Resolve DD_* tokens to this month, or the next month that has that day."""

    for offset in range(MAX_MONTH_SCAN + 1):
        y, m = _add_months(now.year, now.month, offset)
        if fields.day > calendar.monthrange(y, m)[1]:
            continue
        cand = datetime(y, m, fields.day, fields.hour, fields.minute)
        if cand >= now:
            return cand

    # Unreachable for day <= 31.
    raise ParseError("unrecognized format")


def _time_only(fields: TokenFields, now: datetime) -> datetime:
    cand = now.replace(hour=fields.hour, minute=fields.minute, second=0, microsecond=0)
    if cand < now - GRACE:
        cand += timedelta(days=1)
    return cand


def resolve(token: str, now: datetime | None = None) -> datetime:
    """Resolve an abbreviated date token against a reference time.

    Examples with now = 2024-03-27 10:00:
    - "10:20"    -> 2024-03-27 10:20
    - "9"        -> 2024-03-28 09:00 (more than 30 minutes ago, so tomorrow)
    - "09:30"    -> 2024-03-27 09:30 (exactly 30 minutes ago still counts as today)
    - "30_10"    -> 2024-03-30 10:00
    - "5_16-00"  -> 2024-04-05 16:00 (the 5th has passed, so next month)

    Raises ParseError for empty, incomplete, unrecognized or out-of-range tokens.
    """

    if now is None:
        now = datetime.now()

    fmt, fields = match_format(preprocess_token(token))
    if fmt.has_day:
        return _day_bearing(fields, now)
    return _time_only(fields, now)


def format_timestamp(ts: datetime) -> str:
    """Format as YYYY-MM-DD_HH-mm."""
    return f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}_{ts.hour:02d}-{ts.minute:02d}"
