from __future__ import annotations

import re

from ..errors import ParseError
from .types import TokenFields, TokenFormat, TokenParts

TIME_SPLIT_RE = re.compile(r"[-:]")

# Tried in order; the first full match wins.
FORMATS: tuple[TokenFormat, ...] = (
    TokenFormat("DD_HH-mm", re.compile(r"(?P<day>[0-9]{2})_(?P<hour>[0-9]{2})-(?P<minute>[0-9]{2})")),
    TokenFormat("DD_HH:mm", re.compile(r"(?P<day>[0-9]{2})_(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})")),
    TokenFormat("DD_HH", re.compile(r"(?P<day>[0-9]{2})_(?P<hour>[0-9]{2})")),
    TokenFormat("HH:mm", re.compile(r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})")),
    TokenFormat("HH-mm", re.compile(r"(?P<hour>[0-9]{2})-(?P<minute>[0-9]{2})")),
    TokenFormat("HH", re.compile(r"(?P<hour>[0-9]{2})")),
)


def _pad(part: str) -> str:
    if len(part) == 1 and part in "0123456789":
        return "0" + part
    return part


def split_token(token: str) -> TokenParts:
    """Split a raw token into day and time parts, zero-padding single digits.

    "5_9-3" -> day "05", time "09-03". The hour/minute separator is kept; when
    both ":" and "-" appear, ":" is used to rejoin.
    """

    token = (token or "").strip()
    if not token:
        raise ParseError("empty token")

    day: str | None = None
    time_part = token
    if "_" in token:
        day, _, time_part = token.partition("_")
        if not time_part:
            raise ParseError("incomplete token", token)
        day = _pad(day)

    if ":" in time_part:
        sep: str | None = ":"
    elif "-" in time_part:
        sep = "-"
    else:
        sep = None

    pieces = [_pad(p) for p in TIME_SPLIT_RE.split(time_part)]
    return TokenParts(day=day, time=(sep or "").join(pieces))


def preprocess_token(token: str) -> str:
    return split_token(token).joined()


def match_format(token: str) -> tuple[TokenFormat, TokenFields]:
    """Match a preprocessed token against FORMATS and range-check its fields."""

    for fmt in FORMATS:
        m = fmt.pattern.fullmatch(token)
        if not m:
            continue

        groups = m.groupdict()
        day = int(groups["day"]) if groups.get("day") is not None else None
        hour = int(groups["hour"])
        minute = int(groups["minute"]) if groups.get("minute") is not None else 0

        if day is not None and not 1 <= day <= 31:
            break
        if hour > 23 or minute > 59:
            break
        return fmt, TokenFields(day=day, hour=hour, minute=minute)

    raise ParseError("unrecognized format", token)
