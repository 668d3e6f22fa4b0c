from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenParts:
    """A date token after splitting and zero-padding."""

    day: str | None
    time: str

    def joined(self) -> str:
        return self.time if self.day is None else f"{self.day}_{self.time}"


@dataclass(frozen=True)
class TokenFormat:
    """One entry of the ordered format table."""

    name: str
    pattern: re.Pattern[str]

    @property
    def has_day(self) -> bool:
        return self.name.startswith("DD")


@dataclass(frozen=True)
class TokenFields:
    """Numeric fields extracted from a matched token."""

    day: int | None
    hour: int
    minute: int
