"""Calendar dates used for memberships, lessons and bookings."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from functools import total_ordering

_DATE_PATTERN = re.compile(r"\s*(-?\d+)\s*/\s*(-?\d+)\s*/\s*(-?\d+)\s*")


@total_ordering
@dataclass(frozen=True)
class Date:
    """A day/month/year date; the day is checked only against 1..31."""

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 31 or not 1 <= self.month <= 12:
            raise ValueError(f"Data non valida: {self.day}/{self.month}/{self.year}")

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def expiry(self, months: int) -> Date:
        """Return the date that lies ``months`` months after this one, same day."""
        if months <= 0:
            raise ValueError("Valori Errati: the duration must be positive")
        years, month_index = divmod(self.month - 1 + months, 12)
        return Date(self.day, month_index + 1, self.year + years)

    def compare(self, other: Date) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after ``other``."""
        mine, theirs = self._key(), other._key()
        return (mine > theirs) - (mine < theirs)

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


def parse_date(text: str) -> Date:
    """Parse a date written as GG/MM/AAAA."""
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"Data non valida: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return Date(day, month, year)


def today() -> Date:
    """Return the current local date."""
    now = _dt.date.today()
    return Date(now.day, now.month, now.year)