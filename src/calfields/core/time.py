"""ISO (proleptic Gregorian) calendar facts: leap years and month lengths."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR
from typing import Tuple

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR

# Indexed by month - 1, February taken as 28.
_MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, leap: bool) -> int:
    _check_month(month)
    if month == 2:
        return 29 if leap else 28
    return _MONTH_LENGTHS[month - 1]


def max_days_in_month(month: int) -> int:
    """Largest length the month can have in any year."""
    return days_in_month(month, True)


def min_days_in_month(month: int) -> int:
    return days_in_month(month, False)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


@dataclass(frozen=True)
class IsoChronology:
    """Facts provider handed to value types; stateless."""
    name: str = "ISO"

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def days_in_month(self, month: int, leap: bool) -> int:
        return days_in_month(month, leap)

    def month_length(self, year: int, month: int) -> int:
        return days_in_month(month, is_leap_year(year))

    def is_valid_date(self, year: int, month: int, day: int) -> bool:
        return 1 <= day <= self.month_length(year, month)


ISO_CHRONOLOGY = IsoChronology()
