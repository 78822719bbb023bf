"""
calfields.resolvers.standard
----------------------------
The standard resolution strategies: strict, previous-valid and next-valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Tuple

from ..core.errors import InvalidFieldError
from ..core.rules import DAY_OF_MONTH, MONTH_OF_YEAR, YEAR
from ..core.time import days_in_month, is_leap_year
from .interfaces import DateResolver

logger = logging.getLogger(__name__)


def _checked(year: int, month: int, day: int) -> Tuple[int, int, int, int]:
    """Range-checks each field and returns them with the month's real length."""
    YEAR.check_valid_value(year)
    MONTH_OF_YEAR.check_valid_value(month)
    DAY_OF_MONTH.check_valid_value(day)
    m = int(month)
    return year, m, day, days_in_month(m, is_leap_year(year))


@dataclass(frozen=True)
class StrictResolver:
    """Rejects any triple that is not a real date."""
    name: str = "strict"

    def resolve(self, year: int, month: int, day: int) -> date:
        year, m, day, length = _checked(year, month, day)
        if day > length:
            if m == 2 and day == 29:
                msg = f"Illegal date February 29 as '{year}' is not a leap year"
            else:
                msg = f"Illegal date {m:02d}-{day:02d}, month has only {length} days"
            raise InvalidFieldError(msg, DAY_OF_MONTH)
        return date(year, m, day)


@dataclass(frozen=True)
class PreviousValidResolver:
    """Clamps an overflowing day to the last day of the month."""
    name: str = "previous-valid"

    def resolve(self, year: int, month: int, day: int) -> date:
        year, m, day, length = _checked(year, month, day)
        if day > length:
            logger.debug("previous-valid: %04d-%02d-%02d -> day %d", year, m, day, length)
            day = length
        return date(year, m, day)


@dataclass(frozen=True)
class NextValidResolver:
    """Moves an overflowing day to the first day of the following month."""
    name: str = "next-valid"

    def resolve(self, year: int, month: int, day: int) -> date:
        year, m, day, length = _checked(year, month, day)
        if day <= length:
            return date(year, m, day)
        # December has 31 days, so the overflow never leaves the year
        nxt = date(year, m + 1, 1)
        logger.debug("next-valid: %04d-%02d-%02d -> %s", year, m, day, nxt.isoformat())
        return nxt


STRICT = StrictResolver()
PREVIOUS_VALID = PreviousValidResolver()
NEXT_VALID = NextValidResolver()

STANDARD_RESOLVERS: Dict[str, DateResolver] = {
    STRICT.name: STRICT,
    PREVIOUS_VALID.name: PREVIOUS_VALID,
    NEXT_VALID.name: NEXT_VALID,
}


def strict() -> DateResolver:
    return STRICT


def previous_valid() -> DateResolver:
    return PREVIOUS_VALID


def next_valid() -> DateResolver:
    return NEXT_VALID
