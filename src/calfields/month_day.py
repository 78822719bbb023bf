"""
calfields.month_day
-------------------
MonthDay: a year-agnostic month and day-of-month, such as ``--12-03``.

A MonthDay holds two validated field values. The day is checked against the
longest length the month can have in any year, so February 29 is a legal
value even though only leap years can realise it. Instances are immutable;
every ``with_*`` and ``roll_*`` operation returns a new instance, or the
same instance when nothing changes.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple, Union

from .clock import Clock, system_clock
from .core.errors import (
    InvalidFieldError,
    MissingArgumentError,
    UnsupportedRuleError,
    require_not_none,
)
from .core.query import query, require
from .core.rules import DAY_OF_MONTH, MONTH_OF_YEAR, YEAR, FieldRule, FieldValue
from .core.time import ISO_CHRONOLOGY, IsoChronology, is_leap_year
from .core.types import MISSING, FieldMap, Month
from .formatting.pattern import ISO_MONTH_DAY, DateTimeFormatter
from .resolvers.interfaces import DateResolver
from .resolvers.standard import STRICT

logger = logging.getLogger(__name__)

MonthLike = Union[Month, int]


def _restore(month: int, day: int) -> "MonthDay":
    return MonthDay(month, day)


@total_ordering
class MonthDay:
    __slots__ = ("_month", "_day")

    def __init__(self, month: MonthLike, day: int):
        require_not_none(month, "month")
        require_not_none(day, "day")
        m = MONTH_OF_YEAR.validate(month.value if isinstance(month, Month) else month)
        d = DAY_OF_MONTH.validate(day)
        max_day = Month(m.value).max_length()
        if d.value > max_day:
            raise InvalidFieldError(
                f"Illegal value for {DAY_OF_MONTH.name} field, value {d.value} "
                f"is not valid for month {Month(m.value).name}",
                DAY_OF_MONTH,
            )
        object.__setattr__(self, "_month", m)
        object.__setattr__(self, "_day", d)

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, month: MonthLike, day: int) -> "MonthDay":
        return cls(month, day)

    @classmethod
    def from_calendrical(cls, calendrical: Any) -> "MonthDay":
        """
        Pull month-of-year and day-of-month out of any calendrical source.

        Every other field of the source is ignored. Raises UnsupportedRuleError
        if the source cannot answer either rule.
        """
        require_not_none(calendrical, "calendrical")
        month = require(calendrical, MONTH_OF_YEAR)
        day = require(calendrical, DAY_OF_MONTH)
        return cls(month.value, day.value)

    @classmethod
    def _from_parsed(cls, fields: Dict[FieldRule, int]) -> "MonthDay":
        for rule in (MONTH_OF_YEAR, DAY_OF_MONTH):
            if rule not in fields:
                raise UnsupportedRuleError(rule)
        return cls(fields[MONTH_OF_YEAR], fields[DAY_OF_MONTH])

    @classmethod
    def parse(cls, text: str, formatter: DateTimeFormatter = ISO_MONTH_DAY) -> "MonthDay":
        """
        Parse text such as ``--12-03``.

        Malformed text raises CalendricalParseError. Well-formed text with an
        out-of-range month or day raises IllegalFieldValueError, and a day too
        large for its month raises InvalidFieldError.
        """
        require_not_none(text, "text")
        require_not_none(formatter, "formatter")
        return formatter.parse(text, cls._from_parsed)

    @classmethod
    def now(cls, clock: Optional[Clock] = MISSING) -> "MonthDay":  # type: ignore[assignment]
        if clock is MISSING:
            clock = system_clock()
        require_not_none(clock, "clock")
        today = clock.today()
        return cls(today.month, today.day)

    @classmethod
    def from_tuple(cls, data: Tuple[int, int]) -> "MonthDay":
        """Rebuild from the persisted (month, day) pair, re-running validation."""
        require_not_none(data, "data")
        month, day = data
        return cls(month, day)

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    @property
    def month(self) -> Month:
        return Month(self._month.value)

    @property
    def day(self) -> int:
        return self._day.value

    @property
    def chronology(self) -> IsoChronology:
        return ISO_CHRONOLOGY

    def query(self, rule: FieldRule) -> Optional[FieldValue]:
        require_not_none(rule, "rule")
        if rule is MONTH_OF_YEAR:
            return self._month
        if rule is DAY_OF_MONTH:
            return self._day
        return None

    # ---------------------------------------------------------
    # Replacement and rolling
    # ---------------------------------------------------------

    def with_month(self, month: MonthLike) -> "MonthDay":
        """Replace the month, clamping the day to the new month's maximum length."""
        require_not_none(month, "month")
        m = Month.of(month)
        if m == self.month:
            return self
        day = min(self.day, m.max_length())
        if day != self.day:
            logger.debug("clamped %s to day %d of %s", self, day, m.name)
        return MonthDay(m, day)

    def with_day(self, day: int) -> "MonthDay":
        """Replace the day; unlike with_month this never clamps."""
        day = DAY_OF_MONTH.check_valid_value(day)
        if day == self.day:
            return self
        if day > self.month.max_length():
            raise InvalidFieldError(
                f"Illegal value for {DAY_OF_MONTH.name} field, value {day} "
                f"is not valid for month {self.month.name}",
                DAY_OF_MONTH,
            )
        return MonthDay(self.month, day)

    def roll_month(self, months: int) -> "MonthDay":
        if months == 0:
            return self
        return self.with_month(self.month.roll(months))

    def roll_day(self, days: int) -> "MonthDay":
        """Cycle the day within the month; never moves to another month."""
        if days == 0:
            return self
        length = self.month.max_length()
        return self.with_day((self.day - 1 + days) % length + 1)

    # ---------------------------------------------------------
    # Combination with a year
    # ---------------------------------------------------------

    def is_valid_year(self, year: int) -> bool:
        return not (self.day == 29 and self.month is Month.FEBRUARY and not is_leap_year(year))

    def _resolve(self, year: int, resolver: DateResolver) -> date:
        result = resolver.resolve(year, self.month.value, self.day)
        if result is None:
            raise MissingArgumentError(f"{type(resolver).__name__} returned no date")
        if (result.month, result.day) != (self.month.value, self.day):
            logger.debug("resolved %s in %d to %s", self, year, result.isoformat())
        return result

    def at_year(self, year: int, resolver: DateResolver = MISSING) -> date:  # type: ignore[assignment]
        """
        Combine with ``year`` into a date.

        With the default strict resolver, February 29 in a common year raises
        InvalidFieldError for the day-of-month rule.
        """
        if resolver is MISSING:
            resolver = STRICT
        require_not_none(resolver, "resolver")
        YEAR.check_valid_value(year)
        return self._resolve(year, resolver)

    def adjust_date(self, d: date, resolver: DateResolver = MISSING) -> date:  # type: ignore[assignment]
        """
        Move ``d`` to this month and day within its own year.

        Returns ``d`` itself when it already falls on this month and day.
        """
        require_not_none(d, "date")
        if resolver is MISSING:
            resolver = STRICT
        require_not_none(resolver, "resolver")
        if d.month == self.month.value and d.day == self.day:
            return d
        resolved = self._resolve(d.year, resolver)
        if isinstance(d, datetime):
            return datetime.combine(resolved, d.timetz())
        return resolved

    def matches(self, calendrical: Any) -> bool:
        """True if ``calendrical`` has this month and day, whatever else it holds."""
        require_not_none(calendrical, "calendrical")
        return (
            query(calendrical, MONTH_OF_YEAR) == self._month
            and query(calendrical, DAY_OF_MONTH) == self._day
        )

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare_to(self, other: "MonthDay") -> int:
        require_not_none(other, "other")
        if not isinstance(other, MonthDay):
            raise TypeError(f"Cannot compare MonthDay with {type(other).__name__}")
        cmp = MONTH_OF_YEAR.compare(self._month, other._month)
        if cmp == 0:
            cmp = DAY_OF_MONTH.compare(self._day, other._day)
        return cmp

    def is_before(self, other: "MonthDay") -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: "MonthDay") -> bool:
        return self.compare_to(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._month == other._month and self._day == other._day

    def __lt__(self, other: "MonthDay") -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        # 6 bits hold any day, so every (month, day) pair maps to its own int
        return (self._month.value << 6) | self._day.value

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_tuple(self) -> Tuple[int, int]:
        return (self._month.value, self._day.value)

    def to_fields(self) -> FieldMap:
        return FieldMap.from_values(self._month, self._day)

    def format(self, formatter: DateTimeFormatter) -> str:
        require_not_none(formatter, "formatter")
        return formatter.format(self)

    def __str__(self) -> str:
        return f"--{self._month.value:02d}-{self._day.value:02d}"

    def __repr__(self) -> str:
        return f"MonthDay({self._month.value}, {self._day.value})"

    def __reduce__(self):
        return (_restore, self.to_tuple())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("MonthDay is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("MonthDay is immutable")
