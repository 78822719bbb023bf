from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterator, Mapping, Optional

from .rules import MONTH_OF_YEAR, FieldRule, FieldValue
from .time import days_in_month


class _Missing:
    """Default marker for optional arguments where an explicit None is an error."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int) -> "Month":
        """Month for 1..12; out-of-range values raise IllegalFieldValueError."""
        if isinstance(value, Month):
            return value
        return cls(MONTH_OF_YEAR.check_valid_value(value))

    def length(self, leap: bool) -> int:
        return days_in_month(self.value, leap)

    def max_length(self) -> int:
        return days_in_month(self.value, True)

    def min_length(self) -> int:
        return days_in_month(self.value, False)

    def roll(self, months: int) -> "Month":
        """Cyclic addition; wraps past December in either direction."""
        return Month((self.value - 1 + months) % 12 + 1)

    @property
    def quarter(self) -> int:
        return (self.value - 1) // 3 + 1

    @property
    def month_of_quarter(self) -> int:
        return (self.value - 1) % 3 + 1

    def to_field(self) -> FieldValue:
        return MONTH_OF_YEAR.validate(self.value)


class FieldMap(Mapping[FieldRule, int]):
    """
    Immutable bag of validated field values keyed by rule.

    Answers the calendrical query protocol for exactly the rules it holds, so
    it can stand in for any richer object when constructing value types.
    """

    __slots__ = ("_fields",)

    def __init__(self, values: Optional[Mapping[FieldRule, int]] = None):
        fields: Dict[FieldRule, FieldValue] = {}
        for rule, value in (values or {}).items():
            fields[rule] = rule.validate(value)
        object.__setattr__(self, "_fields", fields)

    @classmethod
    def from_values(cls, *values: FieldValue) -> "FieldMap":
        return cls({fv.rule: fv.value for fv in values})

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("FieldMap is immutable")

    def __getitem__(self, rule: FieldRule) -> int:
        return self._fields[rule].value

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def query(self, rule: FieldRule) -> Optional[FieldValue]:
        return self._fields.get(rule)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldMap):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(frozenset(self._fields.values()))

    def __repr__(self) -> str:
        inner = ", ".join(str(fv) for fv in self._fields.values())
        return f"FieldMap({inner})"
