"""
calfields.core.rules
--------------------
Field rules and validated field values.

A FieldRule describes one calendar field: a tag from the closed RuleId set,
a display name and an inclusive numeric range. Rules are process-wide
singletons compared by identity. A FieldValue is a (rule, int) pair whose
value is checked against the rule's range when it is created.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import IllegalFieldValueError, require_not_none
from .time import MAX_YEAR, MIN_YEAR


class RuleId(Enum):
    YEAR = "year"
    MONTH_OF_YEAR = "month-of-year"
    DAY_OF_MONTH = "day-of-month"
    HOUR_OF_DAY = "hour-of-day"
    MINUTE_OF_HOUR = "minute-of-hour"
    SECOND_OF_MINUTE = "second-of-minute"


@dataclass(frozen=True, eq=False)
class FieldRule:
    id: RuleId
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"{self.id.value}: minimum {self.minimum} exceeds maximum {self.maximum}")

    @property
    def name(self) -> str:
        return self.id.value

    def is_valid_value(self, value: int) -> bool:
        try:
            value = operator.index(value)
        except TypeError:
            return False
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int) -> int:
        """Return ``value`` as a plain int, or raise IllegalFieldValueError."""
        require_not_none(value, self.name)
        try:
            n = operator.index(value)
        except TypeError:
            raise IllegalFieldValueError(
                self, value, f"Illegal value for {self.name} field, {value!r} is not an integer"
            ) from None
        if not self.minimum <= n <= self.maximum:
            raise IllegalFieldValueError(self, n)
        return int(n)

    def validate(self, value: int) -> "FieldValue":
        return FieldValue(self, value)

    def compare(self, a: "FieldValue", b: "FieldValue") -> int:
        if a.rule is not self or b.rule is not self:
            raise TypeError(
                f"{self.name} cannot compare values of {a.rule.name} and {b.rule.name}"
            )
        return (a.value > b.value) - (a.value < b.value)

    def __repr__(self) -> str:
        return f"FieldRule({self.name})"


@dataclass(frozen=True, eq=False)
class FieldValue:
    rule: FieldRule
    value: int

    def __post_init__(self) -> None:
        require_not_none(self.rule, "rule")
        object.__setattr__(self, "value", self.rule.check_valid_value(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldValue):
            return NotImplemented
        return self.rule is other.rule and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.rule.id, self.value))

    def __lt__(self, other: "FieldValue") -> bool:
        return self.rule.compare(self, other) < 0

    def __le__(self, other: "FieldValue") -> bool:
        return self.rule.compare(self, other) <= 0

    def __gt__(self, other: "FieldValue") -> bool:
        return self.rule.compare(self, other) > 0

    def __ge__(self, other: "FieldValue") -> bool:
        return self.rule.compare(self, other) >= 0

    def __str__(self) -> str:
        return f"{self.rule.name}={self.value}"


YEAR = FieldRule(RuleId.YEAR, MIN_YEAR, MAX_YEAR)
MONTH_OF_YEAR = FieldRule(RuleId.MONTH_OF_YEAR, 1, 12)
DAY_OF_MONTH = FieldRule(RuleId.DAY_OF_MONTH, 1, 31)
HOUR_OF_DAY = FieldRule(RuleId.HOUR_OF_DAY, 0, 23)
MINUTE_OF_HOUR = FieldRule(RuleId.MINUTE_OF_HOUR, 0, 59)
SECOND_OF_MINUTE = FieldRule(RuleId.SECOND_OF_MINUTE, 0, 59)

_RULES: Dict[RuleId, FieldRule] = {
    r.id: r
    for r in (YEAR, MONTH_OF_YEAR, DAY_OF_MONTH, HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE)
}


def rule_for(rule_id: RuleId) -> FieldRule:
    if rule_id not in _RULES:
        raise KeyError(f"Unknown rule '{rule_id}'. Available: {sorted(r.value for r in _RULES)}")
    return _RULES[rule_id]
