"""
calfields.core.query
--------------------
The calendrical query protocol: "what is the value of field rule R here?"

Value types answer for themselves through a ``query(rule)`` method. The
standard library's date and time objects cannot, so ``query`` dispatches on
the rule tag for them. An unanswerable rule is always reported as None.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional, Protocol, runtime_checkable

from .errors import UnsupportedRuleError, require_not_none
from .rules import FieldRule, FieldValue, RuleId

_DATE_TAGS = (RuleId.YEAR, RuleId.MONTH_OF_YEAR, RuleId.DAY_OF_MONTH)
_TIME_TAGS = (RuleId.HOUR_OF_DAY, RuleId.MINUTE_OF_HOUR, RuleId.SECOND_OF_MINUTE)


@runtime_checkable
class Calendrical(Protocol):
    """Any object with a callable ``query(rule)`` is treated as a calendrical source."""

    def query(self, rule: FieldRule) -> Optional[FieldValue]: ...


def _date_field(d: date, tag: RuleId) -> int:
    if tag is RuleId.YEAR:
        return d.year
    if tag is RuleId.MONTH_OF_YEAR:
        return d.month
    return d.day


def _time_field(t: Any, tag: RuleId) -> int:
    if tag is RuleId.HOUR_OF_DAY:
        return t.hour
    if tag is RuleId.MINUTE_OF_HOUR:
        return t.minute
    return t.second


def query(source: Any, rule: FieldRule) -> Optional[FieldValue]:
    """Value of ``rule`` in ``source``, or None when the source cannot answer."""
    require_not_none(source, "calendrical")
    require_not_none(rule, "rule")
    if isinstance(source, Calendrical) and callable(source.query):
        return source.query(rule)

    tag = rule.id
    # datetime is a date subclass, so it must be checked first
    if isinstance(source, datetime):
        if tag in _DATE_TAGS:
            return rule.validate(_date_field(source, tag))
        if tag in _TIME_TAGS:
            return rule.validate(_time_field(source, tag))
        return None
    if isinstance(source, date):
        if tag in _DATE_TAGS:
            return rule.validate(_date_field(source, tag))
        return None
    if isinstance(source, time):
        if tag in _TIME_TAGS:
            return rule.validate(_time_field(source, tag))
        return None
    return None


def require(source: Any, rule: FieldRule) -> FieldValue:
    fv = query(source, rule)
    if fv is None:
        raise UnsupportedRuleError(rule, source)
    return fv
