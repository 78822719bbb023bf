"""calfields public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_resolvers,
    get_resolver,
    register_resolver,
    resolve_date,
    month_day_at_year,
)
from .clock import Clock, FixedClock, SystemClock, fixed_clock, system_clock
from .core.errors import (
    CalfieldsError,
    CalendricalParseError,
    IllegalFieldValueError,
    InvalidFieldError,
    MissingArgumentError,
    UnsupportedRuleError,
)
from .core.query import Calendrical, query, require
from .core.rules import (
    DAY_OF_MONTH,
    HOUR_OF_DAY,
    MINUTE_OF_HOUR,
    MONTH_OF_YEAR,
    SECOND_OF_MINUTE,
    YEAR,
    FieldRule,
    FieldValue,
    RuleId,
)
from .core.time import ISO_CHRONOLOGY, days_in_month, is_leap_year
from .core.types import FieldMap, Month
from .formatting.pattern import ISO_LOCAL_DATE, ISO_MONTH_DAY, DateTimeFormatter, pattern
from .month_day import MonthDay
from .resolvers.interfaces import DateResolver
from .resolvers.standard import next_valid, previous_valid, strict

__all__ = [
    "list_resolvers",
    "get_resolver",
    "register_resolver",
    "resolve_date",
    "month_day_at_year",
    "Clock",
    "FixedClock",
    "SystemClock",
    "fixed_clock",
    "system_clock",
    "CalfieldsError",
    "CalendricalParseError",
    "IllegalFieldValueError",
    "InvalidFieldError",
    "MissingArgumentError",
    "UnsupportedRuleError",
    "Calendrical",
    "query",
    "require",
    "DAY_OF_MONTH",
    "HOUR_OF_DAY",
    "MINUTE_OF_HOUR",
    "MONTH_OF_YEAR",
    "SECOND_OF_MINUTE",
    "YEAR",
    "FieldRule",
    "FieldValue",
    "RuleId",
    "ISO_CHRONOLOGY",
    "days_in_month",
    "is_leap_year",
    "FieldMap",
    "Month",
    "ISO_LOCAL_DATE",
    "ISO_MONTH_DAY",
    "DateTimeFormatter",
    "pattern",
    "MonthDay",
    "DateResolver",
    "next_valid",
    "previous_valid",
    "strict",
]
