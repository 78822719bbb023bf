from __future__ import annotations

from typing import Any


class CalfieldsError(Exception):
    """Base error."""


class IllegalFieldValueError(CalfieldsError, ValueError):
    """Raised when a raw value lies outside a rule's static range."""

    def __init__(self, rule: Any, value: int, message: str | None = None):
        self.rule = rule
        self.value = value
        if message is None:
            message = (
                f"Illegal value for {rule.name} field, value {value} is not "
                f"in the range {rule.minimum} to {rule.maximum}"
            )
        super().__init__(message)


class InvalidFieldError(CalfieldsError, ValueError):
    """Raised when an in-range value is inconsistent with another fixed field."""

    def __init__(self, message: str, rule: Any):
        self.rule = rule
        super().__init__(message)


class UnsupportedRuleError(CalfieldsError, LookupError):
    """Raised when a source cannot answer a required field."""

    def __init__(self, rule: Any, source: Any = None):
        self.rule = rule
        self.source = source
        where = f" from {type(source).__name__}" if source is not None else ""
        super().__init__(f"Rule '{rule.name}' cannot be queried{where}")


class CalendricalParseError(CalfieldsError, ValueError):
    """Raised when text cannot be tokenized; carries the input and error offset."""

    def __init__(self, message: str, parsed_string: str, error_index: int):
        self.parsed_string = parsed_string
        self.error_index = error_index
        super().__init__(f"{message}: '{parsed_string}' at index {error_index}")


class MissingArgumentError(CalfieldsError, TypeError):
    """Raised when a required argument is None."""


def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise MissingArgumentError(f"{name} must not be None")
    return value
