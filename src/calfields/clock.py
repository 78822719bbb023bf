from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol, Union, runtime_checkable

from .core.errors import require_not_none


@runtime_checkable
class Clock(Protocol):
    def today(self) -> date: ...


@dataclass(frozen=True)
class SystemClock:
    """Reads the host clock in local time."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    """Always reports the same day; used for tests and reproducible runs."""
    instant: Union[date, datetime]

    def __post_init__(self) -> None:
        require_not_none(self.instant, "instant")

    def today(self) -> date:
        if isinstance(self.instant, datetime):
            return self.instant.date()
        return self.instant


def system_clock() -> Clock:
    return SystemClock()


def fixed_clock(instant: Union[date, datetime]) -> Clock:
    return FixedClock(instant)
