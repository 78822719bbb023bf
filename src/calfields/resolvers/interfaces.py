"""
calfields.resolvers.interfaces
------------------------------
Contract for date resolution strategies.

A resolver receives a (year, month, day) triple whose fields are each within
their static ranges but whose combination may not be a real date (for
example February 29 in a common year, or April 31). It either returns a real
``datetime.date`` or raises.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class DateResolver(Protocol):
    def resolve(self, year: int, month: int, day: int) -> date:
        """
        Returns a valid date derived from the triple.

        Raises:
            IllegalFieldValueError: a field is outside its static range.
            InvalidFieldError: the strategy refuses the combination.
        """
        ...
