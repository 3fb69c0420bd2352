"""Weekday enumeration.

This module provides the Weekday enum for the seven days of the week.
"""

from __future__ import annotations

from enum import Enum


class Weekday(Enum):
    """The days of the week; ``.value`` is the ISO 8601 day number.

    Examples:
        >>> Weekday.MONDAY.value
        1

        >>> str(Weekday.SUNDAY)
        'Sunday'
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self) -> str:
        return self.name.capitalize()


MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY
WEDNESDAY = Weekday.WEDNESDAY
THURSDAY = Weekday.THURSDAY
FRIDAY = Weekday.FRIDAY
SATURDAY = Weekday.SATURDAY
SUNDAY = Weekday.SUNDAY


__all__ = [
    "Weekday",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]
