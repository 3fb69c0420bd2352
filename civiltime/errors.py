"""Civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilTimeError. Both
concrete errors also inherit from TypeError, since each one reports a
value of the wrong kind rather than a value out of range: every integer
input normalizes to a definite civil time.
"""

from __future__ import annotations


class CivilTimeError(Exception):
    """Base exception for all civiltime errors."""

    pass


class ValidationError(CivilTimeError, TypeError):
    """A field or step argument is not an integer.

    Out-of-range integers are never rejected (they are normalized);
    only values that cannot be used as integers are.

    Examples:
        - CivilDay(2024, 1.5, 1)
        - ops.add(CivilSecond(2024), "3")
        - CivilDay(True, 1, 1)
    """

    pass


class PrecisionMismatchError(CivilTimeError, TypeError):
    """An operation combined civil times of incompatible precision.

    Examples:
        - CivilDay(2024, 1, 1) - CivilHour(2024, 1, 1)
        - CivilSecond(...).widen(Precision.DAY)
        - next_weekday(CivilSecond(...), Weekday.MONDAY)
    """

    pass


__all__ = [
    "CivilTimeError",
    "ValidationError",
    "PrecisionMismatchError",
]
