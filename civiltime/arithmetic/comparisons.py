"""Comparison operations for civil times.

This module provides explicit comparison functions for civil times.
These serve as the canonical implementation; the rich comparison
methods on the civil time classes delegate here.

Comparison Rules:
    - All six fields are always compared, whatever the precision of
      either operand. A CivilDay at midnight equals the CivilSecond at
      the same midnight.
    - Ordering is chronological: field by field from year to second.
    - Comparing a civil time with anything else raises TypeError.

Supported Operations:
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from civiltime._internal.fields import Fields
    from civiltime.core.civil_time import CivilTime


def _fields_of(left: CivilTime, right: CivilTime, op: str) -> tuple[Fields, Fields]:
    from civiltime.core.civil_time import CivilTime

    if not isinstance(left, CivilTime) or not isinstance(right, CivilTime):
        raise TypeError(
            f"{op!r} not supported between instances of {type(left).__name__!r} "
            f"and {type(right).__name__!r}"
        )
    return left.fields, right.fields


def equal(left: CivilTime, right: CivilTime) -> bool:
    """Test whether two civil times denote the same fields.

    Args:
        left: First civil time.
        right: Second civil time (any precision).

    Returns:
        True if all six fields match.

    Raises:
        TypeError: If either operand is not a civil time.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay, CivilSecond
        >>> equal(CivilDay(2024, 1, 15), CivilSecond(2024, 1, 15, 0, 0, 0))
        True
        >>> equal(CivilDay(2024, 1, 15), CivilSecond(2024, 1, 15, 0, 0, 1))
        False
    """
    a, b = _fields_of(left, right, "==")
    return a == b


def not_equal(left: CivilTime, right: CivilTime) -> bool:
    """Test whether two civil times differ in any field."""
    return not equal(left, right)


def less_than(left: CivilTime, right: CivilTime) -> bool:
    """Test if left is chronologically before right.

    Examples:
        >>> from civiltime.core.civil_time import CivilHour, CivilYear
        >>> less_than(CivilYear(2024), CivilHour(2024, 1, 1, 1))
        True
    """
    a, b = _fields_of(left, right, "<")
    return a < b


def less_equal(left: CivilTime, right: CivilTime) -> bool:
    """Test if left is before or equal to right."""
    a, b = _fields_of(left, right, "<=")
    return a <= b


def greater_than(left: CivilTime, right: CivilTime) -> bool:
    """Test if left is chronologically after right."""
    a, b = _fields_of(left, right, ">")
    return a > b


def greater_equal(left: CivilTime, right: CivilTime) -> bool:
    """Test if left is after or equal to right."""
    a, b = _fields_of(left, right, ">=")
    return a >= b


def compare(left: CivilTime, right: CivilTime) -> int:
    """Compare two civil times, returning -1, 0, or 1.

    This is useful for sorting and other comparison-based operations.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> compare(CivilDay(2024, 1, 15), CivilDay(2024, 1, 16))
        -1
    """
    a, b = _fields_of(left, right, "compare")
    return (a > b) - (a < b)


__all__ = [
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
]
