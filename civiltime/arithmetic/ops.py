"""Standalone arithmetic operations for civil times.

This module provides explicit functions for civil-time arithmetic that
serve as the canonical implementation. The dunder methods on the civil
time classes delegate to these functions.

Field-level operations (on normalized Fields):
    - step_fields: Add n units of a precision
    - difference_fields: Count units of a precision between two Fields
    - align_fields: Reset every field finer than a precision

Civil-time operations:
    - add: CivilTime + int -> CivilTime
    - subtract: CivilTime - int -> CivilTime, CivilTime - CivilTime -> int
    - difference: Whole units of any precision between two civil times

Type Combinations:
    - CivilX + int -> CivilX
    - CivilX - int -> CivilX
    - CivilX - CivilX -> int
    - CivilX - CivilY -> PrecisionMismatchError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, overload

from civiltime._internal.calendar import day_difference, scale_add
from civiltime._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)
from civiltime._internal.fields import Fields
from civiltime._internal.normalize import (
    normalize_day,
    normalize_hour,
    normalize_minute,
    normalize_month,
    normalize_second,
)
from civiltime._internal.validation import validate_integer
from civiltime.errors import PrecisionMismatchError
from civiltime.units.precision import Precision

if TYPE_CHECKING:
    from civiltime.core.civil_time import CivilTime

C = TypeVar("C", bound="CivilTime")


# =============================================================================
# Field-level operations
# =============================================================================


def step_fields(precision: Precision, f: Fields, n: int) -> Fields:
    """Return the Fields n units of ``precision`` after f.

    The field named by ``precision`` is the one that varies; coarser
    fields absorb the carry through the normalization cascade.

    Examples:
        >>> step_fields(Precision.DAY, Fields(2016, 2, 28, 0, 0, 0), 2)
        Fields(year=2016, month=3, day=1, hour=0, minute=0, second=0)
    """
    y, m, d, hh, mm, ss = f
    if precision is Precision.SECOND:
        carry, rem = divmod(n, SECONDS_PER_MINUTE)
        return normalize_second(y, m, d, hh, mm + carry, ss + rem)
    if precision is Precision.MINUTE:
        carry, rem = divmod(n, MINUTES_PER_HOUR)
        return normalize_minute(y, m, d, hh + carry, 0, mm + rem, ss)
    if precision is Precision.HOUR:
        carry, rem = divmod(n, HOURS_PER_DAY)
        return normalize_hour(y, m, d + carry, 0, hh + rem, mm, ss)
    if precision is Precision.DAY:
        return normalize_day(y, m, d, n, hh, mm, ss)
    if precision is Precision.MONTH:
        carry, rem = divmod(n, MONTHS_PER_YEAR)
        return normalize_month(y + carry, m + rem, d, 0, hh, mm, ss)
    return Fields(y + n, m, d, hh, mm, ss)


def difference_fields(precision: Precision, f1: Fields, f2: Fields) -> int:
    """Return the number of ``precision`` units from f2 to f1.

    Each unit finer than a day is the difference in the next coarser
    unit scaled up, plus the difference of its own field. Months are
    built on years the same way.

    Examples:
        >>> a = Fields(2016, 3, 1, 0, 0, 0)
        >>> b = Fields(2016, 2, 1, 0, 0, 0)
        >>> difference_fields(Precision.DAY, a, b)
        29
        >>> difference_fields(Precision.HOUR, a, b)
        696
    """
    if precision is Precision.YEAR:
        return f1.year - f2.year
    if precision is Precision.MONTH:
        years = difference_fields(Precision.YEAR, f1, f2)
        return scale_add(years, MONTHS_PER_YEAR, f1.month - f2.month)
    if precision is Precision.DAY:
        return day_difference(f1.year, f1.month, f1.day, f2.year, f2.month, f2.day)
    if precision is Precision.HOUR:
        days = difference_fields(Precision.DAY, f1, f2)
        return scale_add(days, HOURS_PER_DAY, f1.hour - f2.hour)
    if precision is Precision.MINUTE:
        hours = difference_fields(Precision.HOUR, f1, f2)
        return scale_add(hours, MINUTES_PER_HOUR, f1.minute - f2.minute)
    minutes = difference_fields(Precision.MINUTE, f1, f2)
    return scale_add(minutes, SECONDS_PER_MINUTE, f1.second - f2.second)


def align_fields(precision: Precision, f: Fields) -> Fields:
    """Return f with every field finer than ``precision`` at its minimum.

    Examples:
        >>> align_fields(Precision.MONTH, Fields(2015, 2, 3, 4, 5, 6))
        Fields(year=2015, month=2, day=1, hour=0, minute=0, second=0)
    """
    y, m, d, hh, mm, ss = f
    if precision is Precision.SECOND:
        return f
    if precision is Precision.MINUTE:
        return Fields(y, m, d, hh, mm, 0)
    if precision is Precision.HOUR:
        return Fields(y, m, d, hh, 0, 0)
    if precision is Precision.DAY:
        return Fields(y, m, d, 0, 0, 0)
    if precision is Precision.MONTH:
        return Fields(y, m, 1, 0, 0, 0)
    return Fields(y, 1, 1, 0, 0, 0)


# =============================================================================
# Civil-time operations
# =============================================================================


def add(ct: C, n: int) -> C:
    """Step a civil time forward by n units of its own precision.

    Args:
        ct: A civil time of any precision.
        n: The number of units to add (can be negative).

    Returns:
        A new civil time of the same class.

    Raises:
        ValidationError: If n is not an integer.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay, CivilMonth
        >>> add(CivilDay(2015, 2, 28), 1)
        CivilDay(2015, 3, 1)

        >>> add(CivilMonth(2015, 11), 3)
        CivilMonth(2016, 2)
    """
    n = validate_integer("n", n)
    return ct._make(step_fields(ct.precision, ct.fields, n))


@overload
def subtract(left: C, right: int) -> C: ...


@overload
def subtract(left: C, right: C) -> int: ...


def subtract(left: C, right: C | int) -> C | int:
    """Subtract a unit count or a civil time of the same precision.

    Subtracting an int steps the civil time backward. Subtracting a
    civil time returns the signed number of whole units (of the shared
    precision) from right to left.

    Args:
        left: A civil time.
        right: An int, or a civil time of the same precision as left.

    Returns:
        A new civil time (for an int) or an int (for a civil time).

    Raises:
        PrecisionMismatchError: If right is a civil time of a different
            precision; "days minus hours" has no single unit.
        ValidationError: If right is neither a civil time nor an integer.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> subtract(CivilDay(2016, 3, 1), CivilDay(2016, 2, 1))
        29

        >>> subtract(CivilDay(2016, 3, 1), 1)
        CivilDay(2016, 2, 29)
    """
    from civiltime.core.civil_time import CivilTime

    if isinstance(right, CivilTime):
        if type(left) is not type(right):
            raise PrecisionMismatchError(
                f"cannot subtract {type(right).__name__} from {type(left).__name__}"
            )
        return difference_fields(left.precision, left.fields, right.fields)
    n = validate_integer("n", right)
    return left._make(step_fields(left.precision, left.fields, -n))


def difference(unit: Precision, left: CivilTime, right: CivilTime) -> int:
    """Return the whole ``unit``s from right to left.

    Both civil times are first aligned to ``unit``, so the result
    counts unit boundaries crossed, and the operands may have any
    precision.

    Args:
        unit: The precision to count in.
        left: The later (for a positive result) civil time.
        right: The earlier civil time.

    Returns:
        A signed integer; positive when left is later than right.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay, CivilSecond
        >>> difference(Precision.MONTH, CivilDay(2016, 3, 1), CivilDay(2015, 12, 31))
        3

        >>> difference(Precision.DAY, CivilSecond(2016, 1, 1), CivilDay(2016, 1, 8))
        -7
    """
    return difference_fields(
        unit,
        align_fields(unit, left.fields),
        align_fields(unit, right.fields),
    )


__all__ = [
    "step_fields",
    "difference_fields",
    "align_fields",
    "add",
    "subtract",
    "difference",
]
