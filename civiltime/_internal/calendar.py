"""Calendar utilities for civiltime.

This module provides the leap-year rules, month and year lengths, and
the day-ordinal engine used for differences between dates.

Ordinal 0 = 1970-01-01.

The ordinal conversion treats March 1 as the first day of the year, so
the leap day is the last day of the (March-based) year, and decomposes
the year into a 400-year era plus a year-of-era in 0-399. The Gregorian
calendar repeats exactly every era (146097 days).

This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_4YEARS,
    DAYS_PER_CENTURY,
    DAYS_PER_CYCLE,
    EPOCH_SHIFT,
    YEARS_PER_CYCLE,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_index(year: int, month: int) -> int:
    """Return the position of (year, month) within the 400-year cycle.

    Months after February count toward the following year, matching
    days_per_year().

    Returns:
        An index in 0-399.
    """
    return (year + (month > 2)) % YEARS_PER_CYCLE


def days_per_century(yi: int) -> int:
    """Return the days in the 100 years starting at cycle index yi."""
    return DAYS_PER_CENTURY + (yi == 0 or yi > 300)


def days_per_4years(yi: int) -> int:
    """Return the days in the 4 years starting at cycle index yi."""
    return DAYS_PER_4YEARS + (yi == 0 or yi > 300 or (yi - 1) % 100 < 96)


def days_per_year(year: int, month: int) -> int:
    """Return the days from (year, month) to (year + 1, month).

    The span includes February of ``year`` when month <= 2, and
    February of ``year + 1`` otherwise.

    Examples:
        >>> days_per_year(2024, 1)  # includes Feb 2024
        366
        >>> days_per_year(2024, 3)  # includes Feb 2025
        365
    """
    return 366 if is_leap_year(year + (month > 2)) else 365


def days_per_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    return DAYS_IN_MONTH[month] + (month == 2 and is_leap_year(year))


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert a normalized year, month, day to days since 1970-01-01.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (valid for the month).

    Returns:
        The signed day count; 0 for 1970-01-01.

    Examples:
        >>> ymd_to_ordinal(1970, 1, 1)
        0
        >>> ymd_to_ordinal(2000, 3, 1)
        11017
        >>> ymd_to_ordinal(1969, 12, 31)
        -1
    """
    eyear = year - 1 if month <= 2 else year
    # Floor division keeps negative years aligned on era boundaries.
    era = eyear // YEARS_PER_CYCLE
    yoe = eyear - era * YEARS_PER_CYCLE  # [0, 399]
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1  # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy  # [0, 146096]
    return era * DAYS_PER_CYCLE + doe - EPOCH_SHIFT


def day_difference(
    y1: int, m1: int, d1: int, y2: int, m2: int, d2: int
) -> int:
    """Return the days from y2-m2-d2 to y1-m1-d1.

    Only the years modulo 400 go through the ordinal polynomial; the
    whole cycles between the two dates are added back as a multiple of
    146097 days. Intermediate values therefore stay near the magnitude
    of the result, even for astronomically large years.

    Examples:
        >>> day_difference(2016, 3, 1, 2016, 2, 1)
        29
    """
    a_c4_off = y1 % YEARS_PER_CYCLE
    b_c4_off = y2 % YEARS_PER_CYCLE
    c4_diff = (y1 - a_c4_off) - (y2 - b_c4_off)
    delta = ymd_to_ordinal(a_c4_off, m1, d1) - ymd_to_ordinal(b_c4_off, m2, d2)
    if c4_diff > 0 and delta < 0:
        delta += 2 * DAYS_PER_CYCLE
        c4_diff -= 2 * YEARS_PER_CYCLE
    elif c4_diff < 0 and delta > 0:
        delta -= 2 * DAYS_PER_CYCLE
        c4_diff += 2 * YEARS_PER_CYCLE
    return c4_diff // YEARS_PER_CYCLE * DAYS_PER_CYCLE + delta


def scale_add(v: int, f: int, a: int) -> int:
    """Return v * f + a without a product larger than the result.

    The reassociation moves v one step toward zero before scaling, so
    the intermediate product never exceeds the final magnitude.

    Examples:
        >>> scale_add(2, 12, -3)
        21
        >>> scale_add(-2, 12, 3)
        -21
    """
    return ((v + 1) * f + a) - f if v < 0 else ((v - 1) * f + a) + f


__all__ = [
    "is_leap_year",
    "year_index",
    "days_per_century",
    "days_per_4years",
    "days_per_year",
    "days_per_month",
    "ymd_to_ordinal",
    "day_difference",
    "scale_add",
]
