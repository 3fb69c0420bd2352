"""Internal constants for civiltime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Field spans
SECONDS_PER_MINUTE: int = 60
MINUTES_PER_HOUR: int = 60
HOURS_PER_DAY: int = 24
MONTHS_PER_YEAR: int = 12

# Gregorian cycle lengths
YEARS_PER_CYCLE: int = 400
DAYS_PER_CYCLE: int = 146_097  # exact repeat period of the calendar
DAYS_PER_CENTURY: int = 36_524  # +1 when the century holds a 400-year leap day
DAYS_PER_4YEARS: int = 1_460  # +1 when the quadrennium holds a leap day
DAYS_PER_YEAR: int = 365

# Day 0 of the ordinal scale is 1970-01-01, which lies this many days
# after 0000-03-01 (the start of era 0 in the March-based decomposition).
EPOCH_SHIFT: int = 719_468
EPOCH_YEAR: int = 1970

# Years outside this range do not fit a signed 64-bit integer. They are
# still computed exactly; the bounds only feed max()/min().
MIN_YEAR: int = -(2**63)
MAX_YEAR: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    -1,  # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before the first of each month in a non-leap year
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    -1, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)


__all__ = [
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "MONTHS_PER_YEAR",
    "YEARS_PER_CYCLE",
    "DAYS_PER_CYCLE",
    "DAYS_PER_CENTURY",
    "DAYS_PER_4YEARS",
    "DAYS_PER_YEAR",
    "EPOCH_SHIFT",
    "EPOCH_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
]
