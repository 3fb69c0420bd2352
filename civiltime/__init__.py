"""Civiltime: civil (calendar) time arithmetic for the proleptic Gregorian calendar.

Civiltime normalizes year/month/day/hour/minute/second values, including
out-of-range ones such as month 14 or day -3, steps them by whole units
of a chosen precision, and counts exact differences between them. Years
are Python integers and are never range-limited.

Core Types:
    CivilYear, CivilMonth, CivilDay, CivilHour, CivilMinute, CivilSecond:
        A civil time significant to the named precision
    CivilTime: Common base of the six civil time types

Units:
    Precision: Civil-time granularities (SECOND through YEAR)
    Weekday: Days of the week

Functions:
    difference: Whole units of any precision between two civil times
    get_weekday, next_weekday, prev_weekday, get_yearday: Calendar queries

Exceptions:
    CivilTimeError: Base exception
    ValidationError: A field is not an integer
    PrecisionMismatchError: Incompatible precisions combined

Example:
    >>> from civiltime import CivilDay, Weekday, next_weekday
    >>> CivilDay(2015, 2, 29)
    CivilDay(2015, 3, 1)
    >>> next_weekday(CivilDay(2023, 6, 15), Weekday.MONDAY)
    CivilDay(2023, 6, 19)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Exceptions
from civiltime.errors import (
    CivilTimeError,
    PrecisionMismatchError,
    ValidationError,
)

# Units
from civiltime.units.precision import Precision
from civiltime.units.weekday import Weekday

# Core types
from civiltime.core.civil_time import (
    CivilDay,
    CivilHour,
    CivilMinute,
    CivilMonth,
    CivilSecond,
    CivilTime,
    CivilYear,
)

# Functions
from civiltime.arithmetic.ops import difference
from civiltime.arithmetic.calendar_ops import (
    get_weekday,
    get_yearday,
    next_weekday,
    prev_weekday,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "CivilTime",
    "CivilYear",
    "CivilMonth",
    "CivilDay",
    "CivilHour",
    "CivilMinute",
    "CivilSecond",
    # Units
    "Precision",
    "Weekday",
    # Functions
    "difference",
    "get_weekday",
    "next_weekday",
    "prev_weekday",
    "get_yearday",
    # Exceptions
    "CivilTimeError",
    "ValidationError",
    "PrecisionMismatchError",
]
