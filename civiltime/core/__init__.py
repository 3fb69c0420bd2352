"""Core civil time types.

This module provides the civil time value types, one per precision:
    - CivilYear: Significant to the year
    - CivilMonth: Significant to the month
    - CivilDay: Significant to the day
    - CivilHour: Significant to the hour
    - CivilMinute: Significant to the minute
    - CivilSecond: Significant to the second
    - CivilTime: Their common (abstract) base
"""

from __future__ import annotations

from civiltime.core.civil_time import (
    CivilDay,
    CivilHour,
    CivilMinute,
    CivilMonth,
    CivilSecond,
    CivilTime,
    CivilYear,
    civil_time_class,
)

__all__: list[str] = [
    "CivilTime",
    "CivilYear",
    "CivilMonth",
    "CivilDay",
    "CivilHour",
    "CivilMinute",
    "CivilSecond",
    "civil_time_class",
]
