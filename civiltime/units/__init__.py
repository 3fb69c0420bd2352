"""Civil-time units and enumerations.

This module provides:
    - Precision: Civil-time granularities (SECOND through YEAR)
    - Weekday: Days of the week
"""

from __future__ import annotations

from civiltime.units.precision import Precision
from civiltime.units.weekday import Weekday

__all__: list[str] = [
    "Precision",
    "Weekday",
]
