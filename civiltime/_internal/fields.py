"""The normalized civil-time field tuple.

This module is not part of the public API; Fields instances are exposed
read-only through CivilTime.fields.
"""

from __future__ import annotations

from typing import NamedTuple


class Fields(NamedTuple):
    """Normalized civil-time fields: Y-M-D HH:MM:SS.

    Every Fields value handed out by the library is canonical: month in
    1-12, day valid for the year and month, hour in 0-23, minute and
    second in 0-59. Tuple ordering is field-by-field, which is exactly
    chronological ordering.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


__all__ = ["Fields"]
