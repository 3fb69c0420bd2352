"""Calendar queries over civil times.

Supported Operations:
    - get_weekday: The weekday of a civil time's date
    - next_weekday: The first date strictly after a day with a weekday
    - prev_weekday: The last date strictly before a day with a weekday
    - get_yearday: The day of the year (1-366)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from civiltime._internal.calendar import is_leap_year
from civiltime._internal.constants import DAYS_BEFORE_MONTH, YEARS_PER_CYCLE
from civiltime.errors import PrecisionMismatchError
from civiltime.units.precision import Precision
from civiltime.units.weekday import Weekday

if TYPE_CHECKING:
    from civiltime.core.civil_time import CivilDay, CivilTime

# Indexed by (weekday polynomial % 7) + 6; long enough that no second
# modulo is needed.
_WEEKDAY_BY_MON_OFF: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)

# Per-month offsets for the weekday polynomial; index 0 is unused.
_WEEKDAY_OFFSETS: tuple[int, ...] = (-1, 0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_WEEKDAYS_FORWARD: tuple[Weekday, ...] = tuple(Weekday) * 2
_WEEKDAYS_BACKWARD: tuple[Weekday, ...] = tuple(reversed(Weekday)) * 2


def get_weekday(ct: CivilTime) -> Weekday:
    """Return the weekday of the date of a civil time.

    The year is replaced by a small positive year congruent to it
    modulo 400, which gives the same weekday for every date.

    Args:
        ct: A civil time of any precision.

    Returns:
        The Weekday.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> get_weekday(CivilDay(1970, 1, 1))
        <Weekday.THURSDAY: 4>
    """
    y, m, d = ct.year, ct.month, ct.day
    wd = 2400 + (y % YEARS_PER_CYCLE) - (m < 3)
    wd += wd // 4 - wd // 100 + wd // 400
    wd += _WEEKDAY_OFFSETS[m] + d
    return _WEEKDAY_BY_MON_OFF[wd % 7 + 6]


def _as_day(ct: CivilTime, op: str) -> CivilDay:
    from civiltime.core.civil_time import CivilDay

    if ct.precision.is_finer_than(Precision.DAY):
        raise PrecisionMismatchError(
            f"{op}() needs a day or coarser civil time, got {type(ct).__name__}; "
            "narrow it to Precision.DAY first"
        )
    return CivilDay._make(ct.fields)


def next_weekday(cd: CivilTime, wd: Weekday) -> CivilDay:
    """Return the first day strictly after cd that falls on wd.

    Args:
        cd: A civil time of day, month or year precision.
        wd: The weekday to find.

    Returns:
        A CivilDay 1 to 7 days after cd.

    Raises:
        PrecisionMismatchError: If cd is finer than a day.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> next_weekday(CivilDay(2023, 6, 15), Weekday.MONDAY)  # a Thursday
        CivilDay(2023, 6, 19)
        >>> next_weekday(CivilDay(2023, 6, 15), Weekday.THURSDAY)
        CivilDay(2023, 6, 22)
    """
    day = _as_day(cd, "next_weekday")
    i = _WEEKDAYS_FORWARD.index(get_weekday(day))
    j = _WEEKDAYS_FORWARD.index(wd, i + 1)
    return day + (j - i)


def prev_weekday(cd: CivilTime, wd: Weekday) -> CivilDay:
    """Return the last day strictly before cd that falls on wd.

    Args:
        cd: A civil time of day, month or year precision.
        wd: The weekday to find.

    Returns:
        A CivilDay 1 to 7 days before cd.

    Raises:
        PrecisionMismatchError: If cd is finer than a day.

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> prev_weekday(CivilDay(2023, 6, 15), Weekday.MONDAY)  # a Thursday
        CivilDay(2023, 6, 12)
    """
    day = _as_day(cd, "prev_weekday")
    i = _WEEKDAYS_BACKWARD.index(get_weekday(day))
    j = _WEEKDAYS_BACKWARD.index(wd, i + 1)
    return day - (j - i)


def get_yearday(ct: CivilTime) -> int:
    """Return the day of the year of a civil time's date.

    Returns:
        Day of year (1-366).

    Examples:
        >>> from civiltime.core.civil_time import CivilDay
        >>> get_yearday(CivilDay(2024, 12, 31))  # Leap year
        366
        >>> get_yearday(CivilDay(2023, 3, 1))
        60
    """
    m = ct.month
    feb29 = m > 2 and is_leap_year(ct.year)
    return DAYS_BEFORE_MONTH[m] + feb29 + ct.day


__all__ = [
    "get_weekday",
    "next_weekday",
    "prev_weekday",
    "get_yearday",
]
