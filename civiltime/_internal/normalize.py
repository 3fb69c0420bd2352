"""Field normalization for civiltime.

Each stage normalizes exactly one field, finest to coarsest, and hands
the whole-unit carry to the next stage:

    normalize_second -> normalize_minute -> normalize_hour
        -> normalize_month -> normalize_day

Arguments named ``cd``/``ch`` are carries (day/hour deltas) accumulated
by the finer stages. Residuals always use floor semantics, so they are
never negative.

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from civiltime._internal.calendar import (
    days_per_4years,
    days_per_century,
    days_per_month,
    days_per_year,
    year_index,
)
from civiltime._internal.constants import (
    DAYS_PER_CYCLE,
    HOURS_PER_DAY,
    MAX_YEAR,
    MIN_YEAR,
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
    YEARS_PER_CYCLE,
)
from civiltime._internal.fields import Fields

logger = logging.getLogger(__name__)


def _split_cycles(days: int) -> tuple[int, int]:
    """Split a day count into whole 400-year cycles and a remainder.

    Unlike divmod, the remainder keeps the sign of ``days``, so a small
    negative count stays small.
    """
    cycles, rest = divmod(abs(days), DAYS_PER_CYCLE)
    if days < 0:
        return -cycles, -rest
    return cycles, rest


def normalize_day(
    y: int, m: int, d: int, cd: int, hh: int, mm: int, ss: int
) -> Fields:
    """Resolve a base date plus day deltas to a normalized date.

    Args:
        y: The year.
        m: The month, already in 1-12.
        d: The day, any integer.
        cd: A further day delta carried from the time fields.
        hh, mm, ss: Already normalized time fields.

    Returns:
        The normalized Fields.
    """
    # Work on the year modulo 400 and fold the change back in at the end,
    # so the year arithmetic below only ever sees small values.
    ey = y % YEARS_PER_CYCLE
    oey = ey

    cycles, cd = divmod(cd, DAYS_PER_CYCLE)
    ey += cycles * YEARS_PER_CYCLE
    cycles, d = _split_cycles(d)
    ey += cycles * YEARS_PER_CYCLE
    d += cd  # (-146097, 2 * 146097)

    if d > 0:
        if d > DAYS_PER_CYCLE:
            ey += YEARS_PER_CYCLE
            d -= DAYS_PER_CYCLE
    elif d > -365:
        # Stepping back into the previous year is common; skip the
        # century and quadrennium reductions for it.
        ey -= 1
        d += days_per_year(ey, m)
    else:
        ey -= YEARS_PER_CYCLE
        d += DAYS_PER_CYCLE

    # 1 <= d <= 146097 from here on.
    if d > 365:
        yi = year_index(ey, m)
        while True:
            n = days_per_century(yi)
            if d <= n:
                break
            d -= n
            ey += 100
            yi = (yi + 100) % YEARS_PER_CYCLE
        while True:
            n = days_per_4years(yi)
            if d <= n:
                break
            d -= n
            ey += 4
            yi = (yi + 4) % YEARS_PER_CYCLE
        while True:
            n = days_per_year(ey, m)
            if d <= n:
                break
            d -= n
            ey += 1

    if d > 28:
        while True:
            n = days_per_month(ey, m)
            if d <= n:
                break
            d -= n
            m += 1
            if m > MONTHS_PER_YEAR:
                ey += 1
                m = 1

    return Fields(y + (ey - oey), m, d, hh, mm, ss)


def normalize_month(
    y: int, m: int, d: int, cd: int, hh: int, mm: int, ss: int
) -> Fields:
    """Normalize the month into 1-12, carrying whole years."""
    if m != MONTHS_PER_YEAR:
        carry, m0 = divmod(m - 1, MONTHS_PER_YEAR)
        y += carry
        m = m0 + 1
    return normalize_day(y, m, d, cd, hh, mm, ss)


def normalize_hour(
    y: int, m: int, d: int, cd: int, hh: int, mm: int, ss: int
) -> Fields:
    """Normalize the hour into 0-23, carrying whole days into ``cd``."""
    carry, hh = divmod(hh, HOURS_PER_DAY)
    return normalize_month(y, m, d, cd + carry, hh, mm, ss)


def normalize_minute(
    y: int, m: int, d: int, hh: int, ch: int, mm: int, ss: int
) -> Fields:
    """Normalize the minute into 0-59, carrying whole hours into ``ch``.

    The hour field and the hour carry are reduced separately before
    being combined, so neither is added to the other at full size.
    """
    carry, mm = divmod(mm, MINUTES_PER_HOUR)
    ch += carry
    hh_days, hh = divmod(hh, HOURS_PER_DAY)
    ch_days, ch = divmod(ch, HOURS_PER_DAY)
    return normalize_hour(y, m, d, hh_days + ch_days, hh + ch, mm, ss)


def normalize_second(
    y: int, m: int, d: int, hh: int, mm: int, ss: int
) -> Fields:
    """Normalize all six fields, starting from the second.

    Already-canonical fields skip the stages they do not need; the
    result is the same as running the full cascade.
    """
    if 0 <= ss < SECONDS_PER_MINUTE:
        if 0 <= mm < MINUTES_PER_HOUR:
            if 0 <= hh < HOURS_PER_DAY:
                if 1 <= d <= 28 and 1 <= m <= MONTHS_PER_YEAR:
                    return Fields(y, m, d, hh, mm, ss)
                return normalize_month(y, m, d, 0, hh, mm, ss)
            cd, hh = divmod(hh, HOURS_PER_DAY)
            return normalize_hour(y, m, d, cd, hh, mm, ss)
        ch, mm = divmod(mm, MINUTES_PER_HOUR)
        return normalize_minute(y, m, d, hh, ch, mm, ss)
    cm, ss = divmod(ss, SECONDS_PER_MINUTE)
    cm_hours, cm = divmod(cm, MINUTES_PER_HOUR)
    mm_hours, mm = divmod(mm, MINUTES_PER_HOUR)
    return normalize_minute(y, m, d, hh, cm_hours + mm_hours, mm + cm, ss)


def normalize_fields(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> Fields:
    """Return the normalized Fields denoted by possibly out-of-range values.

    Args:
        year: The year.
        month: The month; values outside 1-12 carry into the year.
        day: The day; values outside the month carry into month and year.
        hour: The hour; values outside 0-23 carry into the day.
        minute: The minute; values outside 0-59 carry into the hour.
        second: The second; values outside 0-59 carry into the minute.

    Returns:
        The unique normalized Fields for the same civil time.

    Examples:
        >>> normalize_fields(2015, 2, 29)
        Fields(year=2015, month=3, day=1, hour=0, minute=0, second=0)

        >>> normalize_fields(2016, 1, 0)
        Fields(year=2015, month=12, day=31, hour=0, minute=0, second=0)

        >>> normalize_fields(2016, 14, 1, 0, 0, -1)
        Fields(year=2017, month=1, day=31, hour=23, minute=59, second=59)
    """
    fields = normalize_second(year, month, day, hour, minute, second)
    if not MIN_YEAR <= fields.year <= MAX_YEAR:
        logger.debug("normalized year %d is outside the 64-bit range", fields.year)
    return fields


__all__ = [
    "normalize_day",
    "normalize_month",
    "normalize_hour",
    "normalize_minute",
    "normalize_second",
    "normalize_fields",
]
