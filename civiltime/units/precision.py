"""Precision enumeration for civil times.

This module provides the Precision enum naming the six civil-time
granularities, from SECOND (finest) to YEAR (coarsest), together with
the ordering between them.
"""

from __future__ import annotations

from enum import Enum


class Precision(Enum):
    """The granularity at which a civil time is significant.

    A precision decides which fields of a civil time are kept (finer
    fields sit at their minimum) and the unit in which the civil time
    steps and differences are counted.

    Precisions are totally ordered by granularity:
    YEAR > MONTH > DAY > HOUR > MINUTE > SECOND.

    Examples:
        >>> Precision.DAY.is_coarser_than(Precision.HOUR)
        True

        >>> Precision.MINUTE.span
        60

        >>> Precision.DAY.span is None
        True
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    @property
    def rank(self) -> int:
        """Return the position in the granularity order (SECOND is 0)."""
        return _RANKS[self]

    @property
    def span(self) -> int | None:
        """Return how many of this unit make one of the next coarser unit.

        Returns:
            60, 60, 24 and 12 for SECOND, MINUTE, HOUR and MONTH; None
            for DAY (months vary in length) and YEAR (nothing coarser).
        """
        return _SPANS[self]

    def is_coarser_than(self, other: Precision) -> bool:
        """Return True if this precision is strictly coarser than other."""
        return _RANKS[self] > _RANKS[other]

    def is_finer_than(self, other: Precision) -> bool:
        """Return True if this precision is strictly finer than other."""
        return _RANKS[self] < _RANKS[other]

    def coarser(self) -> Precision | None:
        """Return the next coarser precision, or None for YEAR."""
        rank = _RANKS[self] + 1
        return _ORDER[rank] if rank < len(_ORDER) else None

    def finer(self) -> Precision | None:
        """Return the next finer precision, or None for SECOND."""
        rank = _RANKS[self] - 1
        return _ORDER[rank] if rank >= 0 else None

    def __str__(self) -> str:
        return self.value


# Finest first
_ORDER: tuple[Precision, ...] = (
    Precision.SECOND,
    Precision.MINUTE,
    Precision.HOUR,
    Precision.DAY,
    Precision.MONTH,
    Precision.YEAR,
)

_RANKS: dict[Precision, int] = {p: i for i, p in enumerate(_ORDER)}

_SPANS: dict[Precision, int | None] = {
    Precision.SECOND: 60,
    Precision.MINUTE: 60,
    Precision.HOUR: 24,
    Precision.DAY: None,  # Variable length months
    Precision.MONTH: 12,
    Precision.YEAR: None,
}


__all__ = ["Precision"]
