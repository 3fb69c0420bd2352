"""Civil time classes at each of the six precisions.

This module provides CivilTime, the common base of the civil-time value
types, and its six concrete precisions:

    CivilYear, CivilMonth, CivilDay, CivilHour, CivilMinute, CivilSecond

A civil time is a Y-M-D HH:MM:SS value with no time zone. Construction
accepts any integers and normalizes them, so CivilDay(2016, 1, 32) is
February 1, 2016. Fields finer than the class precision are dropped to
their minimum: CivilMonth(2016, 2, 20) is 2016-02-01 00:00:00.

The concrete classes are siblings, not a subclass chain, so none of them
is usable where another is expected.
"""

from __future__ import annotations

from typing import ClassVar, Self, overload

from civiltime._internal.calendar import ymd_to_ordinal
from civiltime._internal.constants import EPOCH_YEAR, MAX_YEAR, MIN_YEAR
from civiltime._internal.fields import Fields
from civiltime._internal.normalize import normalize_fields
from civiltime._internal.validation import validate_integer
from civiltime.arithmetic import calendar_ops, comparisons, ops
from civiltime.errors import PrecisionMismatchError
from civiltime.units.precision import Precision
from civiltime.units.weekday import Weekday


def _is_integral(value: object) -> bool:
    return not isinstance(value, bool) and hasattr(type(value), "__index__")


class CivilTime:
    """A civil time: Y-M-D HH:MM:SS significant down to a precision.

    CivilTime itself is abstract; construct one of the concrete
    precisions instead. All of them share this interface.

    Arithmetic steps in units of the precision: adding 1 to a CivilDay
    moves one day, adding 1 to a CivilMonth moves one month. Subtracting
    two civil times of the same class gives the number of those units
    between them.

    Comparison looks at all six fields, so civil times of different
    precisions can be compared and sorted together.

    Attributes:
        precision: The class precision (a Precision member).

    Examples:
        >>> CivilDay(2015, 2, 29)  # 2015 is not a leap year
        CivilDay(2015, 3, 1)

        >>> CivilSecond(2015, 1, 1, 0, 0, -1)
        CivilSecond(2014, 12, 31, 23, 59, 59)

        >>> CivilDay(2016, 3, 1) - CivilDay(2016, 2, 1)
        29

        >>> CivilDay(2016, 3, 1) == CivilSecond(2016, 3, 1, 0, 0, 0)
        True
    """

    __slots__ = ("_fields",)

    precision: ClassVar[Precision]

    _fields: Fields

    def __init__(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        """Create a civil time from possibly out-of-range fields.

        Only the year is required; omitted fields default to their
        minimum. Any integer is accepted for any field and carried into
        the coarser fields as needed.

        Args:
            year: The year (astronomical numbering; 0 is 1 BCE).
            month: The month; 13 is January of the next year.
            day: The day; 0 is the last day of the previous month.
            hour: The hour.
            minute: The minute.
            second: The second.

        Raises:
            ValidationError: If a field is not an integer.
            TypeError: If called on CivilTime itself.

        Examples:
            >>> CivilMonth(2016, 14)
            CivilMonth(2017, 2)

            >>> CivilHour(2016, 1, 1, -1)
            CivilHour(2015, 12, 31, 23)
        """
        if type(self) is CivilTime:
            raise TypeError(
                "CivilTime cannot be instantiated; use CivilYear, CivilMonth, "
                "CivilDay, CivilHour, CivilMinute or CivilSecond"
            )
        fields = normalize_fields(
            validate_integer("year", year),
            validate_integer("month", month),
            validate_integer("day", day),
            validate_integer("hour", hour),
            validate_integer("minute", minute),
            validate_integer("second", second),
        )
        self._fields = ops.align_fields(self.precision, fields)

    @classmethod
    def _make(cls, fields: Fields) -> Self:
        """Build an instance from already-normalized fields."""
        instance = object.__new__(cls)
        instance._fields = ops.align_fields(cls.precision, fields)
        return instance

    @classmethod
    def from_fields(cls, fields: tuple[int, int, int, int, int, int]) -> Self:
        """Create a civil time from a six-field tuple.

        The tuple is normalized like constructor arguments.

        Examples:
            >>> CivilDay.from_fields((2016, 2, 30, 0, 0, 0))
            CivilDay(2016, 3, 1)
        """
        return cls(*fields)

    @classmethod
    def epoch(cls) -> Self:
        """Return 1970-01-01 00:00:00 at this precision."""
        return cls._make(Fields(EPOCH_YEAR, 1, 1, 0, 0, 0))

    @classmethod
    def max(cls) -> Self:
        """Return the latest civil time whose year fits in 64 bits."""
        return cls._make(Fields(MAX_YEAR, 12, 31, 23, 59, 59))

    @classmethod
    def min(cls) -> Self:
        """Return the earliest civil time whose year fits in 64 bits."""
        return cls._make(Fields(MIN_YEAR, 1, 1, 0, 0, 0))

    @property
    def year(self) -> int:
        """Return the year (can be zero or negative)."""
        return self._fields.year

    @property
    def month(self) -> int:
        """Return the month (1-12)."""
        return self._fields.month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._fields.day

    @property
    def hour(self) -> int:
        """Return the hour (0-23)."""
        return self._fields.hour

    @property
    def minute(self) -> int:
        """Return the minute (0-59)."""
        return self._fields.minute

    @property
    def second(self) -> int:
        """Return the second (0-59)."""
        return self._fields.second

    @property
    def fields(self) -> Fields:
        """Return all six normalized fields as a named tuple."""
        return self._fields

    @property
    def weekday(self) -> Weekday:
        """Return the weekday of this civil time's date.

        Examples:
            >>> CivilDay(1970, 1, 1).weekday
            <Weekday.THURSDAY: 4>
        """
        return calendar_ops.get_weekday(self)

    @property
    def yearday(self) -> int:
        """Return the day of the year (1-366)."""
        return calendar_ops.get_yearday(self)

    def to_ordinal(self) -> int:
        """Return the days from 1970-01-01 to this civil time's date.

        Examples:
            >>> CivilDay(1970, 1, 2).to_ordinal()
            1
            >>> CivilSecond(1969, 12, 31, 23, 59, 59).to_ordinal()
            -1
        """
        y, m, d = self._fields[:3]
        return ymd_to_ordinal(y, m, d)

    # -------------------------------------------------------------------------
    # Precision conversions
    # -------------------------------------------------------------------------

    def widen(self, target: Precision | type[CivilTime]) -> CivilTime:
        """Convert to an equal or finer precision; nothing is lost.

        The new finer fields are at their minimum.

        Args:
            target: A Precision or a civil time class.

        Returns:
            The same civil time at the target precision.

        Raises:
            PrecisionMismatchError: If target is coarser than this
                precision, which would discard fields.

        Examples:
            >>> CivilDay(2016, 2, 3).widen(Precision.SECOND)
            CivilSecond(2016, 2, 3, 0, 0, 0)
        """
        precision = _precision_of(target)
        if precision.is_coarser_than(self.precision):
            raise PrecisionMismatchError(
                f"cannot widen {type(self).__name__} to {precision}; "
                "use narrow() to discard fields"
            )
        return _CLASSES[precision]._make(self._fields)

    def narrow(self, target: Precision | type[CivilTime]) -> CivilTime:
        """Convert to an equal or coarser precision, dropping finer fields.

        Args:
            target: A Precision or a civil time class.

        Returns:
            The civil time truncated to the target precision.

        Raises:
            PrecisionMismatchError: If target is finer than this
                precision; use widen() for that.

        Examples:
            >>> CivilSecond(2016, 2, 3, 4, 5, 6).narrow(Precision.DAY)
            CivilDay(2016, 2, 3)
        """
        precision = _precision_of(target)
        if precision.is_finer_than(self.precision):
            raise PrecisionMismatchError(
                f"cannot narrow {type(self).__name__} to {precision}; "
                "use widen() to add fields"
            )
        return _CLASSES[precision]._make(self._fields)

    def align(self, target: Precision | type[CivilTime]) -> CivilTime:
        """Convert to any precision.

        Equivalent to widen() or narrow(), whichever applies.

        Examples:
            >>> CivilHour(2016, 2, 3, 4).align(CivilMonth)
            CivilMonth(2016, 2)
        """
        return _CLASSES[_precision_of(target)]._make(self._fields)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: int) -> Self:
        """Step forward by other units of this precision.

        Examples:
            >>> CivilHour(2016, 2, 28, 23) + 25
            CivilHour(2016, 3, 1, 0)
        """
        if not _is_integral(other):
            return NotImplemented
        return ops.add(self, other)

    def __radd__(self, other: int) -> Self:
        """Support ``n + civil_time``."""
        return self.__add__(other)

    @overload
    def __sub__(self, other: int) -> Self: ...

    @overload
    def __sub__(self, other: Self) -> int: ...

    def __sub__(self, other: int | Self) -> Self | int:
        """Step backward, or count units since another civil time.

        Raises:
            PrecisionMismatchError: If other is a civil time of a
                different precision.

        Examples:
            >>> CivilMonth(2016, 3) - 2
            CivilMonth(2016, 1)

            >>> CivilMonth(2016, 3) - CivilMonth(2015, 1)
            14
        """
        if not isinstance(other, CivilTime) and not _is_integral(other):
            return NotImplemented
        return ops.subtract(self, other)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.not_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.less_than(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.less_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return comparisons.greater_equal(self, other)

    def __hash__(self) -> int:
        """Hash on the fields, so equal civil times hash alike."""
        return hash(self._fields)

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        """Return a string like 'CivilDay(2016, 2, 3)'."""
        count = _FIELD_COUNTS[self.precision]
        args = ", ".join(str(v) for v in self._fields[:count])
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        """Return an ISO 8601 style string cut at this precision.

        Examples:
            >>> str(CivilMinute(2016, 2, 3, 4, 5))
            '2016-02-03T04:05'
            >>> str(CivilYear(-44))
            '-0044'
        """
        y, m, d, hh, mm, ss = self._fields
        text = f"{y:04d}" if y >= 0 else f"{y:05d}"
        parts = (f"-{m:02d}", f"-{d:02d}", f"T{hh:02d}", f":{mm:02d}", f":{ss:02d}")
        return text + "".join(parts[: _FIELD_COUNTS[self.precision] - 1])

    def __reduce__(self) -> tuple[type[CivilTime], tuple[int, ...]]:
        return (type(self), tuple(self._fields))

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict) -> Self:
        return self


class CivilYear(CivilTime):
    """A civil time significant to the year."""

    __slots__ = ()
    precision = Precision.YEAR


class CivilMonth(CivilTime):
    """A civil time significant to the month."""

    __slots__ = ()
    precision = Precision.MONTH


class CivilDay(CivilTime):
    """A civil time significant to the day.

    Examples:
        >>> CivilDay(2016, 12, 31) + 1
        CivilDay(2017, 1, 1)
    """

    __slots__ = ()
    precision = Precision.DAY

    @classmethod
    def from_ordinal(cls, ordinal: int) -> CivilDay:
        """Create a CivilDay from days since 1970-01-01.

        Examples:
            >>> CivilDay.from_ordinal(-1)
            CivilDay(1969, 12, 31)
        """
        return cls.epoch() + validate_integer("ordinal", ordinal)


class CivilHour(CivilTime):
    """A civil time significant to the hour."""

    __slots__ = ()
    precision = Precision.HOUR


class CivilMinute(CivilTime):
    """A civil time significant to the minute."""

    __slots__ = ()
    precision = Precision.MINUTE


class CivilSecond(CivilTime):
    """A civil time significant to the second."""

    __slots__ = ()
    precision = Precision.SECOND


_CLASSES: dict[Precision, type[CivilTime]] = {
    Precision.YEAR: CivilYear,
    Precision.MONTH: CivilMonth,
    Precision.DAY: CivilDay,
    Precision.HOUR: CivilHour,
    Precision.MINUTE: CivilMinute,
    Precision.SECOND: CivilSecond,
}

# Fields shown by repr/str at each precision
_FIELD_COUNTS: dict[Precision, int] = {
    Precision.YEAR: 1,
    Precision.MONTH: 2,
    Precision.DAY: 3,
    Precision.HOUR: 4,
    Precision.MINUTE: 5,
    Precision.SECOND: 6,
}


def _precision_of(target: Precision | type[CivilTime]) -> Precision:
    if isinstance(target, Precision):
        return target
    if isinstance(target, type) and issubclass(target, CivilTime) and target is not CivilTime:
        return target.precision
    raise TypeError(
        f"expected a Precision or a civil time class, got {target!r}"
    )


def civil_time_class(precision: Precision) -> type[CivilTime]:
    """Return the civil time class for a precision.

    Examples:
        >>> civil_time_class(Precision.HOUR)
        <class 'civiltime.core.civil_time.CivilHour'>
    """
    return _CLASSES[precision]


__all__ = [
    "CivilTime",
    "CivilYear",
    "CivilMonth",
    "CivilDay",
    "CivilHour",
    "CivilMinute",
    "CivilSecond",
    "civil_time_class",
]
