"""Tests for civil time comparisons."""

from __future__ import annotations

import pytest

from civiltime import (
    CivilDay,
    CivilHour,
    CivilMinute,
    CivilMonth,
    CivilSecond,
    CivilYear,
)
from civiltime.arithmetic import comparisons


class TestOperators:
    """Tests for the rich comparison operators."""

    def test_same_class_ordering(self) -> None:
        """Test chronological ordering of same-class values."""
        a = CivilDay(2016, 2, 28)
        b = CivilDay(2016, 2, 29)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b
        assert not a == b

    def test_equal_values(self) -> None:
        """Test that normalized-equal constructions compare equal."""
        assert CivilDay(2016, 2, 30) == CivilDay(2016, 3, 1)
        assert CivilDay(2016, 2, 30) <= CivilDay(2016, 3, 1)
        assert CivilDay(2016, 2, 30) >= CivilDay(2016, 3, 1)

    def test_cross_precision_equality(self) -> None:
        """Test that a coarse value equals the finer value at its start."""
        assert CivilYear(2016) == CivilMonth(2016, 1)
        assert CivilMonth(2016, 1) == CivilDay(2016, 1, 1)
        assert CivilDay(2016, 1, 1) == CivilSecond(2016, 1, 1, 0, 0, 0)
        assert CivilDay(2016, 1, 1) != CivilSecond(2016, 1, 1, 0, 0, 1)

    def test_cross_precision_ordering(self) -> None:
        """Test that ordering compares all six fields."""
        assert CivilYear(2016) < CivilHour(2016, 1, 1, 1)
        assert CivilMinute(2015, 12, 31, 23, 59) < CivilYear(2016)
        assert CivilMonth(2016, 2) > CivilDay(2016, 1, 31)

    def test_field_priority(self) -> None:
        """Test that coarser fields dominate finer ones."""
        assert CivilSecond(2015, 12, 31, 23, 59, 59) < CivilSecond(2016, 1, 1, 0, 0, 0)
        assert CivilSecond(2016, 1, 31, 0, 0, 0) < CivilSecond(2016, 2, 1, 0, 0, 0)
        assert CivilSecond(2016, 1, 1, 0, 59, 59) < CivilSecond(2016, 1, 1, 1, 0, 0)

    def test_negative_years(self) -> None:
        """Test ordering of years before zero."""
        assert CivilYear(-10) < CivilYear(-1) < CivilYear(0) < CivilYear(1)

    def test_sorting_mixed_precisions(self) -> None:
        """Test sorting a list of assorted civil times."""
        values = [
            CivilSecond(2016, 1, 1, 0, 0, 1),
            CivilYear(2015),
            CivilDay(2016, 1, 1),
            CivilMonth(2015, 12),
        ]
        assert sorted(values) == [
            CivilYear(2015),
            CivilMonth(2015, 12),
            CivilDay(2016, 1, 1),
            CivilSecond(2016, 1, 1, 0, 0, 1),
        ]

    def test_equality_with_other_types(self) -> None:
        """Test that civil times never equal other kinds of object."""
        assert CivilYear(2016) != 2016
        assert CivilDay(2016, 1, 1) != (2016, 1, 1, 0, 0, 0)
        assert not CivilDay(2016, 1, 1) == "2016-01-01"

    def test_ordering_with_other_types(self) -> None:
        """Test that ordering against other kinds raises TypeError."""
        with pytest.raises(TypeError):
            CivilDay(2016, 1, 1) < 5  # type: ignore[operator]
        with pytest.raises(TypeError):
            CivilDay(2016, 1, 1) >= None  # type: ignore[operator]


class TestFunctions:
    """Tests for the comparison functions."""

    def test_compare(self) -> None:
        """Test the three-way comparison."""
        a = CivilDay(2024, 1, 15)
        b = CivilDay(2024, 1, 16)
        assert comparisons.compare(a, b) == -1
        assert comparisons.compare(b, a) == 1
        assert comparisons.compare(a, CivilSecond(2024, 1, 15)) == 0

    def test_named_functions(self) -> None:
        """Test that each function agrees with its operator."""
        a = CivilHour(2024, 1, 15, 3)
        b = CivilHour(2024, 1, 15, 4)
        assert comparisons.equal(a, a)
        assert comparisons.not_equal(a, b)
        assert comparisons.less_than(a, b)
        assert comparisons.less_equal(a, b)
        assert comparisons.greater_than(b, a)
        assert comparisons.greater_equal(b, a)

    def test_functions_reject_other_types(self) -> None:
        """Test the TypeError message from the function form."""
        with pytest.raises(TypeError, match="not supported between"):
            comparisons.less_than(CivilDay(2024, 1, 1), 3)  # type: ignore[arg-type]
