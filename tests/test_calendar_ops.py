"""Tests for weekday and yearday queries."""

from __future__ import annotations

import datetime

import pytest

from civiltime import (
    CivilDay,
    CivilHour,
    CivilMonth,
    CivilSecond,
    CivilYear,
    Weekday,
    get_weekday,
    get_yearday,
    next_weekday,
    prev_weekday,
)
from civiltime.errors import PrecisionMismatchError


class TestGetWeekday:
    """Tests for get_weekday()."""

    def test_epoch_is_thursday(self) -> None:
        """Test the weekday of 1970-01-01."""
        assert get_weekday(CivilDay(1970, 1, 1)) == Weekday.THURSDAY
        assert CivilSecond.epoch().weekday is Weekday.THURSDAY

    def test_against_datetime(self) -> None:
        """Test weekdays against date.isoweekday() across many dates."""
        d = datetime.date(1, 1, 1)
        step = datetime.timedelta(days=997)
        while d.year < 9990:
            cd = CivilDay(d.year, d.month, d.day)
            assert get_weekday(cd).value == d.isoweekday()
            d += step

    def test_every_day_of_a_year(self) -> None:
        """Test weekdays for each day of a leap year."""
        d = datetime.date(2024, 1, 1)
        while d.year == 2024:
            assert CivilDay(d.year, d.month, d.day).weekday.value == d.isoweekday()
            d += datetime.timedelta(days=1)

    def test_uses_date_of_any_precision(self) -> None:
        """Test that finer fields do not affect the weekday."""
        assert get_weekday(CivilSecond(2023, 6, 15, 23, 59, 59)) == Weekday.THURSDAY
        assert get_weekday(CivilMonth(2023, 6)) == Weekday.THURSDAY
        assert get_weekday(CivilYear(2024)) == Weekday.MONDAY

    def test_period_of_400_years(self) -> None:
        """Test that weekdays repeat every 400 years, for any year."""
        for year in (-10**20, -401, -1, 0, 1, 1600, 2**63, 10**25):
            for month in (1, 2, 3, 12):
                base = CivilDay(year % 400 + 400, month, 28)
                assert CivilDay(year, month, 28).weekday == base.weekday

    def test_non_positive_years(self) -> None:
        """Test years zero and below against their 400-year equivalents."""
        assert CivilDay(0, 1, 1).weekday.value == datetime.date(400, 1, 1).isoweekday()
        assert CivilDay(-1, 3, 1).weekday.value == datetime.date(399, 3, 1).isoweekday()

    def test_consecutive_days_advance(self) -> None:
        """Test that each day's weekday follows the previous one's."""
        order = list(Weekday)
        d = CivilDay(1999, 12, 25)
        for _ in range(20):
            following = order[(order.index(d.weekday) + 1) % 7]
            d += 1
            assert d.weekday == following


class TestNextPrevWeekday:
    """Tests for next_weekday() and prev_weekday()."""

    def test_thursday_scenarios(self) -> None:
        """Test the concrete cases around Thursday 2023-06-15."""
        thursday = CivilDay(2023, 6, 15)
        assert next_weekday(thursday, Weekday.MONDAY) == CivilDay(2023, 6, 19)
        assert prev_weekday(thursday, Weekday.MONDAY) == CivilDay(2023, 6, 12)
        assert next_weekday(thursday, Weekday.THURSDAY) == CivilDay(2023, 6, 22)
        assert prev_weekday(thursday, Weekday.THURSDAY) == CivilDay(2023, 6, 8)
        assert next_weekday(thursday, Weekday.FRIDAY) == CivilDay(2023, 6, 16)
        assert prev_weekday(thursday, Weekday.WEDNESDAY) == CivilDay(2023, 6, 14)

    @pytest.mark.parametrize("wd", list(Weekday))
    def test_strictly_after_within_a_week(self, wd: Weekday) -> None:
        """Test that the result is 1-7 days away and on the right weekday."""
        for start in (CivilDay(2016, 2, 27), CivilDay(-5, 12, 30), CivilDay(2017, 1, 1)):
            after = next_weekday(start, wd)
            before = prev_weekday(start, wd)
            assert 1 <= after - start <= 7
            assert 1 <= start - before <= 7
            assert after.weekday == wd
            assert before.weekday == wd

    def test_returns_civil_day(self) -> None:
        """Test that coarser inputs give CivilDay results."""
        result = next_weekday(CivilMonth(2023, 6), Weekday.MONDAY)
        assert type(result) is CivilDay
        assert result == CivilDay(2023, 6, 5)
        assert prev_weekday(CivilYear(2024), Weekday.SUNDAY) == CivilDay(2023, 12, 31)
        assert prev_weekday(CivilYear(2024), Weekday.MONDAY) == CivilDay(2023, 12, 25)

    def test_crosses_month_and_year(self) -> None:
        """Test searches that leave the starting month."""
        assert next_weekday(CivilDay(2016, 2, 28), Weekday.TUESDAY) == CivilDay(2016, 3, 1)
        assert next_weekday(CivilDay(2022, 12, 31), Weekday.SUNDAY) == CivilDay(2023, 1, 1)

    @pytest.mark.parametrize("fn", [next_weekday, prev_weekday])
    def test_finer_than_day_rejected(self, fn) -> None:
        """Test that hour or second inputs raise PrecisionMismatchError."""
        with pytest.raises(PrecisionMismatchError, match="narrow it to Precision.DAY"):
            fn(CivilSecond(2023, 6, 15, 12, 0, 0), Weekday.MONDAY)
        with pytest.raises(PrecisionMismatchError):
            fn(CivilHour(2023, 6, 15, 12), Weekday.MONDAY)


class TestGetYearday:
    """Tests for get_yearday()."""

    def test_bounds(self) -> None:
        """Test the first and last days of common and leap years."""
        assert get_yearday(CivilDay(2023, 1, 1)) == 1
        assert get_yearday(CivilDay(2023, 12, 31)) == 365
        assert get_yearday(CivilDay(2024, 12, 31)) == 366
        assert get_yearday(CivilDay(2000, 12, 31)) == 366
        assert get_yearday(CivilDay(1900, 12, 31)) == 365

    def test_around_february(self) -> None:
        """Test the days either side of the leap day."""
        assert get_yearday(CivilDay(2024, 2, 29)) == 60
        assert get_yearday(CivilDay(2024, 3, 1)) == 61
        assert get_yearday(CivilDay(2023, 3, 1)) == 60

    def test_against_datetime(self) -> None:
        """Test yeardays against timetuple().tm_yday."""
        d = datetime.date(1896, 1, 1)
        step = datetime.timedelta(days=11)
        while d.year < 2105:
            cd = CivilDay(d.year, d.month, d.day)
            assert cd.yearday == d.timetuple().tm_yday
            d += step

    def test_ignores_finer_fields(self) -> None:
        """Test that time of day does not change the yearday."""
        assert CivilSecond(2024, 3, 1, 23, 59, 59).yearday == 61
        assert CivilMonth(2024, 3).yearday == 61

    def test_negative_year(self) -> None:
        """Test leap handling for years before zero."""
        assert get_yearday(CivilDay(-4, 12, 31)) == 366
        assert get_yearday(CivilDay(-1, 12, 31)) == 365
