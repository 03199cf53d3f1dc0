"""
Unit tests for Gregorian calendar helpers.
"""

import pytest

from datetime_picker.core.calendar_math import clamp_day, days_in_month, is_leap_year
from datetime_picker.core.errors import InvalidArgument


class TestIsLeapYear:
    """Tests for is_leap_year()."""

    @pytest.mark.parametrize("year", [2024, 2000, 1600, 4])
    def test_is_leap_year_when_leap_then_returns_true(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [2023, 1900, 2100, 1])
    def test_is_leap_year_when_common_then_returns_false(self, year):
        assert is_leap_year(year) is False


class TestDaysInMonth:
    """Tests for days_in_month()."""

    def test_days_in_month_when_leap_february_then_returns_29(self):
        assert days_in_month(2024, 2) == 29

    def test_days_in_month_when_common_february_then_returns_28(self):
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28

    def test_days_in_month_when_thirty_day_months_then_returns_30(self):
        assert [days_in_month(2023, m) for m in (4, 6, 9, 11)] == [30, 30, 30, 30]

    def test_days_in_month_when_whole_year_then_sums_to_year_length(self):
        assert sum(days_in_month(2023, m) for m in range(1, 13)) == 365
        assert sum(days_in_month(2024, m) for m in range(1, 13)) == 366

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_days_in_month_when_month_out_of_range_then_raises_error(self, month):
        with pytest.raises(InvalidArgument, match="month must be in 1..12"):
            days_in_month(2024, month)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            days_in_month(2024, 13)


class TestClampDay:
    """Tests for clamp_day()."""

    def test_clamp_day_when_day_overflows_then_returns_month_length(self):
        assert clamp_day(2023, 2, 31) == 28
        assert clamp_day(2024, 2, 30) == 29
        assert clamp_day(2024, 4, 31) == 30

    def test_clamp_day_when_day_fits_then_returns_day(self):
        assert clamp_day(2024, 3, 15) == 15
        assert clamp_day(2024, 1, 31) == 31
