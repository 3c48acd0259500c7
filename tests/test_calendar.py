# -*- coding: utf-8 -*-
"""Tests for calendar module."""

import logging

import numpy as np
import pytest

from sciutil_lib.calendar import MonthLengths
from sciutil_lib.calendar import days_in_month
from sciutil_lib.calendar import days_per_month
from sciutil_lib.calendar import is_leap
from sciutil_lib.constants import YEAR_MAX
from sciutil_lib.constants import YEAR_MIN
from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException


class TestIsLeap:
    """Tests for is_leap function."""

    def test_divisible_by_400(self):
        """Test that centurial years divisible by 400 are leap years."""
        assert is_leap(2000)
        assert is_leap(1600)

    def test_divisible_by_100_not_400(self):
        """Test that other centurial years are not leap years."""
        assert not is_leap(1900)
        assert not is_leap(2100)
        assert not is_leap(1700)

    def test_divisible_by_4(self):
        """Test regular leap years."""
        assert is_leap(2016)
        assert is_leap(2024)

    def test_not_divisible_by_4(self):
        """Test regular common years."""
        assert not is_leap(2017)
        assert not is_leap(1999)

    def test_bounds_accepted(self):
        """Test that both ends of the supported range are accepted."""
        assert not is_leap(YEAR_MIN)
        assert not is_leap(YEAR_MAX)

    def test_numpy_integer(self):
        """Test that numpy integers are accepted."""
        assert is_leap(np.int64(2000))

    @pytest.mark.parametrize("year", [1581, 2101, 0, -4])
    def test_out_of_range_raises(self, year):
        """Test that years outside [1582, 2100] raise."""
        with pytest.raises(SciUtilException, match="IS_LEAP") as exc_info:
            is_leap(year)
        assert exc_info.value.kind == ErrorKind.OUT_OF_RANGE

    @pytest.mark.parametrize("year", ["2000", 2000.0, True, None])
    def test_non_integer_raises(self, year):
        """Test that non-integer years raise a type error."""
        with pytest.raises(SciUtilException) as exc_info:
            is_leap(year)
        assert exc_info.value.kind == ErrorKind.TYPE_MISMATCH


class TestDaysPerMonth:
    """Tests for days_per_month function."""

    def test_common_year_template(self):
        """Test the table returned without a year."""
        lengths = days_per_month()
        assert lengths == (365, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
        assert lengths.total == 365
        assert lengths.february == 28
        assert not lengths.is_leap

    def test_leap_year(self):
        """Test that February and the total are adjusted in leap years."""
        lengths = days_per_month(2016)
        assert lengths[0] == 366
        assert lengths[2] == 29
        assert lengths.is_leap

    def test_common_year(self):
        """Test a specific common year."""
        lengths = days_per_month(1900)
        assert lengths[0] == 365
        assert lengths[2] == 28

    def test_thirteen_entries(self):
        """Test that the table holds the total plus twelve months."""
        assert len(days_per_month(2020)) == 13
        assert isinstance(days_per_month(2020), MonthLengths)

    def test_all_supported_years_consistent(self):
        """Test table invariants for every supported year."""
        for year in range(YEAR_MIN, YEAR_MAX + 1):
            lengths = days_per_month(year)
            assert sum(lengths[1:]) == lengths[0]
            assert (lengths[0] == 366) == is_leap(year)
            assert (lengths[2] == 29) == (lengths[0] == 366)

    def test_fresh_value_each_call(self):
        """Test that identical calls give equal but independent tables."""
        first = days_per_month(2000)
        second = days_per_month(2000)
        assert first == second
        assert days_per_month() == days_per_month()

    def test_immutable(self):
        """Test that the table cannot be modified."""
        lengths = days_per_month(2000)
        with pytest.raises(TypeError):
            lengths[2] = 30  # type: ignore[index]
        with pytest.raises(AttributeError):
            lengths.total = 1  # type: ignore[misc]

    @pytest.mark.parametrize("year", [1500, 2101])
    def test_out_of_range_raises(self, year):
        """Test that the year range is checked locally."""
        with pytest.raises(SciUtilException, match="DAYS_PER_MONTH") as exc_info:
            days_per_month(year)
        assert exc_info.value.kind == ErrorKind.OUT_OF_RANGE

    def test_leap_rule_failure_is_propagated(self, monkeypatch):
        """Test that a leap-year rule failure is wrapped, retaining its message."""

        def failing_rule(year):
            raise SciUtilException(ErrorKind.OUT_OF_RANGE, "IS_LEAP", "boom")

        monkeypatch.setattr("sciutil_lib.calendar.is_leap", failing_rule)

        with pytest.raises(SciUtilException) as exc_info:
            days_per_month(2000)

        error = exc_info.value
        assert error.kind == ErrorKind.PROPAGATED
        assert error.routine == "DAYS_PER_MONTH"
        assert "Error 7 in IS_LEAP: boom" in str(error)
        assert str(error).startswith("Error 6 in DAYS_PER_MONTH:")

    def test_leap_rule_failure_is_logged(self, monkeypatch, caplog):
        """Test that a leap-year rule failure is logged at DEBUG."""

        def failing_rule(year):
            raise SciUtilException(ErrorKind.OUT_OF_RANGE, "IS_LEAP", "boom")

        monkeypatch.setattr("sciutil_lib.calendar.is_leap", failing_rule)

        with (
            caplog.at_level(logging.DEBUG, logger="sciutil_lib.calendar"),
            pytest.raises(SciUtilException),
        ):
            days_per_month(2000)

        assert "Leap-year rule failed for 2000" in caplog.text


class TestDaysInMonth:
    """Tests for days_in_month function."""

    def test_january(self):
        """Test January has 31 days."""
        assert days_in_month(1, 2024) == 31

    def test_february_normal(self):
        """Test February has 28 days in normal years."""
        assert days_in_month(2, 2023) == 28
        assert days_in_month(2, 2100) == 28  # Divisible by 100, not 400

    def test_february_leap_year(self):
        """Test February has 29 days in leap years."""
        assert days_in_month(2, 2024) == 29  # Divisible by 4
        assert days_in_month(2, 2000) == 29  # Divisible by 400

    @pytest.mark.parametrize("month", [4, 6, 9, 11])
    def test_thirty_day_months(self, month):
        """Test April, June, September and November have 30 days."""
        assert days_in_month(month, 2024) == 30

    def test_december(self):
        """Test December has 31 days."""
        assert days_in_month(12, 2024) == 31

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month_raises(self, month):
        """Test that months outside 1-12 raise."""
        with pytest.raises(SciUtilException, match="month must be between 1 and 12"):
            days_in_month(month, 2024)
