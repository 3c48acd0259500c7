# -*- coding: utf-8 -*-
"""Calendar rules for the proleptic Gregorian calendar.

This module provides the leap-year rule and the month-lengths table used
by the date validators.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import NamedTuple

from sciutil_lib.constants import COMMON_MONTH_LENGTHS
from sciutil_lib.constants import DAYS_IN_COMMON_YEAR
from sciutil_lib.constants import DAYS_IN_LEAP_YEAR
from sciutil_lib.constants import LEAP_FEBRUARY_DAYS
from sciutil_lib.constants import YEAR_MAX
from sciutil_lib.constants import YEAR_MIN
from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException

logger = logging.getLogger(__name__)


class MonthLengths(NamedTuple):
    """Number of days in each month of a year.

    Index 0 holds the total number of days in the year, indices 1..12 the
    length of each month (1 = January). Instances are immutable.
    """

    total: int
    january: int
    february: int
    march: int
    april: int
    may: int
    june: int
    july: int
    august: int
    september: int
    october: int
    november: int
    december: int

    @property
    def is_leap(self) -> bool:
        return self.total == DAYS_IN_LEAP_YEAR

    def days_in(self, month: int) -> int:
        """Get the length of `month` (1-12)."""
        if not 1 <= month <= 12:
            raise SciUtilException(
                ErrorKind.INVALID_FIELD,
                "DAYS_PER_MONTH",
                f"month must be between 1 and 12, got {month}",
            )
        return self[month]


def _check_year(year: int, routine: str) -> None:
    if isinstance(year, bool) or not isinstance(year, Integral):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            routine,
            f"year must be an integer, got {type(year).__name__}",
        )
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise SciUtilException(
            ErrorKind.OUT_OF_RANGE,
            routine,
            f"year must be between {YEAR_MIN} and {YEAR_MAX}, got {year}",
        )


def is_leap(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check, between 1582 and 2100

    Returns:
        True if the year is a leap year.

    Raises:
        SciUtilException: If the year is not an integer or out of range

    Examples:
        >>> is_leap(2000)  # Divisible by 400
        True
        >>> is_leap(1900)  # Divisible by 100 but not 400
        False
    """
    _check_year(year, "IS_LEAP")
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_per_month(year: int | None = None) -> MonthLengths:
    """Build the month-lengths table of a year.

    Without a year, the common-year template is returned (365 days,
    February 28). With a year, February and the total are adjusted for
    leap years.

    Args:
        year: Optional year, between 1582 and 2100

    Returns:
        A fresh MonthLengths table

    Raises:
        SciUtilException: OUT_OF_RANGE/TYPE_MISMATCH for an invalid year,
            PROPAGATED if the leap-year rule fails
    """
    lengths = [DAYS_IN_COMMON_YEAR, *COMMON_MONTH_LENGTHS]
    if year is None:
        return MonthLengths(*lengths)

    _check_year(year, "DAYS_PER_MONTH")

    # Both checks share the same bounds, so this only fires if the leap
    # rule is made stricter than the table
    try:
        leap = is_leap(year)
    except SciUtilException as e:
        logger.debug("Leap-year rule failed for %s: %s", year, e)
        raise SciUtilException.wrap(e, "DAYS_PER_MONTH") from e

    if leap:
        lengths[0] = DAYS_IN_LEAP_YEAR
        lengths[2] = LEAP_FEBRUARY_DAYS

    return MonthLengths(*lengths)


def days_in_month(month: int, year: int) -> int:
    """Get the number of days in a month, accounting for leap years.

    Args:
        month: Month (1-12)
        year: Year

    Returns:
        Number of days in the month
    """
    return days_per_month(year).days_in(month)
