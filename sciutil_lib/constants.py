# -*- coding: utf-8 -*-
"""Constants used throughout the sciutil_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Calendar Bounds
# -----------------------------------------------------------------------------

#: First supported year (Gregorian calendar adoption)
YEAR_MIN: int = 1582

#: Last supported year
YEAR_MAX: int = 2100

#: Upper bound used by the legacy `YYYY-MM-DD` validator
LEGACY_YEAR_MAX: int = 2050

# -----------------------------------------------------------------------------
# Month Lengths
# -----------------------------------------------------------------------------

#: Days in a common (non-leap) year
DAYS_IN_COMMON_YEAR: int = 365

#: Days in a leap year
DAYS_IN_LEAP_YEAR: int = 366

#: Month lengths of a common year, January first
COMMON_MONTH_LENGTHS: tuple[int, ...] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)  # fmt: skip

#: February length in a leap year
LEAP_FEBRUARY_DAYS: int = 29

# -----------------------------------------------------------------------------
# Date Text Formats
# -----------------------------------------------------------------------------

#: Exact length of a `YYYY-MM-DD` date string
DATE_TEXT_LENGTH: int = 10

#: Separator between the date and time parts of an ISO date-time
DATE_TIME_SEPARATOR: str = "T"

#: Separator between year, month and day
DATE_SEPARATOR: str = "-"

#: Separator between hour, minute and second
TIME_SEPARATOR: str = ":"

#: Width (in digits) of the year field
YEAR_WIDTH: int = 4

#: Width (in digits) of the month and day fields
MONTH_DAY_WIDTH: int = 2

# -----------------------------------------------------------------------------
# Julian Day
# -----------------------------------------------------------------------------

#: Sentinel stored in place of a Julian day that could not be computed
INVALID_JULIAN_DAY: float = -1.0

#: Seconds in one day
SECONDS_PER_DAY: int = 86_400

#: Offset of the Fliegel & Van Flandern day-number algorithm
JDN_OFFSET: int = 32_045

# -----------------------------------------------------------------------------
# Statistics
# -----------------------------------------------------------------------------

#: Minimum number of samples accepted by the bivariate comparison
MIN_SAMPLE_SIZE: int = 5

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used when reading source files for line counting
SOURCE_ENCODING = "utf-8"
