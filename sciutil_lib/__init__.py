# -*- coding: utf-8 -*-
"""Scientific Utility Library.

Small, independent helpers for scientific computing code: calendar rules,
date validation and Julian days, type predicates, text helpers, source
line counting, directory checks and bivariate statistics.

Usage:
    # Validate an ISO date-time and get its Julian day
    from sciutil_lib import chk_date_iso
    outcome = chk_date_iso("2018-06-13T12:00:00")
    if outcome.ok:
        print(outcome.julian_day)  # 2458283.0
    else:
        print(outcome.message)

    # Month lengths of a leap year
    from sciutil_lib import days_per_month
    lengths = days_per_month(2016)
    print(lengths.total, lengths.february)  # 366 29
"""

__version__ = "0.1.0"

# Calendar
from sciutil_lib.calendar import MonthLengths
from sciutil_lib.calendar import days_in_month
from sciutil_lib.calendar import days_per_month
from sciutil_lib.calendar import is_leap

# Constants
from sciutil_lib.constants import LEGACY_YEAR_MAX
from sciutil_lib.constants import YEAR_MAX
from sciutil_lib.constants import YEAR_MIN

# Dates
from sciutil_lib.dates import DateFields
from sciutil_lib.dates import DateValidator
from sciutil_lib.dates import ValidationOutcome
from sciutil_lib.dates import calendar_date
from sciutil_lib.dates import chk_date_iso
from sciutil_lib.dates import chk_date_ymd
from sciutil_lib.dates import chk_ymddate
from sciutil_lib.dates import julian_day

# Enums
from sciutil_lib.enums import DateMode
from sciutil_lib.enums import ErrorKind
from sciutil_lib.enums import YearRange

# Errors
from sciutil_lib.errors import SciUtilError
from sciutil_lib.errors import SciUtilException

# Files
from sciutil_lib.files import count_lines
from sciutil_lib.files import is_dir

# Predicates
from sciutil_lib.predicates import is_array
from sciutil_lib.predicates import is_integer
from sciutil_lib.predicates import is_numeric
from sciutil_lib.predicates import is_scalar
from sciutil_lib.predicates import is_string

# Statistics
from sciutil_lib.stats import ComparisonResult
from sciutil_lib.stats import LinearFit
from sciutil_lib.stats import compare

# Strings
from sciutil_lib.strings import capitalize
from sciutil_lib.strings import first_char
from sciutil_lib.strings import str_repeat
from sciutil_lib.strings import strstr
from sciutil_lib.strings import trim_path_sep

__all__ = [
    # Constants
    "LEGACY_YEAR_MAX",
    "YEAR_MAX",
    "YEAR_MIN",
    # Statistics
    "ComparisonResult",
    # Dates
    "DateFields",
    # Enums
    "DateMode",
    "DateValidator",
    "ErrorKind",
    "LinearFit",
    # Calendar
    "MonthLengths",
    # Errors
    "SciUtilError",
    "SciUtilException",
    "ValidationOutcome",
    "YearRange",
    "calendar_date",
    # Strings
    "capitalize",
    "chk_date_iso",
    "chk_date_ymd",
    "chk_ymddate",
    "compare",
    # Files
    "count_lines",
    "days_in_month",
    "days_per_month",
    "first_char",
    # Predicates
    "is_array",
    "is_dir",
    "is_integer",
    "is_leap",
    "is_numeric",
    "is_scalar",
    "is_string",
    "julian_day",
    "str_repeat",
    "strstr",
    "trim_path_sep",
]
