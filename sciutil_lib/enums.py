# -*- coding: utf-8 -*-
"""Enumerations for sciutil_lib.

This module contains the error taxonomy shared by every routine of the
library, and the modes and named configurations of the date validator.
"""

from enum import Enum

from sciutil_lib.constants import LEGACY_YEAR_MAX
from sciutil_lib.constants import YEAR_MAX
from sciutil_lib.constants import YEAR_MIN


class ErrorKind(int, Enum):
    """Kinds of failure a routine can report.

    The integer value is the status code reported to the caller; 0 is
    reserved for success.

    Attributes:
        MISSING_ARGUMENT: A required argument is absent or empty
        TYPE_MISMATCH: An argument has the wrong type
        MALFORMED_LENGTH: Input text has the wrong length
        MALFORMED_SEPARATOR: Input text does not split into the expected parts
        INVALID_FIELD: A parsed field is out of its valid range
        PROPAGATED: A dependency failed; its message is retained
        OUT_OF_RANGE: A numeric argument is outside the supported range
        SIZE_MISMATCH: Array arguments have incompatible or too small sizes
        IO_FAILURE: A file could not be read
    """

    MISSING_ARGUMENT = 1
    TYPE_MISMATCH = 2
    MALFORMED_LENGTH = 3
    MALFORMED_SEPARATOR = 4
    INVALID_FIELD = 5
    PROPAGATED = 6
    OUT_OF_RANGE = 7
    SIZE_MISMATCH = 8
    IO_FAILURE = 9

    @property
    def code(self) -> int:
        """Status code reported for this kind of failure."""
        return int(self.value)


class DateMode(str, Enum):
    """Input format accepted by the date validator.

    Attributes:
        DATE: `YYYY-MM-DD`, fixed length 10
        DATE_TIME: `YYYY-MM-DDThh:mm:ss`, also yields a Julian day
    """

    DATE = "date"
    DATE_TIME = "date_time"

    @property
    def pattern(self) -> str:
        """Human-readable format of the expected input."""
        return {
            DateMode.DATE: "YYYY-MM-DD",
            DateMode.DATE_TIME: "YYYY-MM-DDThh:mm:ss",
        }[self]


class YearRange(Enum):
    """Named year bounds used by the historical date validators.

    Attributes:
        LEGACY: [1582, 2050], used by `chk_date_ymd`
        EXTENDED: [1582, 2100], used by `chk_ymddate` and `chk_date_iso`
    """

    LEGACY = (YEAR_MIN, LEGACY_YEAR_MAX)
    EXTENDED = (YEAR_MIN, YEAR_MAX)

    @property
    def lower(self) -> int:
        return self.value[0]

    @property
    def upper(self) -> int:
        return self.value[1]
