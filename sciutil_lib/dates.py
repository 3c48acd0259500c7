# -*- coding: utf-8 -*-
"""Date validation and Julian day conversion.

Textual dates are accepted in two formats:

- `YYYY-MM-DD` (date-only mode), exactly 10 characters long;
- `YYYY-MM-DDThh:mm:ss` (date-time mode), which also yields the
  astronomical Julian day of the given instant.

A single configurable `DateValidator` implements both modes. Checks run in
a fixed order and the first failing check determines the reported error.
Validation never raises for bad input: the caller receives a
`ValidationOutcome` carrying either the parsed fields or a status code and
message, never both.

Usage:
    from sciutil_lib.dates import chk_date_iso

    outcome = chk_date_iso("2018-06-13T12:00:00")
    if outcome.ok:
        print(outcome.julian_day)  # 2458283.0
    else:
        print(outcome.message)
"""

from __future__ import annotations

import datetime
import logging
import math
import warnings
from typing import Annotated

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

from sciutil_lib.calendar import days_per_month
from sciutil_lib.constants import DATE_SEPARATOR
from sciutil_lib.constants import DATE_TEXT_LENGTH
from sciutil_lib.constants import DATE_TIME_SEPARATOR
from sciutil_lib.constants import INVALID_JULIAN_DAY
from sciutil_lib.constants import JDN_OFFSET
from sciutil_lib.constants import MONTH_DAY_WIDTH
from sciutil_lib.constants import SECONDS_PER_DAY
from sciutil_lib.constants import TIME_SEPARATOR
from sciutil_lib.constants import YEAR_MAX
from sciutil_lib.constants import YEAR_MIN
from sciutil_lib.constants import YEAR_WIDTH
from sciutil_lib.enums import DateMode
from sciutil_lib.enums import ErrorKind
from sciutil_lib.enums import YearRange
from sciutil_lib.errors import SciUtilError
from sciutil_lib.errors import SciUtilException

logger = logging.getLogger(__name__)


class DateFields(BaseModel):
    """Numeric fields of a parsed date.

    All fields default to 0, which is also the value reported for every
    field when validation fails.
    """

    model_config = ConfigDict(frozen=True)

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0


class ValidationOutcome(BaseModel):
    """Result of validating a date string.

    Attributes:
        status: 0 on success, otherwise the `ErrorKind` code
        message: Empty on success, otherwise the formatted error message
        date_fields: Parsed fields (all zero on failure)
        julian_day: Julian day in date-time mode, -1.0 on failure or when
            not computed
    """

    model_config = ConfigDict(frozen=True)

    status: int = 0
    message: str = ""
    date_fields: DateFields = Field(default_factory=DateFields)
    julian_day: float = INVALID_JULIAN_DAY

    @classmethod
    def failure(cls, error: SciUtilError) -> ValidationOutcome:
        return cls(status=error.status, message=str(error))

    @property
    def ok(self) -> bool:
        return self.status == 0

    @property
    def error_kind(self) -> ErrorKind | None:
        """Kind of failure, or None on success."""
        return None if self.ok else ErrorKind(self.status)

    def to_date(self) -> datetime.date | None:
        if not self.ok:
            return None
        f = self.date_fields
        return datetime.date(f.year, f.month, f.day)

    def to_datetime(self) -> datetime.datetime | None:
        if not self.ok:
            return None
        f = self.date_fields
        return datetime.datetime(  # noqa: DTZ001
            f.year, f.month, f.day, f.hour, f.minute, f.second
        )


# =============================================================================
# Julian Day
# =============================================================================


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> float:
    """Convert a calendar date and time to an astronomical Julian day.

    The day number follows Fliegel & Van Flandern (1968); Julian days start
    at noon, so the fractional part is ``(hour - 12) / 24 + minute / 1440 +
    second / 86400``.

    Examples:
        >>> julian_day(2000, 1, 1, 12)
        2451545.0
        >>> julian_day(2018, 6, 13, 12)
        2458283.0
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    day_number = (
        day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - JDN_OFFSET
    )
    return day_number + (hour - 12) / 24 + minute / 1440 + second / SECONDS_PER_DAY


def calendar_date(jd: float) -> DateFields:
    """Convert an astronomical Julian day back to calendar fields.

    The time of day is rounded to the nearest second. This is the inverse
    of `julian_day`.

    Args:
        jd: Julian day

    Returns:
        DateFields of the corresponding instant
    """
    if not math.isfinite(jd):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH, "CALENDAR_DATE", f"invalid Julian day: {jd}"
        )

    # Shift the epoch to midnight before splitting off the time of day
    total_seconds = round((jd + 0.5) * SECONDS_PER_DAY)
    day_number, seconds = divmod(total_seconds, SECONDS_PER_DAY)

    a = day_number + JDN_OFFSET - 1
    b = (4 * a + 3) // 146_097
    c = a - 146_097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153

    hour, rem = divmod(seconds, 3600)
    minute, second = divmod(rem, 60)
    return DateFields(
        year=100 * b + d - 4800 + m // 10,
        month=m + 3 - 12 * (m // 10),
        day=e - (153 * m + 2) // 5 + 1,
        hour=hour,
        minute=minute,
        second=second,
    )


# =============================================================================
# Validator
# =============================================================================


class DateValidator(BaseModel):
    """Configurable validator for date and date-time strings.

    Checks run in this order, the first failure wins:

    1. text is present (MISSING_ARGUMENT) and is a string (TYPE_MISMATCH)
    2. date-only: length is exactly 10 (MALFORMED_LENGTH)
    3. date-time: splits on ``T`` into 2 parts (MALFORMED_SEPARATOR)
    4. date splits on ``-`` into 3 parts (MALFORMED_SEPARATOR)
    5. date-time: time splits on ``:`` into 3 parts (MALFORMED_SEPARATOR)
    6. year: 4 digits within [year_min, year_max] (INVALID_FIELD)
    7. month: 2 digits within [1, 12] (INVALID_FIELD)
    8. month lengths of the year (PROPAGATED)
    9. day: within the month, 2 digits in date-only mode (INVALID_FIELD)
    10. date-time: hour, minute and second in range (INVALID_FIELD)
    11. date-time: Julian day

    Attributes:
        mode: Accepted input format
        year_min: Lowest accepted year
        year_max: Highest accepted year
        routine: Routine name reported in error messages
    """

    model_config = ConfigDict(frozen=True)

    mode: DateMode = DateMode.DATE
    year_min: Annotated[int, Field(default=YEAR_MIN, ge=YEAR_MIN, le=YEAR_MAX)]
    year_max: Annotated[int, Field(default=YEAR_MAX, ge=YEAR_MIN, le=YEAR_MAX)]
    routine: Annotated[str, Field(default="DATE_VALIDATOR", min_length=1)]

    @model_validator(mode="after")
    def check_year_bounds(self) -> DateValidator:
        if self.year_min > self.year_max:
            raise ValueError(
                f"year_min ({self.year_min}) must not exceed "
                f"year_max ({self.year_max})"
            )
        return self

    @classmethod
    def from_range(
        cls,
        mode: DateMode,
        year_range: YearRange,
        routine: str = "DATE_VALIDATOR",
    ) -> DateValidator:
        """Build a validator from one of the named year ranges."""
        return cls(
            mode=mode,
            year_min=year_range.lower,
            year_max=year_range.upper,
            routine=routine,
        )

    def check(self, text: str | None) -> ValidationOutcome:
        """Validate `text` and return the outcome.

        Args:
            text: Date string in the format of this validator's mode

        Returns:
            ValidationOutcome with the parsed fields on success, or the
            status code and message of the first failing check
        """
        try:
            fields = self._parse(text)
        except SciUtilException as e:
            logger.debug("%s", e)
            return ValidationOutcome.failure(e.to_error())

        if self.mode is DateMode.DATE_TIME:
            jd = julian_day(
                fields.year,
                fields.month,
                fields.day,
                fields.hour,
                fields.minute,
                fields.second,
            )
        else:
            jd = INVALID_JULIAN_DAY

        return ValidationOutcome(date_fields=fields, julian_day=jd)

    # -------------------------------------------------------------------------
    # Parsing steps
    # -------------------------------------------------------------------------

    def _fail(self, kind: ErrorKind, description: str) -> SciUtilException:
        return SciUtilException(kind, self.routine, description)

    def _split(self, text: str, separator: str, count: int) -> list[str]:
        parts = text.split(separator)
        if len(parts) != count:
            raise self._fail(
                ErrorKind.MALFORMED_SEPARATOR,
                f"expected {count} parts separated by '{separator}' in "
                f"`{text}` (format {self.mode.pattern})",
            )
        return parts

    def _parse_field(
        self,
        text: str,
        name: str,
        lower: int,
        upper: int,
        width: int | None = None,
    ) -> int:
        if width is not None and (
            len(text) != width or not (text.isascii() and text.isdigit())
        ):
            raise self._fail(
                ErrorKind.INVALID_FIELD,
                f"invalid {name}: `{text}` must be {width} digits",
            )
        # Plain ASCII digits only; int() also takes signs, blanks and `_`
        if not (text.isascii() and text.isdigit()):
            raise self._fail(
                ErrorKind.INVALID_FIELD, f"invalid {name}: `{text}` is not an integer"
            )

        value = int(text)
        if not lower <= value <= upper:
            raise self._fail(
                ErrorKind.INVALID_FIELD,
                f"invalid {name}: {value} must be between {lower} and {upper}",
            )
        return value

    def _parse(self, text: str | None) -> DateFields:
        if text is None or (isinstance(text, str) and not text):
            raise self._fail(
                ErrorKind.MISSING_ARGUMENT,
                f"a date string ({self.mode.pattern}) is required",
            )
        if not isinstance(text, str):
            raise self._fail(
                ErrorKind.TYPE_MISMATCH,
                f"date must be a string, got {type(text).__name__}",
            )

        date_time = self.mode is DateMode.DATE_TIME

        if not date_time and len(text) != DATE_TEXT_LENGTH:
            raise self._fail(
                ErrorKind.MALFORMED_LENGTH,
                f"`{text}` must be exactly {DATE_TEXT_LENGTH} characters "
                f"({self.mode.pattern})",
            )

        if date_time:
            date_text, time_text = self._split(text, DATE_TIME_SEPARATOR, 2)
        else:
            date_text, time_text = text, ""

        year_text, month_text, day_text = self._split(date_text, DATE_SEPARATOR, 3)
        time_parts = self._split(time_text, TIME_SEPARATOR, 3) if date_time else []

        year = self._parse_field(
            year_text, "year", self.year_min, self.year_max, width=YEAR_WIDTH
        )
        month = self._parse_field(month_text, "month", 1, 12, width=MONTH_DAY_WIDTH)

        try:
            lengths = days_per_month(year)
        except SciUtilException as e:
            raise SciUtilException.wrap(e, self.routine) from e

        day = self._parse_field(
            day_text,
            "day",
            1,
            lengths[month],
            width=None if date_time else MONTH_DAY_WIDTH,
        )

        if not date_time:
            return DateFields(year=year, month=month, day=day)

        hour_text, minute_text, second_text = time_parts
        return DateFields(
            year=year,
            month=month,
            day=day,
            hour=self._parse_field(hour_text, "hour", 0, 23),
            minute=self._parse_field(minute_text, "minute", 0, 59),
            second=self._parse_field(second_text, "second", 0, 59),
        )


# =============================================================================
# Historical entry points
# =============================================================================


def _warn_debug(debug: bool | None) -> None:
    if debug is not None:
        warnings.warn(
            "`debug` is deprecated and ignored: validation is always performed.",
            DeprecationWarning,
            stacklevel=3,
        )


def chk_date_ymd(
    text: str | None,
    *,
    year_range: YearRange = YearRange.LEGACY,
    debug: bool | None = None,
) -> ValidationOutcome:
    """Validate a `YYYY-MM-DD` date, years 1582-2050 by default.

    Args:
        text: Date string
        year_range: Accepted year bounds
        debug: Deprecated, ignored

    Returns:
        ValidationOutcome
    """
    _warn_debug(debug)
    validator = DateValidator.from_range(DateMode.DATE, year_range, "CHK_DATE_YMD")
    return validator.check(text)


def chk_ymddate(
    text: str | None,
    *,
    year_range: YearRange = YearRange.EXTENDED,
    debug: bool | None = None,
) -> ValidationOutcome:
    """Validate a `YYYY-MM-DD` date, years 1582-2100 by default."""
    _warn_debug(debug)
    validator = DateValidator.from_range(DateMode.DATE, year_range, "CHK_YMDDATE")
    return validator.check(text)


def chk_date_iso(
    text: str | None,
    *,
    year_range: YearRange = YearRange.EXTENDED,
    debug: bool | None = None,
) -> ValidationOutcome:
    """Validate a `YYYY-MM-DDThh:mm:ss` date-time and compute its Julian day.

    Args:
        text: ISO date-time string
        year_range: Accepted year bounds
        debug: Deprecated, ignored

    Returns:
        ValidationOutcome; `julian_day` is -1.0 on failure
    """
    _warn_debug(debug)
    validator = DateValidator.from_range(
        DateMode.DATE_TIME, year_range, "CHK_DATE_ISO"
    )
    return validator.check(text)
