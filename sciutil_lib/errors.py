# -*- coding: utf-8 -*-
"""Error handling for sciutil_lib routines.

Every routine reports failures with a status code (see `ErrorKind`) and a
message of the form ``Error <code> in <ROUTINE NAME>: <description>``.
The routine name is a static tag given when the error is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from sciutil_lib.enums import ErrorKind


def format_error(kind: ErrorKind, routine: str, description: str) -> str:
    """Format an error message following the library convention."""
    return f"Error {kind.code} in {routine.upper()}: {description}"


@dataclass(frozen=True)
class SciUtilError:
    """Represents a failure reported by a routine.

    This is a data record for storing error information, not an exception.
    Use SciUtilException for raising errors.

    Attributes:
        kind: Kind of failure (its value is the status code)
        routine: Name of the routine reporting the failure
        description: Human-readable description
    """

    kind: ErrorKind
    routine: str
    description: str

    @property
    def status(self) -> int:
        return self.kind.code

    def __str__(self) -> str:
        """Format as human-readable error string."""
        return format_error(self.kind, self.routine, self.description)


class SciUtilException(ValueError):  # noqa: N818
    """Exception raised by utility routines.

    Attributes:
        kind: Kind of failure
        routine: Name of the routine raising the error
        description: Human-readable description
    """

    def __init__(self, kind: ErrorKind, routine: str, description: str):
        self.kind = kind
        self.routine = routine
        self.description = description
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        return format_error(self.kind, self.routine, self.description)

    @property
    def status(self) -> int:
        return self.kind.code

    @classmethod
    def wrap(cls, inner: SciUtilException, routine: str) -> SciUtilException:
        """Re-raise a dependency failure under the caller's name.

        The inner message is retained verbatim in the description.
        """
        return cls(ErrorKind.PROPAGATED, routine, str(inner))

    def to_error(self) -> SciUtilError:
        """Convert exception to SciUtilError record."""
        return SciUtilError(
            kind=self.kind,
            routine=self.routine,
            description=self.description,
        )
