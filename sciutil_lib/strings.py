# -*- coding: utf-8 -*-
"""Small text helpers.

Each helper validates its arguments and raises `SciUtilException` with the
routine name in the message when they are not usable.
"""

from __future__ import annotations

import os
from typing import Any

import numpy as np

from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException
from sciutil_lib.predicates import is_array
from sciutil_lib.predicates import is_integer

# Separators stripped by `trim_path_sep`
PATH_SEPARATORS: str = "/" + os.sep + (os.altsep or "")


def _require_text(value: Any, routine: str, name: str = "text") -> str:
    if value is None:
        raise SciUtilException(
            ErrorKind.MISSING_ARGUMENT, routine, f"`{name}` is required"
        )
    if not isinstance(value, str):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            routine,
            f"`{name}` must be a string, got {type(value).__name__}",
        )
    if not value:
        raise SciUtilException(
            ErrorKind.MISSING_ARGUMENT, routine, f"`{name}` must not be empty"
        )
    return value


def capitalize(text: str) -> str:
    """Upper-case the first character of `text`, leave the rest unchanged.

    Examples:
        >>> capitalize("hello World")
        'Hello World'
    """
    text = _require_text(text, "CAPITALIZE")
    return text[0].upper() + text[1:]


def first_char(text: str) -> str:
    """Get the first character of `text`."""
    return _require_text(text, "FIRST_CHAR")[0]


def str_repeat(text: str, count: int) -> str:
    """Repeat `text` `count` times.

    Args:
        text: Text to repeat
        count: Number of repetitions (>= 0)

    Returns:
        The concatenated text, empty when `count` is 0

    Raises:
        SciUtilException: If `text` is not a non-empty string or `count`
            is not a non-negative integer
    """
    text = _require_text(text, "STR_REPEAT")
    if not is_integer(count) or is_array(count):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            "STR_REPEAT",
            f"`count` must be an integer, got {type(count).__name__}",
        )
    if count < 0:
        raise SciUtilException(
            ErrorKind.OUT_OF_RANGE,
            "STR_REPEAT",
            f"`count` must be >= 0, got {count}",
        )
    return text * int(count)


def trim_path_sep(path: str) -> str:
    """Remove trailing path separators from `path`.

    A path made only of separators is reduced to a single one, so the
    filesystem root is preserved.

    Examples:
        >>> trim_path_sep("/data/run01//")
        '/data/run01'
        >>> trim_path_sep("/")
        '/'
    """
    path = _require_text(path, "TRIM_PATH_SEP", name="path")
    trimmed = path.rstrip(PATH_SEPARATORS)
    return trimmed or path[0]


def strstr(value: Any) -> str:
    """Convert a value to its canonical text form.

    Numpy scalars are unwrapped, floats use the shortest form that
    round-trips, and arrays are joined with single spaces.

    Examples:
        >>> strstr(3)
        '3'
        >>> strstr(np.float32(0.5))
        '0.5'
        >>> strstr([1, 2.5, "a"])
        '1 2.5 a'
    """
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return strstr(value.item())
        return " ".join(strstr(v) for v in value.ravel().tolist())
    if isinstance(value, (list, tuple)):
        return " ".join(strstr(v) for v in value)
    if isinstance(value, np.generic):
        return strstr(value.item())
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    if value is None:
        return ""
    if isinstance(value, float):
        return repr(value)
    return str(value)
