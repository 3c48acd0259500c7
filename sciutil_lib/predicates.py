# -*- coding: utf-8 -*-
"""Type predicates used as precondition checks.

Python lists, tuples and numpy arrays (with at least one dimension) are
arrays; everything else is a scalar. Booleans are neither integer nor
numeric.
"""

from __future__ import annotations

from numbers import Integral
from numbers import Number
from typing import Any

import numpy as np


def is_array(value: Any) -> bool:
    """Check if `value` is an array (list, tuple or numpy array)."""
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


def is_scalar(value: Any) -> bool:
    """Check if `value` is a scalar (not an array, not None)."""
    return value is not None and not is_array(value)


def is_string(value: Any) -> bool:
    """Check if `value` is a string or a non-empty array of strings.

    Examples:
        >>> is_string("abc")
        True
        >>> is_string(["a", "b"])
        True
        >>> is_string(3)
        False
    """
    if isinstance(value, np.ndarray):
        return value.dtype.kind in ("U", "S")
    if is_array(value):
        return bool(value) and all(isinstance(v, str) for v in value)
    return isinstance(value, str)


def _is_integer_scalar(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, (bool, np.bool_))


def _is_numeric_scalar(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, (bool, np.bool_))


def is_integer(value: Any) -> bool:
    """Check if `value` is an integer or a non-empty array of integers."""
    if isinstance(value, np.ndarray):
        return value.dtype.kind in ("i", "u")
    if is_array(value):
        return bool(value) and all(_is_integer_scalar(v) for v in value)
    return _is_integer_scalar(value)


def is_numeric(value: Any) -> bool:
    """Check if `value` is a number or a non-empty array of numbers."""
    if isinstance(value, np.ndarray):
        return value.dtype.kind in ("i", "u", "f", "c")
    if is_array(value):
        return bool(value) and all(_is_numeric_scalar(v) for v in value)
    return _is_numeric_scalar(value)
