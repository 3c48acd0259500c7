# -*- coding: utf-8 -*-
"""Bivariate comparison of two numeric samples.

The numerical work is delegated to numpy and ``scipy.stats``; this module
validates the inputs and bundles the statistics into an immutable result.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from pydantic import BaseModel
from pydantic import ConfigDict
from scipy import stats  # type: ignore[import-untyped]

from sciutil_lib.constants import MIN_SAMPLE_SIZE
from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException
from sciutil_lib.predicates import is_numeric

logger = logging.getLogger(__name__)

ROUTINE = "COMPARE"


class LinearFit(BaseModel):
    """Least-squares line ``dependent = slope * independent + intercept``."""

    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float
    rvalue: float
    pvalue: float
    stderr: float


class ComparisonResult(BaseModel):
    """Statistics comparing two samples `x` and `y`.

    Attributes:
        n: Number of samples
        rmsd: Root-mean-square deviation between `x` and `y`
        pearson: Pearson linear correlation coefficient
        spearman: Spearman rank correlation coefficient
        fit_xy: Regression of `y` on `x`
        fit_yx: Regression of `x` on `y`
    """

    model_config = ConfigDict(frozen=True)

    n: int
    rmsd: float
    pearson: float
    spearman: float
    fit_xy: LinearFit
    fit_yx: LinearFit


def _as_vector(values: Any, name: str) -> np.ndarray:
    if not is_numeric(values):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH, ROUTINE, f"`{name}` must be numeric"
        )
    if np.iscomplexobj(values):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH, ROUTINE, f"`{name}` must be real, not complex"
        )
    array = np.asarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            ROUTINE,
            f"`{name}` must be a 1-D vector, got {array.ndim} dimension(s)",
        )
    return array


def _fit(independent: np.ndarray, dependent: np.ndarray) -> LinearFit:
    result = stats.linregress(independent, dependent)
    return LinearFit(
        slope=float(result.slope),
        intercept=float(result.intercept),
        rvalue=float(result.rvalue),
        pvalue=float(result.pvalue),
        stderr=float(result.stderr),
    )


def compare(x: Any, y: Any) -> ComparisonResult:
    """Compare two equal-length numeric vectors.

    Args:
        x: First sample (at least 5 values)
        y: Second sample, same length as `x`

    Returns:
        ComparisonResult with RMSD, correlations and both regressions

    Raises:
        SciUtilException: TYPE_MISMATCH if an input is not a numeric
            vector, SIZE_MISMATCH if lengths differ or are too short
    """
    x_arr = _as_vector(x, "x")
    y_arr = _as_vector(y, "y")

    if x_arr.size != y_arr.size:
        raise SciUtilException(
            ErrorKind.SIZE_MISMATCH,
            ROUTINE,
            f"`x` and `y` must have the same length ({x_arr.size} != {y_arr.size})",
        )
    if x_arr.size < MIN_SAMPLE_SIZE:
        raise SciUtilException(
            ErrorKind.SIZE_MISMATCH,
            ROUTINE,
            f"at least {MIN_SAMPLE_SIZE} samples are required, got {x_arr.size}",
        )

    rmsd = float(np.sqrt(np.mean((x_arr - y_arr) ** 2)))
    pearson = stats.pearsonr(x_arr, y_arr)[0]
    spearman = stats.spearmanr(x_arr, y_arr)[0]

    logger.debug(
        "Compared %d samples: rmsd=%.6g pearson=%.6g spearman=%.6g",
        x_arr.size,
        rmsd,
        pearson,
        spearman,
    )

    return ComparisonResult(
        n=int(x_arr.size),
        rmsd=rmsd,
        pearson=float(pearson),
        spearman=float(spearman),
        fit_xy=_fit(x_arr, y_arr),
        fit_yx=_fit(y_arr, x_arr),
    )
