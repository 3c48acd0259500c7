# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared fixtures for building test artifacts on disk
and sample data for the statistics helpers.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pytest

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Source Files
# =============================================================================

SOURCE_TEXT = """\
; header comment
pro hello
  ; indented comment

  print, 'hello'   ; trailing comment
# shell style comment
end
"""

#: Total number of lines in SOURCE_TEXT
SOURCE_TOTAL_LINES = 7

#: Lines that are neither blank nor start with ';'
SOURCE_CODE_LINES = 4


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Write a small source file with comments and blank lines."""
    path = tmp_path / "hello.pro"
    path.write_text(SOURCE_TEXT, encoding="utf-8")
    logger.debug("Created source file: `%s`", path)
    return path


# =============================================================================
# Statistics Samples
# =============================================================================


@pytest.fixture
def linear_samples() -> tuple[np.ndarray, np.ndarray]:
    """Perfectly linear samples: y = 2x + 1."""
    x = np.arange(10, dtype=np.float64)
    return x, 2.0 * x + 1.0


@pytest.fixture
def noisy_samples() -> tuple[np.ndarray, np.ndarray]:
    """Reproducible noisy, positively correlated samples."""
    rng = np.random.default_rng(seed=42)
    x = rng.normal(size=50)
    return x, x + rng.normal(scale=0.3, size=50)
