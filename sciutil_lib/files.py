# -*- coding: utf-8 -*-
"""File helpers: source line counting and directory checks."""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path

from sciutil_lib.constants import SOURCE_ENCODING
from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException

logger = logging.getLogger(__name__)

# Characters that make `is_dir` resolve its argument with glob
WILDCARD_CHARS: str = "*?["


def _comment_markers(
    comment: str | list[str] | tuple[str, ...] | None,
) -> tuple[str, ...]:
    if comment is None:
        return ()
    if isinstance(comment, str):
        markers: tuple = (comment,)
    elif isinstance(comment, (list, tuple)):
        markers = tuple(comment)
    else:
        markers = (comment,)

    if not all(isinstance(m, str) for m in markers):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            "COUNT_LINES",
            "comment markers must be strings",
        )
    return tuple(m for m in markers if m)


def count_lines(
    path: str | Path,
    comment: str | list[str] | tuple[str, ...] | None = None,
    *,
    encoding: str = SOURCE_ENCODING,
) -> int:
    """Count the lines of a source file.

    Without comment markers, every line is counted. With markers, only the
    lines that are not blank and do not start (after leading whitespace)
    with one of the markers are counted.

    Args:
        path: Path to the file
        comment: Comment prefix, or a list of prefixes (e.g. ``";"``)
        encoding: Character encoding of the file

    Returns:
        Number of counted lines

    Raises:
        SciUtilException: TYPE_MISMATCH if the markers are not strings,
            IO_FAILURE if the file cannot be read
    """
    markers = _comment_markers(comment)
    path = Path(path)

    count = 0
    try:
        with path.open(mode="r", encoding=encoding, errors="replace") as f:
            for line in f:
                if not markers:
                    count += 1
                    continue
                stripped = line.strip()
                if stripped and not stripped.startswith(markers):
                    count += 1
    except OSError as e:
        raise SciUtilException(
            ErrorKind.IO_FAILURE, "COUNT_LINES", f"cannot read `{path}`: {e}"
        ) from e

    logger.debug("Counted %d lines in `%s`", count, path)
    return count


def is_dir(path: str | Path) -> bool:
    """Check if `path` resolves to a directory.

    ``~`` is expanded and wildcards (``*``, ``?``, ``[...]``) are resolved
    with glob; the result is True if any match is a directory.

    Raises:
        SciUtilException: If `path` is not a string or a Path
    """
    if isinstance(path, Path):
        path = str(path)
    if not isinstance(path, str):
        raise SciUtilException(
            ErrorKind.TYPE_MISMATCH,
            "IS_DIR",
            f"path must be a string, got {type(path).__name__}",
        )
    if not path:
        return False

    expanded = os.path.expanduser(path)
    if not any(c in expanded for c in WILDCARD_CHARS):
        return os.path.isdir(expanded)
    return any(os.path.isdir(match) for match in glob.iglob(expanded))
