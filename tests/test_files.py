# -*- coding: utf-8 -*-
"""Tests for files module."""

from pathlib import Path

import pytest

from sciutil_lib.enums import ErrorKind
from sciutil_lib.errors import SciUtilException
from sciutil_lib.files import count_lines
from sciutil_lib.files import is_dir
from tests.conftest import SOURCE_CODE_LINES
from tests.conftest import SOURCE_TOTAL_LINES


class TestCountLines:
    """Tests for count_lines function."""

    def test_total_without_markers(self, source_file: Path):
        """Test that every line is counted without comment markers."""
        assert count_lines(source_file) == SOURCE_TOTAL_LINES

    def test_single_marker(self, source_file: Path):
        """Test skipping blank lines and `;` comments."""
        assert count_lines(source_file, ";") == SOURCE_CODE_LINES

    def test_multiple_markers(self, source_file: Path):
        """Test skipping several comment styles."""
        assert count_lines(source_file, [";", "#"]) == SOURCE_CODE_LINES - 1

    def test_string_path(self, source_file: Path):
        """Test that string paths are accepted."""
        assert count_lines(str(source_file), ";") == SOURCE_CODE_LINES

    def test_empty_file(self, tmp_path: Path):
        """Test counting an empty file."""
        path = tmp_path / "empty.pro"
        path.write_text("", encoding="utf-8")
        assert count_lines(path) == 0
        assert count_lines(path, ";") == 0

    def test_missing_file_raises(self, tmp_path: Path):
        """Test that unreadable files are reported."""
        with pytest.raises(SciUtilException, match="COUNT_LINES") as exc_info:
            count_lines(tmp_path / "missing.pro")
        assert exc_info.value.kind == ErrorKind.IO_FAILURE

    @pytest.mark.parametrize("comment", [1, [";", 2]])
    def test_non_string_marker_raises(self, source_file: Path, comment):
        """Test that comment markers must be strings."""
        with pytest.raises(SciUtilException) as exc_info:
            count_lines(source_file, comment)
        assert exc_info.value.kind == ErrorKind.TYPE_MISMATCH


class TestIsDir:
    """Tests for is_dir function."""

    def test_directory(self, tmp_path: Path):
        """Test an existing directory."""
        assert is_dir(tmp_path)
        assert is_dir(str(tmp_path))

    def test_file_is_not_directory(self, source_file: Path):
        """Test that files are not directories."""
        assert not is_dir(source_file)

    def test_missing_path(self, tmp_path: Path):
        """Test a path that does not exist."""
        assert not is_dir(tmp_path / "nope")
        assert not is_dir("")

    def test_wildcard(self, tmp_path: Path):
        """Test resolving wildcard patterns."""
        (tmp_path / "run01").mkdir()
        (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
        assert is_dir(str(tmp_path / "run*"))
        assert not is_dir(str(tmp_path / "notes*"))
        assert not is_dir(str(tmp_path / "zzz*"))

    def test_home_expansion(self):
        """Test that `~` is expanded."""
        assert is_dir("~") == Path.home().is_dir()

    def test_non_string_raises(self):
        """Test that non-path arguments are refused."""
        with pytest.raises(SciUtilException, match="IS_DIR") as exc_info:
            is_dir(42)  # type: ignore[arg-type]
        assert exc_info.value.kind == ErrorKind.TYPE_MISMATCH
