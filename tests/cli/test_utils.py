"""Tests for CLI utilities."""

from pathlib import Path

import click
import pytest

from tokenizer_cli.cli._utils import format_accuracy, read_input


class TestReadInput:
    """Tests for read_input function."""

    def test_joins_words(self) -> None:
        """Positional words are joined with single spaces."""
        assert read_input(None, ("Hello", "world")) == "Hello world"

    def test_single_word(self) -> None:
        """A single quoted argument is used as-is."""
        assert read_input(None, ("Hello world, this is a test",)) == "Hello world, this is a test"

    def test_reads_file(self, tmp_path: Path) -> None:
        """File contents are read as UTF-8."""
        path = tmp_path / "prompt.md"
        path.write_text("# Title\n\nSome text with ünïcödé\n", encoding="utf-8")
        assert read_input(str(path), ()) == "# Title\n\nSome text with ünïcödé\n"

    def test_keeps_crlf_line_endings(self, tmp_path: Path) -> None:
        """CRLF line endings are not translated to LF."""
        path = tmp_path / "windows.txt"
        path.write_bytes(b"line one\r\nline two\r\n")
        assert read_input(str(path), ()) == "line one\r\nline two\r\n"

    def test_directory_raises(self, tmp_path: Path) -> None:
        """A directory path raises BadParameter."""
        with pytest.raises(click.BadParameter, match="failed to read file"):
            read_input(str(tmp_path), ())

    def test_file_takes_precedence(self, tmp_path: Path) -> None:
        """A file wins over positional words."""
        path = tmp_path / "input.txt"
        path.write_text("from file", encoding="utf-8")
        assert read_input(str(path), ("from", "args")) == "from file"

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file is valid input."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert read_input(str(path), ()) == ""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing file raises BadParameter."""
        with pytest.raises(click.BadParameter, match="failed to read file"):
            read_input(str(tmp_path / "missing.txt"), ())

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        """Non-UTF-8 bytes raise BadParameter."""
        path = tmp_path / "binary.bin"
        path.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(click.BadParameter, match="failed to read file"):
            read_input(str(path), ())

    def test_no_input_raises(self) -> None:
        """No file and no words raises BadParameter."""
        with pytest.raises(click.BadParameter, match="no input provided"):
            read_input(None, ())


class TestFormatAccuracy:
    """Tests for format_accuracy function."""

    def test_exact(self) -> None:
        """Exact counts get a check mark."""
        assert format_accuracy(True) == ("✓", "exact")

    def test_estimated(self) -> None:
        """Estimated counts get an approximation sign."""
        assert format_accuracy(False) == ("≈", "estimated")
