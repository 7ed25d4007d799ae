"""Parsing utilities for CLI input."""

from __future__ import annotations

from pathlib import Path

import click


def read_input(file_path: str | None, words: tuple[str, ...]) -> str:
    """Resolve the text to count from a file or positional words.

    A file takes precedence over words. File content is returned as-is,
    line endings included. Words are joined with single spaces, the way
    the shell split them.

    Args:
        file_path: Path to a UTF-8 text file, or None.
        words: Positional arguments.

    Returns:
        The text to count (may be empty if the file is empty).

    Raises:
        click.BadParameter: If the file cannot be read or there is no input.
    """
    if file_path:
        try:
            return Path(file_path).read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise click.BadParameter(f"failed to read file: {e}") from e

    if words:
        return " ".join(words)

    raise click.BadParameter("no input provided. Use text argument or -f flag")
