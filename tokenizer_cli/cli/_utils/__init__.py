"""CLI utilities for formatting and parsing."""

from .formatting import (
    console,
    err_console,
    format_accuracy,
    print_error,
    print_model_list,
    print_result,
)
from .parsers import read_input

__all__ = [
    "console",
    "err_console",
    "format_accuracy",
    "print_error",
    "print_model_list",
    "print_result",
    "read_input",
]
