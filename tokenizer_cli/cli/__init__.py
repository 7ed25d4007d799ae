"""Command-line interface for tokenizer-cli."""

from .main import main

__all__ = ["main"]
