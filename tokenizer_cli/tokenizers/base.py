"""Base class for the encoder wrappers used by providers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseTokenizer(ABC):
    """Abstract base class for tokenizer implementations."""

    @abstractmethod
    def count_text(self, text: str) -> int:
        """Count tokens in a text string. Must be implemented by subclasses."""
        pass
