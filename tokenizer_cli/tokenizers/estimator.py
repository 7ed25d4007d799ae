"""Estimation-based token counter for models without a public tokenizer.

Some vendors (Anthropic among them) do not publish the tokenizer their
models use. For those, a character ratio calibrated against the
vendor's own reported usage gives a usable approximation.
"""

from __future__ import annotations

from .base import BaseTokenizer


class EstimatingTokenCounter(BaseTokenizer):
    """Token counter using a fixed characters-per-token ratio.

    Counts produced here are estimates and must be labelled as such.

    Example:
        counter = EstimatingTokenCounter(chars_per_token=3.5)
        tokens = counter.count_text("Hello, world!")
    """

    def __init__(self, chars_per_token: float):
        """Initialize estimating counter.

        Args:
            chars_per_token: Characters per token ratio.

        Raises:
            ValueError: If the ratio is not positive.
        """
        if chars_per_token <= 0:
            raise ValueError(f"chars_per_token must be positive, got {chars_per_token}")
        self.chars_per_token = chars_per_token

    def count_text(self, text: str) -> int:
        """Estimate token count for text.

        Args:
            text: Text to count tokens for.

        Returns:
            Estimated number of tokens, at least 1 for non-empty text.
        """
        if not text:
            return 0
        return max(1, int(len(text) / self.chars_per_token + 0.5))

    def __repr__(self) -> str:
        return f"EstimatingTokenCounter(chars_per_token={self.chars_per_token})"
