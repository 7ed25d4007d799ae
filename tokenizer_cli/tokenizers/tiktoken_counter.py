"""Tiktoken-based token counter for OpenAI models.

Tiktoken is OpenAI's fast BPE tokenizer used by GPT models. The
encodings used here are:
- o200k_base: GPT-4o, GPT-4.1, o-series reasoning models
- cl100k_base: GPT-4, GPT-4 Turbo, GPT-3.5-turbo
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .base import BaseTokenizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _get_encoding(encoding_name: str):
    """Get tiktoken encoding, cached for performance."""
    import tiktoken

    logger.debug(f"Loading tiktoken encoding {encoding_name}")
    return tiktoken.get_encoding(encoding_name)


class TiktokenCounter(BaseTokenizer):
    """Token counter using tiktoken (OpenAI's tokenizer).

    Counts are exact: the same BPE merge table the model uses is replayed
    over the text. Special-token text such as ``<|endoftext|>`` is encoded
    as ordinary text instead of being rejected.

    Example:
        counter = TiktokenCounter("o200k_base")
        tokens = counter.count_text("Hello, world!")
    """

    def __init__(self, encoding_name: str = "o200k_base"):
        """Initialize tiktoken counter.

        Args:
            encoding_name: Name of the tiktoken encoding.
                           Defaults to 'o200k_base'.
        """
        self.encoding_name = encoding_name
        self._encoding = None  # Lazy load

    @property
    def encoding(self):
        """Lazy-load the encoding."""
        if self._encoding is None:
            self._encoding = _get_encoding(self.encoding_name)
        return self._encoding

    def count_text(self, text: str) -> int:
        """Count tokens in text using tiktoken.

        Args:
            text: Text to tokenize.

        Returns:
            Number of tokens.
        """
        if not text:
            return 0
        return len(self.encode(text))

    def encode(self, text: str) -> list[int]:
        """Encode text to token IDs.

        Args:
            text: Text to encode.

        Returns:
            List of token IDs.
        """
        return self.encoding.encode(text, disallowed_special=())

    def __repr__(self) -> str:
        return f"TiktokenCounter(encoding={self.encoding_name!r})"
