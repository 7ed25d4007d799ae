"""Local Gemini tokenizer from the Vertex AI SDK.

``vertexai.preview.tokenization`` ships the SentencePiece model Gemini
uses and counts tokens offline, so no API key or network round-trip per
call is needed. The model file is downloaded and cached on first use.

Requires: pip install "google-cloud-aiplatform[tokenization]"
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .base import BaseTokenizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _get_tokenizer(model_name: str):
    """Get and cache the local tokenizer for a Vertex AI model name."""
    from vertexai.preview import tokenization

    logger.debug(f"Loading Vertex AI local tokenizer for {model_name}")
    return tokenization.get_tokenizer_for_model(model_name)


def is_vertex_available() -> bool:
    """Check if the Vertex AI tokenization extra is installed."""
    try:
        from vertexai.preview import tokenization  # noqa: F401

        return True
    except ImportError:
        return False


class VertexTokenizer(BaseTokenizer):
    """Token counter backed by the Vertex AI local tokenizer.

    Example:
        counter = VertexTokenizer("gemini-1.5-flash")
        tokens = counter.count_text("Hello, world!")
    """

    def __init__(self, model_name: str):
        """Initialize the Vertex AI tokenizer wrapper.

        Args:
            model_name: Vertex AI model name (e.g., 'gemini-1.5-pro').
        """
        self.model_name = model_name
        self._tokenizer = None  # Lazy load

    @property
    def tokenizer(self):
        """Lazy-load the tokenizer."""
        if self._tokenizer is None:
            self._tokenizer = _get_tokenizer(self.model_name)
        return self._tokenizer

    def count_text(self, text: str) -> int:
        """Count tokens in text.

        Args:
            text: Text to tokenize.

        Returns:
            Number of tokens.
        """
        if not text:
            return 0
        return int(self.tokenizer.count_tokens(text).total_tokens)

    def __repr__(self) -> str:
        return f"VertexTokenizer(model={self.model_name!r})"
