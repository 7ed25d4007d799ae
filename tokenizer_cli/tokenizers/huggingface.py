"""HuggingFace tokenizer wrapper for open-weight models.

Meta publishes the Llama 3 tokenizers on the HuggingFace Hub, so counts
for those models are exact. Requires the `transformers` library.

Note that the meta-llama repositories are gated: accept the license on
the Hub and authenticate (``huggingface-cli login`` or ``HF_TOKEN``)
before first use. Downloaded files are cached by transformers.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .base import BaseTokenizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=16)
def _load_tokenizer(tokenizer_name: str):
    """Load and cache a HuggingFace tokenizer.

    Args:
        tokenizer_name: HuggingFace repo id of the tokenizer.

    Returns:
        Loaded tokenizer.

    Raises:
        ImportError: If transformers is not installed.
        OSError: If the tokenizer files cannot be fetched or read.
    """
    from transformers import AutoTokenizer

    logger.debug(f"Loading HuggingFace tokenizer {tokenizer_name}")
    return AutoTokenizer.from_pretrained(tokenizer_name)


class HuggingFaceTokenizer(BaseTokenizer):
    """Token counter using HuggingFace tokenizers.

    Unlike an estimator this never guesses: if the tokenizer cannot be
    loaded the error is raised to the caller.

    Example:
        counter = HuggingFaceTokenizer("meta-llama/Meta-Llama-3-8B")
        tokens = counter.count_text("Hello, world!")
    """

    def __init__(self, tokenizer_name: str):
        """Initialize HuggingFace tokenizer.

        Args:
            tokenizer_name: HuggingFace repo id (e.g., 'meta-llama/Llama-3.1-8B').
        """
        self.tokenizer_name = tokenizer_name
        self._tokenizer = None  # Lazy load

    @property
    def tokenizer(self):
        """Lazy-load the tokenizer."""
        if self._tokenizer is None:
            self._tokenizer = _load_tokenizer(self.tokenizer_name)
        return self._tokenizer

    def count_text(self, text: str) -> int:
        """Count tokens in text, without BOS/EOS special tokens.

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
        return self.tokenizer.encode(text, add_special_tokens=False)

    @classmethod
    def is_available(cls) -> bool:
        """Check if HuggingFace tokenizers are available.

        Returns:
            True if transformers is installed.
        """
        try:
            import transformers  # noqa: F401

            return True
        except ImportError:
            return False

    def __repr__(self) -> str:
        return f"HuggingFaceTokenizer(tokenizer={self.tokenizer_name!r})"
