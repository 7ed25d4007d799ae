"""OpenAI provider for tokenizer-cli.

Token counting is exact (uses tiktoken).
"""

from __future__ import annotations

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.tokenizers import TiktokenCounter


# OpenAI model to tiktoken encoding mappings
_MODEL_ENCODINGS: dict[str, str] = {
    # GPT-4o and GPT-4.1 families use o200k_base
    "gpt-4o": "o200k_base",
    "gpt-4o-mini": "o200k_base",
    "gpt-4.1": "o200k_base",
    "gpt-4.1-mini": "o200k_base",
    "gpt-4.1-nano": "o200k_base",
    # Reasoning models use o200k_base
    "o1": "o200k_base",
    "o1-mini": "o200k_base",
    "o1-pro": "o200k_base",
    "o3": "o200k_base",
    "o3-mini": "o200k_base",
    "o4-mini": "o200k_base",
    # GPT-4 and GPT-3.5 use cl100k_base
    "gpt-4": "cl100k_base",
    "gpt-4-turbo": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
}


def get_encoding_name(model: str) -> str | None:
    """Get the tiktoken encoding name for a model, or None if unknown."""
    return _MODEL_ENCODINGS.get(model.lower())


class OpenAIProvider:
    """Provider implementation for OpenAI models."""

    @property
    def name(self) -> str:
        return "OpenAI"

    @property
    def is_exact(self) -> bool:
        return True

    def supports_model(self, model: str) -> bool:
        """Check if model is a known OpenAI model."""
        return get_encoding_name(model) is not None

    def count_tokens(self, text: str, model: str) -> int:
        """Count tokens with the tiktoken encoding the model uses."""
        encoding_name = get_encoding_name(model)
        if encoding_name is None:
            raise ProviderError(
                f"unsupported OpenAI model: {model}",
                details={"provider": self.name, "model": model},
            )

        counter = TiktokenCounter(encoding_name)
        try:
            return counter.count_text(text)
        except Exception as e:
            raise ProviderError(
                f"failed to get encoding {encoding_name}: {e}",
                details={"provider": self.name, "model": model},
            ) from e

    def models(self) -> list[str]:
        return list(_MODEL_ENCODINGS)

    def __repr__(self) -> str:
        return "OpenAIProvider()"
