"""Google Gemini provider for tokenizer-cli.

Counts are exact and computed offline with the local tokenizer that
ships in the Vertex AI SDK. Only models that local tokenizer knows are
listed; aliases resolve to a concrete Vertex AI model name.

Usage:
    from tokenizer_cli.providers import GoogleProvider

    provider = GoogleProvider()
    provider.count_tokens("Hello world", "gemini-1.5-pro")
"""

from __future__ import annotations

import logging

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.tokenizers import VertexTokenizer

logger = logging.getLogger(__name__)

# Model name to Vertex AI model name
_VERTEX_MODELS: dict[str, str] = {
    "gemini-1.5": "gemini-1.5-flash",
    "gemini-1.5-flash": "gemini-1.5-flash",
    "gemini-1.5-pro": "gemini-1.5-pro",
}


class GoogleProvider:
    """Provider implementation for Google Gemini models."""

    @property
    def name(self) -> str:
        return "Google"

    @property
    def is_exact(self) -> bool:
        return True

    def supports_model(self, model: str) -> bool:
        """Check if model is supported by the local Gemini tokenizer."""
        return model.lower() in _VERTEX_MODELS

    def count_tokens(self, text: str, model: str) -> int:
        """Count tokens with the Vertex AI local tokenizer."""
        vertex_model = _VERTEX_MODELS.get(model.lower())
        if vertex_model is None:
            raise ProviderError(
                f"unsupported Google model: {model}",
                details={"provider": self.name, "model": model},
            )

        if vertex_model != model.lower():
            logger.debug(f"Resolved Gemini alias {model} to {vertex_model}")

        counter = VertexTokenizer(vertex_model)
        try:
            return counter.count_text(text)
        except ImportError as e:
            raise ProviderError(
                f"failed to create tokenizer for {vertex_model}: "
                'install with pip install "google-cloud-aiplatform[tokenization]"',
                details={"provider": self.name, "model": model},
            ) from e
        except Exception as e:
            raise ProviderError(
                f"failed to count tokens for {vertex_model}: {e}",
                details={"provider": self.name, "model": model},
            ) from e

    def models(self) -> list[str]:
        return list(_VERTEX_MODELS)

    def __repr__(self) -> str:
        return "GoogleProvider()"
