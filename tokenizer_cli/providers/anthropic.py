"""Anthropic Claude provider for tokenizer-cli.

Anthropic does not publish the tokenizer used by Claude 3 and later,
so counts are estimated from a characters-per-token ratio calibrated
against Claude's reported usage. Results from this provider are always
flagged as estimates.
"""

from __future__ import annotations

import logging

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.tokenizers import EstimatingTokenCounter

logger = logging.getLogger(__name__)

# Claude models use ~3.5 chars per token on average
CLAUDE_CHARS_PER_TOKEN = 3.5

_MODELS: tuple[str, ...] = (
    "claude-3-haiku",
    "claude-3-opus",
    "claude-3-5-haiku",
    "claude-3-5-sonnet",
    "claude-3-7-sonnet",
    "claude-sonnet-4",
    "claude-opus-4",
)


class AnthropicProvider:
    """Estimating provider for Anthropic Claude models."""

    def __init__(self, chars_per_token: float = CLAUDE_CHARS_PER_TOKEN):
        """Initialize Anthropic provider.

        Args:
            chars_per_token: Estimation ratio override.
        """
        self._estimator = EstimatingTokenCounter(chars_per_token=chars_per_token)

    @property
    def name(self) -> str:
        return "Anthropic"

    @property
    def is_exact(self) -> bool:
        return False

    def supports_model(self, model: str) -> bool:
        return model.lower() in _MODELS

    def count_tokens(self, text: str, model: str) -> int:
        """Estimate tokens for a Claude model."""
        if not self.supports_model(model):
            raise ProviderError(
                f"unsupported Anthropic model: {model}",
                details={"provider": self.name, "model": model},
            )
        logger.debug(
            f"Estimating tokens for {model} at {self._estimator.chars_per_token} chars/token"
        )
        return self._estimator.count_text(text)

    def models(self) -> list[str]:
        return list(_MODELS)

    def __repr__(self) -> str:
        return f"AnthropicProvider(chars_per_token={self._estimator.chars_per_token})"
