"""Custom exceptions for tokenizer-cli.

All exceptions inherit from TokenizerCliError, so callers that only
care about "did counting work" can catch a single class:

    from tokenizer_cli import build_default_registry
    from tokenizer_cli.exceptions import TokenizerCliError, UnsupportedModelError

    registry = build_default_registry()
    try:
        result = registry.count_tokens("Hello world", "gpt-4.1")
    except UnsupportedModelError as e:
        print(f"Unknown model: {e.details['model']}")
    except TokenizerCliError as e:
        print(f"Counting failed: {e}")
"""

from __future__ import annotations

from typing import Any


class TokenizerCliError(Exception):
    """Base exception for all tokenizer-cli errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnsupportedModelError(TokenizerCliError):
    """Raised when no registered provider claims the requested model.

    The message already names the model and points at ``--list``, so
    ``str()`` is the bare message rather than the detail-suffixed form.

    Example:
        UnsupportedModelError(
            "unsupported model: gpt-99. Use --list to see supported models",
            details={"model": "gpt-99"},
        )
    """

    def __str__(self) -> str:
        return self.message


class ProviderError(TokenizerCliError):
    """Raised when the provider that claimed a model cannot count it.

    This includes:
    - Model missing from the provider's own catalog
    - Encoder/tokenizer construction failures (missing library, download errors)
    - Failures while encoding the text

    The original exception, when there is one, is chained as ``__cause__``.

    Example:
        ProviderError(
            "failed to get encoding o200k_base",
            details={"provider": "OpenAI", "model": "gpt-4.1"},
        )
    """

    pass


class ConfigurationError(TokenizerCliError):
    """Raised when tokenizer-cli is misconfigured.

    This includes:
    - A default model that no registered provider supports
    - Unknown log level names

    Example:
        ConfigurationError(
            "default model is not supported",
            details={"default_model": "gpt-99"},
        )
    """

    pass
