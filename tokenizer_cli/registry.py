"""Provider registry and dispatch.

Resolves a model name to exactly one provider and delegates the count
to it. Resolution is first-match-wins in registration order, so the
order providers are passed in is part of the contract.

The registry is built once (normally with build_default_registry) and
never mutated afterwards, which makes it safe to share between threads
without locking.

Usage:
    from tokenizer_cli.registry import build_default_registry

    registry = build_default_registry()
    result = registry.count_tokens("Hello world", "gpt-4.1")
    print(result.token_count, "(estimate)" if result.is_estimate else "")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from .exceptions import UnsupportedModelError
from .providers import (
    AnthropicProvider,
    GoogleProvider,
    MetaProvider,
    OpenAIProvider,
    Provider,
)

logger = logging.getLogger(__name__)

# Model used when the caller does not ask for one
DEFAULT_MODEL = "gpt-4.1"


@dataclass(frozen=True)
class Result:
    """Outcome of a single token count.

    Attributes:
        model: Model name exactly as the caller supplied it.
        provider: Display name of the provider that counted.
        token_count: Number of tokens.
        is_estimate: True if the provider is not exact.
    """

    model: str
    provider: str
    token_count: int
    is_estimate: bool


class ProviderInfo(NamedTuple):
    """Which provider backs a model, without counting anything."""

    provider: str
    is_exact: bool
    found: bool


class ProviderRegistry:
    """Ordered, read-only collection of providers.

    Example:
        registry = ProviderRegistry([OpenAIProvider(), GoogleProvider()])
        registry.count_tokens("Hello", "gemini-1.5-pro").provider  # 'Google'
    """

    def __init__(self, providers: Iterable[Provider]):
        """Initialize the registry.

        Args:
            providers: Providers in resolution order.
        """
        self._providers: tuple[Provider, ...] = tuple(providers)

    @property
    def providers(self) -> tuple[Provider, ...]:
        """Registered providers, in resolution order."""
        return self._providers

    def _find(self, model: str) -> Provider | None:
        for provider in self._providers:
            if provider.supports_model(model):
                return provider
        return None

    def count_tokens(self, text: str, model: str) -> Result:
        """Count tokens in text for a model.

        The first provider that supports the model does the counting. If
        it fails, its error is raised as-is; no other provider is tried.

        Args:
            text: Text to count, possibly empty.
            model: Model name, matched case-insensitively.

        Returns:
            Result for this call.

        Raises:
            UnsupportedModelError: If no provider supports the model.
            ProviderError: If the matching provider cannot count.
        """
        provider = self._find(model)
        if provider is None:
            raise UnsupportedModelError(
                f"unsupported model: {model}. Use --list to see supported models",
                details={"model": model},
            )

        logger.debug(f"Dispatching {model} to {provider.name}")
        count = provider.count_tokens(text, model)

        return Result(
            model=model,
            provider=provider.name,
            token_count=count,
            is_estimate=not provider.is_exact,
        )

    def list_models(self) -> dict[str, list[str]]:
        """List supported models grouped by provider name.

        Each list is sorted. If two providers share a name, the later
        provider's list replaces the earlier one's.

        Returns:
            Dict mapping provider name to sorted model names.
        """
        result: dict[str, list[str]] = {}
        for provider in self._providers:
            result[provider.name] = sorted(provider.models())
        return result

    def get_provider_info(self, model: str) -> ProviderInfo:
        """Look up which provider backs a model.

        Args:
            model: Model name, matched case-insensitively.

        Returns:
            ProviderInfo; ``found`` is False if no provider supports it.
        """
        provider = self._find(model)
        if provider is None:
            return ProviderInfo("", False, False)
        return ProviderInfo(provider.name, provider.is_exact, True)

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self._providers)
        return f"ProviderRegistry([{names}])"


def build_default_registry() -> ProviderRegistry:
    """Build the registry of all built-in providers.

    Order: OpenAI, Google, Meta, Anthropic.
    """
    return ProviderRegistry(
        [
            OpenAIProvider(),
            GoogleProvider(),
            MetaProvider(),
            AnthropicProvider(),
        ]
    )


def get_default_model() -> str:
    """Get the default model name."""
    return DEFAULT_MODEL
