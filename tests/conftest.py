"""Shared pytest fixtures for tokenizer-cli tests."""

from __future__ import annotations

import pytest

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.registry import ProviderRegistry, build_default_registry


class StubProvider:
    """In-memory provider that counts whitespace-separated words.

    Records every count_tokens call so tests can assert which provider
    serviced a request.
    """

    def __init__(
        self,
        name: str,
        models: list[str],
        exact: bool = True,
        error: Exception | None = None,
    ):
        self._name = name
        self._models = list(models)
        self._exact = exact
        self._error = error
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_exact(self) -> bool:
        return self._exact

    def supports_model(self, model: str) -> bool:
        return model.lower() in self._models

    def count_tokens(self, text: str, model: str) -> int:
        self.calls.append((text, model))
        if self._error is not None:
            raise self._error
        if not self.supports_model(model):
            raise ProviderError(f"unsupported {self._name} model: {model}")
        return len(text.split())

    def models(self) -> list[str]:
        return list(self._models)


@pytest.fixture
def make_provider():
    """Factory for StubProvider instances."""
    return StubProvider


@pytest.fixture
def exact_provider():
    """Exact stub provider with two models."""
    return StubProvider("Exact", ["model-b", "model-a"])


@pytest.fixture
def estimating_provider():
    """Estimating stub provider with one model."""
    return StubProvider("Estimator", ["guess-1"], exact=False)


@pytest.fixture
def stub_registry(exact_provider, estimating_provider):
    """Registry of the two stub providers."""
    return ProviderRegistry([exact_provider, estimating_provider])


@pytest.fixture
def default_registry():
    """Registry of all built-in providers."""
    return build_default_registry()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove tokenizer-cli environment overrides."""
    monkeypatch.delenv("TOKENIZER_CLI_MODEL", raising=False)
    monkeypatch.delenv("TOKENIZER_CLI_LOG_LEVEL", raising=False)
