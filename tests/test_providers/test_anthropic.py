"""Tests for Anthropic provider."""

import pytest

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.providers import AnthropicProvider, Provider
from tokenizer_cli.providers.anthropic import CLAUDE_CHARS_PER_TOKEN


@pytest.fixture
def anthropic_provider():
    return AnthropicProvider()


class TestAnthropicProviderIdentity:
    def test_name(self, anthropic_provider):
        assert anthropic_provider.name == "Anthropic"

    def test_is_estimate(self, anthropic_provider):
        assert anthropic_provider.is_exact is False

    def test_implements_protocol(self, anthropic_provider):
        assert isinstance(anthropic_provider, Provider)

    def test_repr(self, anthropic_provider):
        expected = f"AnthropicProvider(chars_per_token={CLAUDE_CHARS_PER_TOKEN})"
        assert repr(anthropic_provider) == expected


class TestAnthropicModelCatalog:
    def test_supports_claude_models(self, anthropic_provider):
        assert anthropic_provider.supports_model("claude-3-5-sonnet")
        assert anthropic_provider.supports_model("CLAUDE-OPUS-4")

    def test_rejects_unknown_models(self, anthropic_provider):
        assert not anthropic_provider.supports_model("claude-2")
        assert not anthropic_provider.supports_model("gpt-4.1")

    def test_models(self, anthropic_provider):
        assert "claude-sonnet-4" in anthropic_provider.models()


class TestAnthropicTokenCounting:
    def test_count_empty(self, anthropic_provider):
        assert anthropic_provider.count_tokens("", "claude-3-haiku") == 0

    def test_count_uses_ratio(self, anthropic_provider):
        assert anthropic_provider.count_tokens("x" * 35, "claude-3-opus") == 10

    def test_count_minimum_one(self, anthropic_provider):
        assert anthropic_provider.count_tokens("x", "claude-3-opus") == 1

    def test_custom_ratio(self):
        provider = AnthropicProvider(chars_per_token=5.0)
        assert provider.count_tokens("x" * 50, "claude-3-opus") == 10

    def test_unsupported_model_raises(self, anthropic_provider):
        with pytest.raises(ProviderError, match="unsupported Anthropic model: claude-2"):
            anthropic_provider.count_tokens("Hello", "claude-2")
