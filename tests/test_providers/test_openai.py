"""Tests for OpenAI provider."""

import pytest

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.providers import OpenAIProvider, Provider
from tokenizer_cli.providers.openai import get_encoding_name
from tokenizer_cli.tokenizers import tiktoken_counter


@pytest.fixture
def openai_provider():
    return OpenAIProvider()


class TestOpenAIProviderIdentity:
    def test_name(self, openai_provider):
        assert openai_provider.name == "OpenAI"

    def test_is_exact(self, openai_provider):
        assert openai_provider.is_exact is True

    def test_implements_protocol(self, openai_provider):
        assert isinstance(openai_provider, Provider)


class TestOpenAIModelCatalog:
    @pytest.mark.parametrize(
        "model",
        ["gpt-4o", "gpt-4.1", "gpt-4.1-nano", "o1", "o4-mini", "gpt-4", "gpt-3.5-turbo"],
    )
    def test_supports_known_models(self, openai_provider, model):
        assert openai_provider.supports_model(model)

    def test_supports_model_case_insensitive(self, openai_provider):
        assert openai_provider.supports_model("GPT-4.1")
        assert openai_provider.supports_model("Gpt-4o-Mini")

    @pytest.mark.parametrize("model", ["gpt-5", "gemini-1.5-pro", "", "gpt-4.1 "])
    def test_rejects_unknown_models(self, openai_provider, model):
        assert not openai_provider.supports_model(model)

    def test_models_lists_catalog(self, openai_provider):
        models = openai_provider.models()
        assert len(models) == 14
        assert "gpt-4.1" in models
        assert all(openai_provider.supports_model(m) for m in models)

    def test_models_returns_copy(self, openai_provider):
        openai_provider.models().clear()
        assert openai_provider.models()

    @pytest.mark.parametrize(
        "model, encoding",
        [
            ("gpt-4o", "o200k_base"),
            ("gpt-4.1-mini", "o200k_base"),
            ("o3", "o200k_base"),
            ("gpt-4", "cl100k_base"),
            ("gpt-4-turbo", "cl100k_base"),
            ("GPT-3.5-TURBO", "cl100k_base"),
        ],
    )
    def test_encoding_names(self, model, encoding):
        assert get_encoding_name(model) == encoding

    def test_encoding_name_unknown(self):
        assert get_encoding_name("davinci") is None


class TestOpenAITokenCounting:
    def test_count_empty(self, openai_provider):
        assert openai_provider.count_tokens("", "gpt-4.1") == 0

    def test_count_hello_world(self, openai_provider):
        assert openai_provider.count_tokens("Hello world", "gpt-4.1") == 2

    def test_count_with_special_chars(self, openai_provider):
        count = openai_provider.count_tokens("Hello 🌍! Special chars: @#$%", "gpt-4o")
        assert count > 0

    def test_uppercase_model(self, openai_provider):
        assert openai_provider.count_tokens("Hello world", "GPT-4") > 0

    def test_unsupported_model_raises(self, openai_provider):
        with pytest.raises(ProviderError, match="unsupported OpenAI model: gpt-99"):
            openai_provider.count_tokens("Hello", "gpt-99")

    def test_encoding_failure_wrapped(self, openai_provider, monkeypatch):
        def fail(name):
            raise ValueError(f"could not download {name}")

        monkeypatch.setattr(tiktoken_counter, "_get_encoding", fail)

        with pytest.raises(ProviderError) as exc_info:
            openai_provider.count_tokens("Hello", "gpt-4.1")

        error = exc_info.value
        assert "failed to get encoding o200k_base" in error.message
        assert error.details == {"provider": "OpenAI", "model": "gpt-4.1"}
        assert isinstance(error.__cause__, ValueError)
