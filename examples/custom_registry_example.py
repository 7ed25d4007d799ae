#!/usr/bin/env python3
"""
Custom registry example for tokenizer-cli.

Shows library use of the registry: counting, listing and how
registration order decides which provider owns a model name.
"""

from tokenizer_cli import (
    AnthropicProvider,
    OpenAIProvider,
    ProviderRegistry,
    UnsupportedModelError,
    build_default_registry,
)


class WordCountProvider:
    """Toy estimating provider that claims 'gpt-4.1' too."""

    @property
    def name(self) -> str:
        return "Words"

    @property
    def is_exact(self) -> bool:
        return False

    def supports_model(self, model: str) -> bool:
        return model.lower() in ("gpt-4.1", "words")

    def count_tokens(self, text: str, model: str) -> int:
        return len(text.split())

    def models(self) -> list[str]:
        return ["gpt-4.1", "words"]


def example_default_registry():
    """Count with the built-in providers."""
    print("=" * 50)
    print("DEFAULT REGISTRY")
    print("=" * 50)

    registry = build_default_registry()
    text = "Hello world, this is a test"

    for model in ["gpt-4.1", "claude-3-5-sonnet"]:
        result = registry.count_tokens(text, model)
        kind = "estimated" if result.is_estimate else "exact"
        print(f"{result.model:20} {result.provider:10} {result.token_count:4} ({kind})")

    try:
        registry.count_tokens(text, "gpt-99")
    except UnsupportedModelError as e:
        print(f"Error: {e}")


def example_first_match_wins():
    """Registration order decides overlapping model names."""
    print("=" * 50)
    print("FIRST MATCH WINS")
    print("=" * 50)

    words_first = ProviderRegistry([WordCountProvider(), OpenAIProvider(), AnthropicProvider()])
    openai_first = ProviderRegistry([OpenAIProvider(), WordCountProvider(), AnthropicProvider()])

    for registry in (words_first, openai_first):
        info = registry.get_provider_info("gpt-4.1")
        print(f"{registry!r}: gpt-4.1 -> {info.provider}")


if __name__ == "__main__":
    example_default_registry()
    example_first_match_wins()
