"""
tokenizer-cli - Count tokens for Large Language Model providers.

Resolves a model name to the provider that owns it and counts tokens
with that vendor's real tokenizer, reporting whether the count is exact
or estimated.

Quick Start:

    from tokenizer_cli import build_default_registry

    registry = build_default_registry()
    result = registry.count_tokens("Hello world", "gpt-4.1")
    print(f"{result.provider}: {result.token_count} tokens")

Listing Models:

    for provider, models in registry.list_models().items():
        print(provider, models)

    info = registry.get_provider_info("claude-3-5-sonnet")
    print(info.provider, "exact" if info.is_exact else "estimated")

Error Handling:

    from tokenizer_cli import ProviderError, UnsupportedModelError

    try:
        registry.count_tokens(text, "gpt-99")
    except UnsupportedModelError as e:
        print(e)  # unsupported model: gpt-99. Use --list to see supported models
    except ProviderError as e:
        print(f"Tokenizer failed: {e}")

Custom registries take any objects satisfying the Provider protocol,
in resolution order (first match wins):

    from tokenizer_cli import ProviderRegistry, OpenAIProvider

    registry = ProviderRegistry([MyProvider(), OpenAIProvider()])
"""

from .config import TokenizerConfig
from .exceptions import (
    ConfigurationError,
    ProviderError,
    TokenizerCliError,
    UnsupportedModelError,
)
from .providers import (
    AnthropicProvider,
    GoogleProvider,
    MetaProvider,
    OpenAIProvider,
    Provider,
)
from .registry import (
    DEFAULT_MODEL,
    ProviderInfo,
    ProviderRegistry,
    Result,
    build_default_registry,
    get_default_model,
)

__version__ = "0.1.0"

__all__ = [
    # Registry
    "ProviderRegistry",
    "Result",
    "ProviderInfo",
    "DEFAULT_MODEL",
    "build_default_registry",
    "get_default_model",
    # Providers
    "Provider",
    "OpenAIProvider",
    "GoogleProvider",
    "MetaProvider",
    "AnthropicProvider",
    # Config
    "TokenizerConfig",
    # Exceptions
    "TokenizerCliError",
    "UnsupportedModelError",
    "ProviderError",
    "ConfigurationError",
]
