"""Tokenization providers.

Each provider wraps one vendor's tokenizer behind the Provider protocol:

- OpenAIProvider: tiktoken (exact)
- GoogleProvider: Vertex AI local Gemini tokenizer (exact)
- MetaProvider: HuggingFace Llama 3+ tokenizers (exact)
- AnthropicProvider: character-ratio estimate (estimated)
"""

from .anthropic import AnthropicProvider
from .base import Provider
from .google import GoogleProvider
from .meta import MetaProvider
from .openai import OpenAIProvider

__all__ = [
    "Provider",
    "OpenAIProvider",
    "GoogleProvider",
    "MetaProvider",
    "AnthropicProvider",
]
