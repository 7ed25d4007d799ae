"""Encoder wrappers used by the providers.

Each wrapper adapts one external tokenization library to the
BaseTokenizer interface:

1. tiktoken - OpenAI models (exact)
2. Vertex AI local tokenizer - Gemini models (exact)
3. HuggingFace - Llama 3+ models (exact)
4. Estimation - models without a published tokenizer

Usage:
    from tokenizer_cli.tokenizers import TiktokenCounter

    counter = TiktokenCounter("o200k_base")
    tokens = counter.count_text("Hello, world!")

The Vertex AI and HuggingFace wrappers import their libraries lazily,
so they are only needed for the providers that use them.
"""

from .base import BaseTokenizer
from .estimator import EstimatingTokenCounter
from .huggingface import HuggingFaceTokenizer
from .tiktoken_counter import TiktokenCounter
from .vertex import VertexTokenizer, is_vertex_available

__all__ = [
    # Base class
    "BaseTokenizer",
    # Implementations
    "TiktokenCounter",
    "EstimatingTokenCounter",
    "HuggingFaceTokenizer",
    "VertexTokenizer",
    "is_vertex_available",
]
