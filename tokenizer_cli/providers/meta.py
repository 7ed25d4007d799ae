"""Meta Llama provider for tokenizer-cli.

Llama 3 and later models use a tiktoken-style BPE vocabulary that Meta
publishes on the HuggingFace Hub, so counts are exact. Llama 2 used a
different SentencePiece vocabulary and is not listed.
"""

from __future__ import annotations

from tokenizer_cli.exceptions import ProviderError
from tokenizer_cli.tokenizers import HuggingFaceTokenizer


# Model name to HuggingFace tokenizer repo
_MODEL_TO_TOKENIZER: dict[str, str] = {
    # Llama 3
    "llama-3": "meta-llama/Meta-Llama-3-8B",
    "llama-3-8b": "meta-llama/Meta-Llama-3-8B",
    "llama-3-70b": "meta-llama/Meta-Llama-3-70B",
    # Llama 3.1
    "llama-3.1-8b": "meta-llama/Llama-3.1-8B",
    "llama-3.1-70b": "meta-llama/Llama-3.1-70B",
    "llama-3.1-405b": "meta-llama/Llama-3.1-405B",
    # Llama 3.2
    "llama-3.2-1b": "meta-llama/Llama-3.2-1B",
    "llama-3.2-3b": "meta-llama/Llama-3.2-3B",
    # Llama 3.3
    "llama-3.3-70b": "meta-llama/Llama-3.3-70B-Instruct",
}


def get_tokenizer_name(model: str) -> str | None:
    """Get the HuggingFace tokenizer repo for a model, or None if unknown."""
    return _MODEL_TO_TOKENIZER.get(model.lower())


class MetaProvider:
    """Provider implementation for Meta Llama 3+ models."""

    @property
    def name(self) -> str:
        return "Meta"

    @property
    def is_exact(self) -> bool:
        return True

    def supports_model(self, model: str) -> bool:
        return get_tokenizer_name(model) is not None

    def count_tokens(self, text: str, model: str) -> int:
        """Count tokens with the model's HuggingFace tokenizer."""
        tokenizer_name = get_tokenizer_name(model)
        if tokenizer_name is None:
            raise ProviderError(
                f"unsupported Meta model: {model}",
                details={"provider": self.name, "model": model},
            )

        counter = HuggingFaceTokenizer(tokenizer_name)
        try:
            return counter.count_text(text)
        except ImportError as e:
            raise ProviderError(
                f"failed to load tokenizer {tokenizer_name}: "
                "install with pip install transformers",
                details={"provider": self.name, "model": model},
            ) from e
        except Exception as e:
            raise ProviderError(
                f"failed to load tokenizer {tokenizer_name}: {e}",
                details={"provider": self.name, "model": model},
            ) from e

    def models(self) -> list[str]:
        return list(_MODEL_TO_TOKENIZER)

    def __repr__(self) -> str:
        return "MetaProvider()"
