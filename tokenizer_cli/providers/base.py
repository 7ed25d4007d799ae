"""Provider capability contract.

A provider knows how to count tokens for one family of models and
whether those counts are exact. The registry is polymorphic over this
protocol only, so a new provider needs no base class: it just has to
expose the five members below.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Provider(Protocol):
    """Protocol every tokenization provider satisfies."""

    @property
    def name(self) -> str:
        """Stable, non-empty display name (e.g. 'OpenAI').

        Used to label results and as the grouping key in listings.
        """
        ...

    @property
    def is_exact(self) -> bool:
        """Whether counts replay the model's real tokenizer.

        A static property of the provider, independent of whether any
        particular count succeeds.
        """
        ...

    def supports_model(self, model: str) -> bool:
        """Case-insensitive catalog membership test. Never raises."""
        ...

    def count_tokens(self, text: str, model: str) -> int:
        """Count tokens in ``text`` for ``model``.

        Args:
            text: Text to count, possibly empty.
            model: A model this provider supports.

        Returns:
            Non-negative token count; 0 for empty text.

        Raises:
            ProviderError: If the model is not in the catalog or the
                underlying tokenizer cannot be built or run.
        """
        ...

    def models(self) -> list[str]:
        """All model names in the catalog, in no guaranteed order."""
        ...
