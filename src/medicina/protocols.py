"""Protocol definitions for text-generation backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextModelProtocol(Protocol):
    """Interface the text assist needs from a text-generation model.

    ``RemoteTextModel`` implements it against a hosted endpoint; tests swap in
    simple fakes.
    """

    async def generate(
        self,
        prompt: str,
        max_new_tokens: int = 1024,
        **kwargs,
    ) -> str:
        """Generate free-form text.

        Args:
            prompt: The input prompt.
            max_new_tokens: Maximum tokens to generate.
            **kwargs: Additional generation parameters.

        Returns:
            Generated text response.
        """
        ...
