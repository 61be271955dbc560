"""Draft and refine clinical text with a hosted text model.

Both operations recover from any model failure locally: a failed draft yields
``""`` and a failed refine hands the user's text back unchanged, so a flaky
model can never destroy what was typed.
"""

from __future__ import annotations

import logging

import httpx

from .documents.composer import DocumentKind
from .prompts.templates import DOCUMENT_LABELS, DRAFT_CERTIFICATE, REFINE_TEXT
from .protocols import TextModelProtocol

logger = logging.getLogger(__name__)


class TextAssist:
    """Certificate drafting and text refinement with retry and fallbacks."""

    def __init__(
        self,
        model: TextModelProtocol | None,
        retries: int = 1,
        max_new_tokens: int = 1024,
    ) -> None:
        self._model = model
        self._retries = max(0, retries)
        self._max_new_tokens = max_new_tokens

    @property
    def available(self) -> bool:
        """Whether a model is configured."""
        return self._model is not None

    async def _complete(self, prompt: str) -> str | None:
        """Run *prompt*, retrying HTTP failures. Returns None when every attempt fails."""
        if self._model is None:
            logger.warning("Text assist requested but no model is configured")
            return None

        attempts = self._retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return await self._model.generate(prompt, max_new_tokens=self._max_new_tokens)
            except httpx.HTTPError as e:
                logger.warning("Text model call failed (attempt %d/%d): %s", attempt, attempts, e)
            except Exception as e:
                logger.error(f"Text model call failed: {type(e).__name__}: {e}")
                return None
        return None

    async def draft_certificate_body(self, diagnosis: str, observations: str, days_off: str) -> str:
        """Draft the descriptive paragraph of a medical certificate.

        Args:
            diagnosis: Clinical picture or diagnosis. Must be non-empty.
            observations: Additional observations, may be empty.
            days_off: Number of days of leave, as typed.

        Returns:
            The drafted text, or ``""`` when nothing could be produced.
        """
        if not (diagnosis or "").strip():
            logger.info("Skipping certificate draft without a diagnosis")
            return ""

        prompt = DRAFT_CERTIFICATE.format(
            diagnosis=diagnosis.strip(),
            observations=(observations or "").strip(),
            days_off=(days_off or "").strip(),
        )
        result = await self._complete(prompt)
        return result or ""

    async def refine_text(self, text: str, kind: DocumentKind | str) -> str:
        """Rewrite *text* in a formal register for the given document kind.

        Returns the original text, unchanged, if it is empty or the model fails.
        """
        if not (text or "").strip():
            return text

        label = DOCUMENT_LABELS[DocumentKind(kind).value]
        result = await self._complete(REFINE_TEXT.format(document_label=label, text=text))
        return result or text


# Will be set by main.py on startup
_text_assist: TextAssist | None = None


def set_text_assist(assist: TextAssist) -> None:
    """Set the global text assist instance."""
    global _text_assist
    _text_assist = assist


def get_text_assist() -> TextAssist:
    """Get the global text assist (used by FastAPI Depends)."""
    global _text_assist
    if _text_assist is None:
        _text_assist = TextAssist(model=None)
    return _text_assist
