"""Remote text model client for an OpenAI-compatible endpoint."""

from __future__ import annotations

import logging
import os

import httpx

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/openai"
DEFAULT_MODEL = "gemini-3-flash-preview"


class RemoteTextModel:
    """Async chat-completions client.

    Works with Gemini's OpenAI-compatible API, OpenAI, vLLM or any other
    endpoint exposing ``POST {endpoint}/chat/completions``.

    Usage:
        export MEDICINA_ASSIST_API_KEY="your-api-key"

        from medicina.remote import RemoteTextModel
        model = RemoteTextModel()
        text = await model.generate("Refine this text: ...")
    """

    def __init__(
        self,
        endpoint: str | None = None,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize remote client.

        Args:
            endpoint: Base URL of the API. If None, uses MEDICINA_ASSIST_ENDPOINT
                      or the Gemini OpenAI-compatible endpoint.
            api_key: API key. If None, uses MEDICINA_ASSIST_API_KEY or GEMINI_API_KEY.
            model: Model ID. If None, uses MEDICINA_ASSIST_MODEL.
            timeout: HTTP request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self._endpoint = (endpoint or os.environ.get("MEDICINA_ASSIST_ENDPOINT") or DEFAULT_ENDPOINT).rstrip("/")
        self._api_key = (
            api_key
            or os.environ.get("MEDICINA_ASSIST_API_KEY")
            or os.environ.get("GEMINI_API_KEY", "")
        )
        self._model = model or os.environ.get("MEDICINA_ASSIST_MODEL", DEFAULT_MODEL)
        self._timeout = timeout

        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        self._client = httpx.AsyncClient(timeout=timeout, headers=headers, transport=transport)

    @property
    def model(self) -> str:
        return self._model

    async def health_check(self) -> bool:
        """Check if remote endpoint is reachable."""
        try:
            resp = await self._client.get(f"{self._endpoint}/models")
            return resp.status_code == 200
        except httpx.HTTPError:
            return False

    async def generate(
        self,
        prompt: str,
        max_new_tokens: int = 1024,
        temperature: float = 0.4,
        **kwargs,
    ) -> str:
        """Generate a response via the chat-completions API.

        Args:
            prompt: The input prompt.
            max_new_tokens: Maximum tokens to generate.
            temperature: Sampling temperature.
            **kwargs: Additional arguments (ignored for compatibility).

        Returns:
            Generated text response.

        Raises:
            httpx.HTTPError: On transport failures, timeouts and HTTP errors.
        """
        payload = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_new_tokens,
            "temperature": temperature,
        }

        resp = await self._client.post(f"{self._endpoint}/chat/completions", json=payload)
        resp.raise_for_status()

        content = resp.json()["choices"][0]["message"]["content"] or ""
        logger.debug("Generated %d characters with %s", len(content), self._model)
        return content.strip()

    async def close(self) -> None:
        """Close HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> RemoteTextModel:
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
