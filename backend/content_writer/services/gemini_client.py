"""Async client for the Gemini ``generateContent`` REST endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from content_writer.llm_utils import extract_error_message, extract_reply

logger = logging.getLogger(__name__)


class GeminiError(RuntimeError):
    """Raised when the generative API fails or returns no text."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GeminiClient:
    """Minimal client for text generation."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com",
        timeout: float = 60.0,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Generate text for ``prompt``."""

        payload: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers={"x-goog-api-key": self.api_key},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            message = extract_error_message(exc.response)
            logger.error("Gemini returned HTTP %s: %s", exc.response.status_code, message)
            raise GeminiError(message, status_code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.error("Error talking to Gemini: %s", exc)
            raise GeminiError(f"Failed to reach the generative API: {exc}") from exc

        text = extract_reply(data)
        if not text:
            raise GeminiError("No content generated from AI")
        logger.debug("Gemini generated %s characters", len(text))
        return text


__all__ = ["GeminiClient", "GeminiError"]
