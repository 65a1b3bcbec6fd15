"""Client wrapper around the content generation REST API."""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from content_writer.prompting import Tone

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_AFTER = 60


class ApiClientError(RuntimeError):
    """User facing error raised by :class:`ContentApiClient`."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ContentApiClient:
    """Synchronous HTTP client for the generation backend."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def generate_content(
        self,
        topic: str,
        tone: Tone | str,
        keywords: str,
        content_length: int,
    ) -> str:
        """Request generated markdown for the given parameters."""

        payload: Dict[str, Any] = {
            "topic": topic,
            "tone": tone.value if isinstance(tone, Tone) else tone,
            "keywords": keywords,
            "content_length": content_length,
        }
        url = f"{self.base_url}/api/generate"
        try:
            response = requests.post(url, json=payload, timeout=self.timeout)
        except requests.Timeout as exc:
            raise ApiClientError("Request timeout. Please try again.") from exc
        except requests.RequestException as exc:
            logger.warning("Failed to reach %s: %s", url, exc)
            raise ApiClientError(
                "Network error. Please check your internet connection and ensure the server is running."
            ) from exc

        if not response.ok:
            raise ApiClientError(self._error_message(response), status_code=response.status_code)
        return str(response.json().get("content", ""))

    def health_check(self) -> bool:
        """Return whether the backend answers its health endpoint."""

        try:
            response = requests.get(f"{self.base_url}/api/health", timeout=self.timeout)
        except requests.RequestException:
            return False
        return response.ok

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = {}
        detail = data.get("detail") if isinstance(data, dict) else None
        if not isinstance(detail, str):
            detail = None

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            seconds = int(retry_after) if retry_after and retry_after.isdigit() else DEFAULT_RETRY_AFTER
            return f"Too many requests. Please wait {seconds} seconds before trying again."
        if response.status_code == 401:
            return "API authentication failed. Please check your configuration."
        if response.status_code == 400:
            return detail or "Invalid request. Please check your inputs."
        return detail or "Failed to generate content. Please try again."


__all__ = ["ApiClientError", "ContentApiClient"]
