"""Shared fixtures for API tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from content_writer.api.deps import (
    get_app_settings,
    get_gemini_client,
    get_history_store,
    get_pdf_rasterizer,
    get_rate_limiter,
)
from content_writer.core.config import Settings
from content_writer.main import app
from content_writer.services.gemini_client import GeminiError
from content_writer.services.history_store import HistoryStore
from content_writer.services.rate_limiter import FixedWindowRateLimiter


class FakeGemini:
    """Gemini stand-in recording prompts and returning a canned reply."""

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.reply = "## Heading\n\nGenerated body text."
        self.error: GeminiError | None = None

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def api_settings() -> Settings:
    return Settings(gemini_api_key="test-key", environment="local")


@pytest.fixture
def api_client(tmp_path: Path, fake_gemini: FakeGemini, api_settings: Settings) -> Iterator[TestClient]:
    limiter = FixedWindowRateLimiter(limit=2, window_seconds=60)
    store = HistoryStore(tmp_path / "history.json")
    app.dependency_overrides[get_app_settings] = lambda: api_settings
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    app.dependency_overrides[get_history_store] = lambda: store
    app.dependency_overrides[get_pdf_rasterizer] = lambda: (lambda html: b"%PDF-1.4 fake")
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
