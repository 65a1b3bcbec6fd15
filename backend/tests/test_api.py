"""Tests for the HTTP API."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from content_writer.api.deps import get_app_settings, get_gemini_client, get_pdf_rasterizer
from content_writer.core.config import Settings
from content_writer.main import app
from content_writer.services.gemini_client import GeminiError

GENERATE_PAYLOAD = {"topic": "  Remote work  ", "tone": "Professional", "keywords": " focus, tools ", "content_length": 300}


def test_health(api_client: TestClient) -> None:
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["timestamp"]


def test_generate_returns_content_and_metadata(api_client: TestClient, fake_gemini) -> None:
    response = api_client.post("/api/generate", json=GENERATE_PAYLOAD)

    assert response.status_code == 200
    body = response.json()
    assert body["content"] == fake_gemini.reply
    assert body["metadata"] == {
        "topic": "Remote work",
        "tone": "Professional",
        "keywords": "focus, tools",
        "requested_length": 300,
        "actual_length": 5,
    }
    assert 'Topic: "Remote work"' in fake_gemini.prompts[0]
    assert "focus, tools" in fake_gemini.prompts[0]


def test_generate_defaults_content_length(api_client: TestClient) -> None:
    response = api_client.post("/api/generate", json={"topic": "Tea", "tone": "Casual"})

    assert response.status_code == 200
    assert response.json()["metadata"]["requested_length"] == 200


@pytest.mark.parametrize(
    "payload",
    [
        {"topic": "   ", "tone": "Casual"},
        {"topic": "Tea", "tone": "Angry"},
        {"topic": "Tea"},
        {"topic": "Tea", "tone": "Casual", "content_length": 10},
        {"topic": "Tea", "tone": "Casual", "content_length": 5000},
    ],
)
def test_generate_rejects_invalid_input(api_client: TestClient, payload: dict) -> None:
    response = api_client.post("/api/generate", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"]


@pytest.mark.parametrize(
    ("error", "status", "detail"),
    [
        (GeminiError("API key not valid.", status_code=400), 401, "Invalid API key configuration"),
        (GeminiError("Forbidden", status_code=403), 401, "Invalid API key configuration"),
        (GeminiError("Resource exhausted", status_code=429), 429, "API quota exceeded. Please try again later."),
        (GeminiError("No content generated from AI"), 500, "Failed to generate content. Please try again."),
    ],
)
def test_generate_maps_upstream_errors(
    api_client: TestClient,
    fake_gemini,
    error: GeminiError,
    status: int,
    detail: str,
) -> None:
    fake_gemini.error = error

    response = api_client.post("/api/generate", json=GENERATE_PAYLOAD)

    assert response.status_code == status
    assert response.json()["detail"] == detail


def test_generate_details_in_development(api_client: TestClient, fake_gemini) -> None:
    app.dependency_overrides[get_app_settings] = lambda: Settings(gemini_api_key="k", environment="development")
    fake_gemini.error = GeminiError("upstream exploded", status_code=500)

    response = api_client.post("/api/generate", json=GENERATE_PAYLOAD)

    assert response.status_code == 500
    assert "upstream exploded" in response.json()["detail"]


def test_generate_is_rate_limited(api_client: TestClient) -> None:
    for _ in range(2):
        assert api_client.post("/api/generate", json=GENERATE_PAYLOAD).status_code == 200

    response = api_client.post("/api/generate", json=GENERATE_PAYLOAD)

    assert response.status_code == 429
    assert response.json()["detail"] == "Too many requests. Please try again later."
    assert int(response.headers["Retry-After"]) > 0


def test_generate_without_api_key(api_client: TestClient) -> None:
    app.dependency_overrides.pop(get_gemini_client)
    app.dependency_overrides[get_app_settings] = lambda: Settings(gemini_api_key="")

    response = api_client.post("/api/generate", json=GENERATE_PAYLOAD)

    assert response.status_code == 503


def test_export_pdf(api_client: TestClient) -> None:
    response = api_client.post("/api/export/pdf", json={"content": "# Hi\n\nText", "topic": "My Topic"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"].startswith('attachment; filename="My_Topic_')
    assert response.content == b"%PDF-1.4 fake"


def test_export_pdf_failure(api_client: TestClient) -> None:
    def broken(html: str) -> bytes:
        raise RuntimeError("rasterizer down")

    app.dependency_overrides[get_pdf_rasterizer] = lambda: broken

    response = api_client.post("/api/export/pdf", json={"content": "Text", "topic": "T"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to export as PDF"


def test_export_docx(api_client: TestClient) -> None:
    response = api_client.post(
        "/api/export/docx",
        json={"content": "## Part\n\n| A | B |\n|---|---|\n| 1 | 2 |", "topic": "Quarterly Report"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    assert 'filename="Quarterly_Report_' in response.headers["content-disposition"]
    assert response.content.startswith(b"PK")


def test_history_lifecycle(api_client: TestClient) -> None:
    payload = {
        "topic": "Gardening",
        "tone": "Informative",
        "keywords": "soil",
        "content_length": 250,
        "generated_content": "# Soil basics",
    }

    created = api_client.post("/api/history", json=payload)
    assert created.status_code == 201
    item_id = created.json()["id"]

    listed = api_client.get("/api/history")
    assert [item["id"] for item in listed.json()] == [item_id]

    exported = api_client.get("/api/history/export")
    assert exported.status_code == 200
    assert exported.headers["content-disposition"].startswith('attachment; filename="content-history-')
    assert json.loads(exported.content)[0]["topic"] == "Gardening"

    assert api_client.delete(f"/api/history/{item_id}").status_code == 204
    assert api_client.delete(f"/api/history/{item_id}").status_code == 404

    api_client.post("/api/history", json=payload)
    assert api_client.delete("/api/history").status_code == 204
    assert api_client.get("/api/history").json() == []
