"""Helper utilities for working with generative API responses."""
from __future__ import annotations

import json
from typing import Any

import httpx


def extract_reply(data: dict[str, Any]) -> str:
    """Return the generated text from a ``generateContent`` response."""

    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    joined = "".join(str(part.get("text") or "") for part in parts if isinstance(part, dict))
    return joined.strip()


def extract_error_message(response: httpx.Response) -> str:
    """Return the API error message of a failed response, or its raw body."""

    try:
        data = response.json()
    except (json.JSONDecodeError, ValueError):
        return response.text.strip() or f"HTTP {response.status_code}"
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return json.dumps(data, ensure_ascii=False)


__all__ = ["extract_error_message", "extract_reply"]
