"""Content generation endpoint proxying the generative API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from content_writer.api.deps import enforce_rate_limit, get_app_settings, get_gemini_client
from content_writer.core.config import Settings
from content_writer.prompting import build_prompt, count_words, sanitize_keywords, sanitize_topic
from content_writer.schemas.generate import GenerateRequest, GenerateResponse, GenerationMetadata
from content_writer.services.gemini_client import GeminiClient, GeminiError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])


def _translate_error(exc: GeminiError, settings: Settings) -> HTTPException:
    message = str(exc).lower()
    if exc.status_code in (401, 403) or "api key" in message:
        return HTTPException(status_code=401, detail="Invalid API key configuration")
    if exc.status_code == 429 or "quota" in message or "rate limit" in message:
        return HTTPException(status_code=429, detail="API quota exceeded. Please try again later.")
    detail = "Failed to generate content. Please try again."
    if settings.environment == "development":
        detail = f"{detail} ({exc})"
    return HTTPException(status_code=500, detail=detail)


@router.post(
    "/generate",
    response_model=GenerateResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def generate_content(
    payload: GenerateRequest,
    client: GeminiClient = Depends(get_gemini_client),
    settings: Settings = Depends(get_app_settings),
) -> GenerateResponse:
    """Generate markdown content for a topic, tone and keyword list."""

    topic = sanitize_topic(payload.topic)
    if not topic:
        raise HTTPException(status_code=400, detail="Topic is required and must be a non-empty string")
    keywords = sanitize_keywords(payload.keywords)

    prompt = build_prompt(topic, payload.tone, keywords, payload.content_length)
    try:
        content = await client.generate(prompt)
    except GeminiError as exc:
        logger.error("Error generating content: %s", exc)
        raise _translate_error(exc, settings) from exc

    return GenerateResponse(
        content=content,
        metadata=GenerationMetadata(
            topic=topic,
            tone=payload.tone,
            keywords=keywords,
            requested_length=payload.content_length,
            actual_length=count_words(content),
        ),
    )
