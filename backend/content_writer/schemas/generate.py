"""Schemas for the content generation endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field

from content_writer.prompting import (
    DEFAULT_CONTENT_LENGTH,
    MAX_CONTENT_LENGTH,
    MIN_CONTENT_LENGTH,
    Tone,
)


class GenerateRequest(BaseModel):
    topic: str = Field(..., description="Subject of the content")
    tone: Tone = Field(..., description="Tone of voice")
    keywords: str | None = Field(default=None, description="Keywords to weave into the text")
    content_length: int = Field(
        default=DEFAULT_CONTENT_LENGTH,
        ge=MIN_CONTENT_LENGTH,
        le=MAX_CONTENT_LENGTH,
        description="Approximate length in words",
    )


class GenerationMetadata(BaseModel):
    topic: str
    tone: Tone
    keywords: str
    requested_length: int
    actual_length: int


class GenerateResponse(BaseModel):
    content: str = Field(..., description="Generated markdown")
    metadata: GenerationMetadata


class HealthResponse(BaseModel):
    status: str = Field(..., description="Current API state")
    timestamp: str = Field(..., description="Server time, ISO 8601")
