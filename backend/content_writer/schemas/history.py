"""Schemas for the generation history endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from content_writer.prompting import MAX_CONTENT_LENGTH, MIN_CONTENT_LENGTH, Tone


class HistoryItem(BaseModel):
    id: str = Field(..., description="Identifier, the save time in epoch milliseconds")
    topic: str = Field(..., description="Topic the content was generated for")
    tone: Tone = Field(..., description="Requested tone of voice")
    keywords: str = Field(default="", description="Comma separated keywords")
    content_length: int = Field(..., description="Requested length in words")
    generated_content: str = Field(..., description="Markdown returned by the model")
    timestamp: int = Field(..., description="Save time in epoch milliseconds")


class HistoryCreateRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="Topic the content was generated for")
    tone: Tone = Field(..., description="Requested tone of voice")
    keywords: str = Field(default="", description="Comma separated keywords")
    content_length: int = Field(
        ...,
        ge=MIN_CONTENT_LENGTH,
        le=MAX_CONTENT_LENGTH,
        description="Requested length in words",
    )
    generated_content: str = Field(..., min_length=1, description="Markdown returned by the model")
