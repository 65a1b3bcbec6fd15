"""Schemas for the document export endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ExportRequest(BaseModel):
    content: str = Field(..., description="Markdown to export")
    topic: str = Field(default="", description="Document title, also used for the file name")
