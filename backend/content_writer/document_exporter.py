"""Export generated markdown as PDF or Word documents."""
from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Literal

from .docx_renderer import markdown_to_docx
from .html_renderer import build_html_document, markdown_to_html

logger = logging.getLogger(__name__)

ExportFormat = Literal["pdf", "docx"]
Rasterizer = Callable[[str], bytes]

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_FAILURE_MESSAGES: dict[str, str] = {
    "pdf": "Failed to export as PDF",
    "docx": "Failed to export as Word document",
}

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9]")
_REPEATED_UNDERSCORES_RE = re.compile(r"_+")
_MAX_FILENAME_LENGTH = 50


class ExportError(RuntimeError):
    """Raised when a document could not be produced."""

    def __init__(self, export_format: ExportFormat) -> None:
        self.export_format = export_format
        super().__init__(_FAILURE_MESSAGES[export_format])


@dataclass(slots=True)
class ExportResult:
    filename: str
    media_type: str
    payload: bytes


def sanitize_filename(name: str) -> str:
    """Return ``name`` with unsafe characters replaced, at most 50 characters."""

    sanitized = _UNSAFE_CHARS_RE.sub("_", name or "")
    sanitized = _REPEATED_UNDERSCORES_RE.sub("_", sanitized)
    return sanitized[:_MAX_FILENAME_LENGTH]


def export_filename(topic: str, extension: str, now: float | None = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    return f"{sanitize_filename(topic)}_{millis}.{extension}"


def weasyprint_rasterize(html: str) -> bytes:
    """Render a standalone HTML page to PDF bytes with WeasyPrint."""

    # Imported lazily: WeasyPrint loads native Pango libraries at import time.
    from weasyprint import HTML

    return HTML(string=html).write_pdf()


def export_pdf(content: str, topic: str, *, rasterizer: Rasterizer | None = None) -> ExportResult:
    """Render ``content`` to HTML and rasterize it into a PDF."""

    render = rasterizer or weasyprint_rasterize
    try:
        page = build_html_document(markdown_to_html(content), topic)
        payload = render(page)
    except Exception as exc:
        logger.exception("PDF export failed for topic '%s'", topic)
        raise ExportError("pdf") from exc
    return ExportResult(
        filename=export_filename(topic, "pdf"),
        media_type=PDF_MEDIA_TYPE,
        payload=payload,
    )


def export_word(content: str, topic: str) -> ExportResult:
    """Convert ``content`` into a DOCX document titled with ``topic``."""

    try:
        payload = markdown_to_docx(content, topic)
    except Exception as exc:
        logger.exception("Word export failed for topic '%s'", topic)
        raise ExportError("docx") from exc
    return ExportResult(
        filename=export_filename(topic, "docx"),
        media_type=DOCX_MEDIA_TYPE,
        payload=payload,
    )


__all__ = [
    "DOCX_MEDIA_TYPE",
    "ExportError",
    "ExportResult",
    "PDF_MEDIA_TYPE",
    "export_filename",
    "export_pdf",
    "export_word",
    "sanitize_filename",
    "weasyprint_rasterize",
]
