"""Endpoints that export generated markdown as PDF or Word files."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from content_writer.api.deps import get_pdf_rasterizer
from content_writer.document_exporter import ExportError, ExportResult, Rasterizer, export_pdf, export_word
from content_writer.schemas.export import ExportRequest

router = APIRouter(prefix="/export", tags=["export"])


def _attachment(result: ExportResult) -> Response:
    return Response(
        content=result.payload,
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.post("/pdf")
def export_pdf_document(
    payload: ExportRequest,
    rasterizer: Rasterizer = Depends(get_pdf_rasterizer),
) -> Response:
    try:
        result = export_pdf(payload.content, payload.topic, rasterizer=rasterizer)
    except ExportError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return _attachment(result)


@router.post("/docx")
def export_docx_document(payload: ExportRequest) -> Response:
    try:
        result = export_word(payload.content, payload.topic)
    except ExportError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return _attachment(result)
