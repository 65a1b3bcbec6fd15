"""Endpoints for the locally stored generation history."""

from __future__ import annotations

import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from content_writer.api.deps import get_history_store
from content_writer.schemas.history import HistoryCreateRequest, HistoryItem
from content_writer.services.history_store import HistoryStore

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=List[HistoryItem])
def list_history(store: HistoryStore = Depends(get_history_store)) -> List[HistoryItem]:
    return store.load()


@router.post("", response_model=HistoryItem, status_code=201)
def save_history_item(
    payload: HistoryCreateRequest,
    store: HistoryStore = Depends(get_history_store),
) -> HistoryItem:
    return store.save(
        topic=payload.topic,
        tone=payload.tone,
        keywords=payload.keywords,
        content_length=payload.content_length,
        generated_content=payload.generated_content,
    )


@router.get("/export")
def export_history(store: HistoryStore = Depends(get_history_store)) -> Response:
    """Download the whole history as a JSON file."""

    filename = f"content-history-{int(time.time() * 1000)}.json"
    return Response(
        content=store.export_json(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.delete("/{item_id}", status_code=204)
def delete_history_item(item_id: str, store: HistoryStore = Depends(get_history_store)) -> Response:
    if not store.delete(item_id):
        raise HTTPException(status_code=404, detail="History item not found")
    return Response(status_code=204)


@router.delete("", status_code=204)
def clear_history(store: HistoryStore = Depends(get_history_store)) -> Response:
    store.clear()
    return Response(status_code=204)
