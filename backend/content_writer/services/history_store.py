"""JSON file backed history of generated content."""

from __future__ import annotations

import json
import logging
import threading
import time
from pathlib import Path
from typing import Callable, List

from pydantic import ValidationError

from content_writer.prompting import Tone
from content_writer.schemas.history import HistoryItem

logger = logging.getLogger(__name__)


class HistoryStore:
    """Newest-first list of generated content, capped at ``max_items``."""

    def __init__(
        self,
        path: Path,
        max_items: int = 50,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path)
        self.max_items = max(1, int(max_items))
        self._clock = clock
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def load(self) -> List[HistoryItem]:
        """Return stored entries; unreadable files load as an empty history."""

        with self._lock:
            return self._read()

    def save(
        self,
        topic: str,
        tone: Tone,
        keywords: str,
        content_length: int,
        generated_content: str,
    ) -> HistoryItem:
        with self._lock:
            history = self._read()
            timestamp = int(self._clock() * 1000)
            taken = {item.id for item in history}
            item_id = timestamp
            while str(item_id) in taken:
                item_id += 1
            item = HistoryItem(
                id=str(item_id),
                topic=topic,
                tone=tone,
                keywords=keywords,
                content_length=content_length,
                generated_content=generated_content,
                timestamp=timestamp,
            )
            self._write([item, *history][: self.max_items])
        logger.info("Saved history item %s for topic '%s'", item.id, topic)
        return item

    def delete(self, item_id: str) -> bool:
        """Remove one entry. Returns ``False`` when ``item_id`` is unknown."""

        with self._lock:
            history = self._read()
            remaining = [item for item in history if item.id != item_id]
            if len(remaining) == len(history):
                return False
            self._write(remaining)
        return True

    def clear(self) -> None:
        with self._lock:
            self.path.unlink(missing_ok=True)

    def export_json(self) -> str:
        """Serialize the whole history as indented JSON."""

        items = [item.model_dump(mode="json") for item in self.load()]
        return json.dumps(items, ensure_ascii=False, indent=2)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _read(self) -> List[HistoryItem]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("history file must contain a JSON list")
            return [HistoryItem.model_validate(entry) for entry in raw]
        except (OSError, ValueError, ValidationError) as exc:
            logger.error("Failed to parse history file %s: %s", self.path, exc)
            return []

    def _write(self, items: List[HistoryItem]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [item.model_dump(mode="json") for item in items]
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


__all__ = ["HistoryStore"]
