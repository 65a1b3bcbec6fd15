"""Tests for the JSON file history store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from content_writer.prompting import Tone
from content_writer.services.history_store import HistoryStore


class FakeClock:
    def __init__(self, start: float = 1700000000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(tmp_path: Path, clock: FakeClock) -> HistoryStore:
    return HistoryStore(tmp_path / "history.json", max_items=3, clock=clock)


def _save(store: HistoryStore, topic: str):
    return store.save(
        topic=topic,
        tone=Tone.INFORMATIVE,
        keywords="a, b",
        content_length=200,
        generated_content=f"# {topic}",
    )


def test_save_and_load_newest_first(store: HistoryStore, clock: FakeClock) -> None:
    first = _save(store, "First")
    clock.now += 1
    second = _save(store, "Second")

    assert first.id == "1700000000000"
    assert first.timestamp == 1700000000000
    assert [item.topic for item in store.load()] == ["Second", "First"]
    assert store.load()[0] == second


def test_history_is_capped(store: HistoryStore, clock: FakeClock) -> None:
    for index in range(5):
        clock.now += 1
        _save(store, f"Topic {index}")

    assert [item.topic for item in store.load()] == ["Topic 4", "Topic 3", "Topic 2"]


def test_ids_stay_unique_within_one_millisecond(store: HistoryStore) -> None:
    first = _save(store, "A")
    second = _save(store, "B")

    assert first.id != second.id


def test_delete_known_and_unknown(store: HistoryStore) -> None:
    item = _save(store, "Gone")

    assert store.delete(item.id) is True
    assert store.delete(item.id) is False
    assert store.load() == []


def test_clear_removes_file(store: HistoryStore) -> None:
    _save(store, "One")
    store.clear()

    assert not store.path.exists()
    assert store.load() == []


def test_export_json_round_trips(store: HistoryStore) -> None:
    _save(store, "Exported")

    exported = json.loads(store.export_json())

    assert exported[0]["topic"] == "Exported"
    assert exported[0]["tone"] == "Informative"


def test_corrupt_file_loads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")

    assert HistoryStore(path).load() == []
