# tests/test_task_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_tracker.core.errors import SaveError
from todo_tracker.core.models import Priority, TaskList
from todo_tracker.storage.task_store import TaskStore


def _sample_list() -> TaskList:
    tl = TaskList()
    for text in ("eat mango", "walk dog", "pet ferris"):
        tl.add(text)
    tl.set_priority(2, Priority.MEDIUM)
    tl.set_priority(3, Priority.HIGH)
    tl.mark_done(3)
    return tl


def test_save_then_load_round_trip(store: TaskStore) -> None:
    original = _sample_list()
    store.save(original)

    loaded = store.load()
    assert loaded == original
    assert loaded.next_id == 4
    assert [(t.id, t.done, t.priority) for t in loaded.tasks] == [
        (1, False, Priority.LOW),
        (2, False, Priority.MEDIUM),
        (3, True, Priority.HIGH),
    ]


def test_saved_document_shape(store: TaskStore) -> None:
    store.save(_sample_list())

    raw = store.path.read_text("utf-8")
    assert raw.startswith("{\n  ")
    data = json.loads(raw)
    assert data["next_id"] == 4
    assert data["tasks"][2] == {"id": 3, "text": "pet ferris", "done": True, "priority": "High"}
    assert not store.path.with_name(store.path.name + ".tmp").exists()


def test_load_missing_file_gives_empty_list(tmp_path: Path) -> None:
    loaded = TaskStore(tmp_path / "nope" / "todo.json").load()
    assert loaded.tasks == []
    assert loaded.next_id == 1


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json at all",
        "[]",
        '{"tasks": []}',
        '{"tasks": {}, "next_id": 1}',
        '{"tasks": [], "next_id": 0}',
        '{"tasks": [{"id": 1, "text": "a", "done": false}], "next_id": 2}',
        '{"tasks": [{"id": 1, "text": "a", "done": "no", "priority": "Low"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "text": "a", "done": false, "priority": "Urgent"}], "next_id": 2}',
        '{"tasks": [{"id": true, "text": "a", "done": false, "priority": "Low"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "text": "a", "done": false, "priority": "Low"},'
        ' {"id": 1, "text": "b", "done": false, "priority": "Low"}], "next_id": 3}',
        '{"tasks": [], "next_id": ' + "1" * 5000 + '}',
        "[" * 100000 + "]" * 100000,
    ],
)
def test_load_corrupt_file_gives_empty_list(store: TaskStore, content: str) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(content, "utf-8")

    loaded = store.load()
    assert loaded.tasks == []
    assert loaded.next_id == 1


def test_load_bumps_stale_next_id(store: TaskStore) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text(
        json.dumps(
            {
                "tasks": [
                    {"id": 1, "text": "a", "done": False, "priority": "Low"},
                    {"id": 5, "text": "b", "done": True, "priority": "Medium"},
                ],
                "next_id": 3,
            }
        ),
        "utf-8",
    )

    loaded = store.load()
    assert len(loaded) == 2
    assert loaded.next_id == 6
    assert loaded.add("c").id == 6


def test_load_keeps_gap_in_counter(store: TaskStore) -> None:
    store.path.parent.mkdir(parents=True, exist_ok=True)
    store.path.write_text('{"tasks": [], "next_id": 9}', "utf-8")
    assert store.load().next_id == 9


def test_save_failure_raises_save_error(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()
    with pytest.raises(SaveError) as exc_info:
        TaskStore(target).save(_sample_list())
    assert str(exc_info.value) == "failed to save todo list"
    assert not (tmp_path / "taken.tmp").exists()


def test_save_failure_when_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", "utf-8")
    with pytest.raises(SaveError):
        TaskStore(blocker / "todo.json").save(TaskList())
