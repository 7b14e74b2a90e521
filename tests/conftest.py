# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.core.models import TaskList
from todo_tracker.storage.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep tests isolated from the developer's environment and .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        todo_path=data_dir / "todo.json",
    )


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.todo_path)
