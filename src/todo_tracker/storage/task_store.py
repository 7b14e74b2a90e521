# src/todo_tracker/storage/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import PriorityError, SaveError
from ..core.models import Priority, Task, TaskList

logger = logging.getLogger(__name__)


class CorruptDocument(ValueError):
    """Raised internally when the JSON document does not have the expected shape."""


class TaskStore:
    """
    JSON file task store.

    Document shape:
        {"tasks": [{"id", "text", "done", "priority"}], "next_id": n}

    Loading is forgiving: a missing, unreadable or malformed file yields an
    empty TaskList (logged, never raised). Saving goes through a temp file +
    os.replace and raises SaveError on failure.
    """

    def __init__(self, path: str | Path = "todo.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- (de)serialization ----

    @staticmethod
    def _task_to_dict(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "text": task.text,
            "done": task.done,
            "priority": task.priority.value,
        }

    @classmethod
    def to_document(cls, task_list: TaskList) -> dict[str, Any]:
        return {
            "tasks": [cls._task_to_dict(t) for t in task_list.tasks],
            "next_id": task_list.next_id,
        }

    @staticmethod
    def _is_id(v: Any) -> bool:
        # bool is an int subclass; reject it explicitly.
        return isinstance(v, int) and not isinstance(v, bool) and v > 0

    @classmethod
    def _dict_to_task(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise CorruptDocument("task entry is not an object")

        task_id = raw.get("id")
        text = raw.get("text")
        done = raw.get("done")
        priority = raw.get("priority")

        if not cls._is_id(task_id):
            raise CorruptDocument(f"bad id: {task_id!r}")
        if not isinstance(text, str):
            raise CorruptDocument(f"bad text for id={task_id}")
        if not isinstance(done, bool):
            raise CorruptDocument(f"bad done flag for id={task_id}")
        if not isinstance(priority, str):
            raise CorruptDocument(f"bad priority for id={task_id}")
        try:
            prio = Priority.from_name(priority)
        except PriorityError as e:
            raise CorruptDocument(f"unknown priority {priority!r} for id={task_id}") from e

        return Task(id=task_id, text=text, done=done, priority=prio)

    @classmethod
    def from_document(cls, data: Any) -> TaskList:
        if not isinstance(data, dict):
            raise CorruptDocument("document is not an object")

        raw_tasks = data.get("tasks")
        next_id = data.get("next_id")
        if not isinstance(raw_tasks, list):
            raise CorruptDocument("'tasks' is not a list")
        if not cls._is_id(next_id):
            raise CorruptDocument(f"bad next_id: {next_id!r}")

        tasks = [cls._dict_to_task(raw) for raw in raw_tasks]

        ids = [t.id for t in tasks]
        if len(set(ids)) != len(ids):
            raise CorruptDocument("duplicate task ids")

        if ids and next_id <= max(ids):
            logger.warning(
                "Stored next_id=%s does not exceed max id=%s; bumping to %s",
                next_id,
                max(ids),
                max(ids) + 1,
            )
            next_id = max(ids) + 1

        return TaskList(tasks=tasks, next_id=next_id)

    # ---- public API ----

    def load(self) -> TaskList:
        path = self._path
        try:
            data = json.loads(path.read_text("utf-8"))
            task_list = self.from_document(data)
        except FileNotFoundError:
            logger.info("No todo file at %s; starting with an empty list.", path)
            return TaskList()
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Failed to load todo list from %s (%s); starting empty.", path, e)
            return TaskList()

        logger.info("Loaded %d tasks from %s (next_id=%s)", len(task_list), path, task_list.next_id)
        return task_list

    def save(self, task_list: TaskList) -> None:
        path = self._path
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(self.to_document(task_list), ensure_ascii=False, indent=2)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save todo list to %s: %s", path, e)
            raise SaveError(path) from e

        logger.info("Saved %d tasks to %s", len(task_list), path)
