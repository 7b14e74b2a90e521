# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

The entrypoint depends on this Protocol instead of the concrete JSON store,
which keeps storage swappable and makes testing easier.
"""

from typing import Protocol

from .models import TaskList


class TaskRepo(Protocol):
    """Load/save a whole TaskList. load() never raises; save() raises SaveError."""

    def load(self) -> TaskList: ...

    def save(self, task_list: TaskList) -> None: ...
