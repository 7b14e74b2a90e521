# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- wires the concrete JSON store behind the TaskRepo port.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.todo_path.parent.mkdir(parents=True, exist_ok=True)


def create_task_store(*, settings=None) -> TaskRepo:
    """
    Build the task store for the configured todo file.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    logger.debug("Using todo file %s", settings.todo_path)
    return TaskStore(settings.todo_path)
