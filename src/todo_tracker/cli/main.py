# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

One command per process: load the list, apply the command, save, exit.
Reports go to stdout; errors go to stderr with exit status 1.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_task_store
from ..config import get_settings
from ..core.commands import execute_command, parse_command
from ..core.errors import SaveError, TodoError
from ..core.ports import TaskRepo
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _open_store(settings) -> TaskRepo:
    try:
        return create_task_store(settings=settings)
    except OSError as e:
        logger.error("Cannot prepare data directory %s: %s", settings.data_dir, e)
        raise SaveError(settings.data_dir) from e


def main(argv: list[str] | None = None, *, settings=None, store: TaskRepo | None = None) -> int:
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )

    args = list(sys.argv[1:] if argv is None else argv)
    logger.debug("Starting %s args=%r", getattr(settings, "app_name", "todo"), args)

    try:
        if store is None:
            store = _open_store(settings)
        task_list = store.load()
        cmd = parse_command(args)
        report = execute_command(cmd, task_list)
        store.save(task_list)
    except TodoError as e:
        logger.info("Command failed: %s (%s) detail=%r", e, type(e).__name__, e.detail)
        print(e, file=sys.stderr)
        return 1

    print(report)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
