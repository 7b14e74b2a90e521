# src/todo_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep stderr readable for a one-shot CLI:
    - allow todo_tracker logs (subject to the handler level)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - any other 3rd party: only errors
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "todo_tracker" or name.startswith("todo_tracker."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, WARNING+ by default so reports on stdout stay clean
    - File handler: full logs for debugging (optional)

    Call this ONCE, very early (before first logger.info).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    # File (everything). Best-effort: an unusable log dir must not stop the command.
    if log_to_file:
        log_file = Path(log_dir) / "todo.log"
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).debug("File logging disabled (%s): %s", log_file, e)
        else:
            fh.setLevel(file_level)
            fh.setFormatter(fmt)
            root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
