# src/todo_tracker/core/errors.py

"""
Error taxonomy for the tracker.

Every error is terminal for the current invocation: the CLI prints str(err)
to stderr and exits with status 1. The optional detail is for logs only.
"""

from __future__ import annotations


# Ids are unsigned 32-bit.
MAX_TASK_ID = 0xFFFFFFFF


class TodoError(Exception):
    message = "todo error"

    def __init__(self, detail: object | None = None) -> None:
        super().__init__(self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class UnknownCommand(TodoError):
    message = "invalid command"


class MissingArgument(TodoError):
    message = "invalid arguments"


class TaskNotFound(TodoError):
    message = "task with that id was not found"


class InvalidId(TodoError):
    message = "task id must be a positive integer"


class SaveError(TodoError):
    message = "failed to save todo list"


class PriorityError(TodoError):
    message = "unknown priority"


def parse_task_id(token: str) -> int:
    """Convert a user token into a task id; any parse failure becomes InvalidId."""
    if not (token.isascii() and token.isdigit()):
        raise InvalidId(token)
    try:
        task_id = int(token)
    except ValueError as e:
        raise InvalidId(token) from e
    if not 0 < task_id <= MAX_TASK_ID:
        raise InvalidId(token)
    return task_id
