# src/todo_tracker/core/commands.py

"""
Command parsing and dispatch.

parse_command() turns argv-style tokens into a Command value;
execute_command() applies it to a TaskList and returns the report text.
Nothing here prints or touches the filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .errors import InvalidId, MissingArgument, PriorityError, UnknownCommand, parse_task_id
from .models import Priority, Task, TaskList

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    text: str | None = None
    task_id: int | None = None
    priority: Priority | None = None


CommandParser = Callable[[str, list[str]], Command]
CommandHandler = Callable[[Command, TaskList], str]


@dataclass(frozen=True, slots=True)
class _Registered:
    parser: CommandParser
    handler: CommandHandler
    usage: str
    help_text: str


def _parse_no_args(name: str, args: list[str]) -> Command:
    return Command(name)


class CommandRegistry:
    """Subcommand registry: name -> (parser, handler, help)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Registered] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        parser: CommandParser | None = None,
        usage: str | None = None,
    ) -> None:
        self._commands[name] = _Registered(
            parser=parser or _parse_no_args,
            handler=handler,
            usage=usage or name,
            help_text=help_text,
        )

    def names(self) -> list[str]:
        return list(self._commands)

    def parse(self, args: list[str]) -> Command:
        if not args:
            raise UnknownCommand()

        name, rest = args[0], list(args[1:])
        entry = self._commands.get(name)
        if entry is None:
            raise UnknownCommand(name)
        return entry.parser(name, rest)

    def execute(self, cmd: Command, task_list: TaskList) -> str:
        entry = self._commands.get(cmd.name)
        if entry is None:
            raise UnknownCommand(cmd.name)
        logger.debug("Executing %s", cmd)
        return entry.handler(cmd, task_list)

    def build_help(self) -> str:
        lines = [f"Available commands: {', '.join(self._commands)}"]
        width = max((len(e.usage) for e in self._commands.values()), default=0)
        for entry in self._commands.values():
            lines.append(f"  {entry.usage.ljust(width)}  {entry.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_command(args: list[str]) -> Command:
    return registry.parse(args)


def execute_command(cmd: Command, task_list: TaskList) -> str:
    return registry.execute(cmd, task_list)


# ---- parsers ----


def _parse_add(name: str, args: list[str]) -> Command:
    if not args:
        raise MissingArgument(name)
    # Unquoted words are joined, so `add buy milk` keeps the whole text.
    return Command(name, text=" ".join(args))


def _parse_list_prio(name: str, args: list[str]) -> Command:
    if not args:
        raise PriorityError()
    return Command(name, priority=Priority.parse(args[0]))


def _parse_done(name: str, args: list[str]) -> Command:
    if not args:
        raise MissingArgument(name)
    return Command(name, task_id=parse_task_id(args[0]))


def _parse_set_prio(name: str, args: list[str]) -> Command:
    if not args:
        raise InvalidId()
    task_id = parse_task_id(args[0])
    if len(args) < 2:
        raise PriorityError()
    return Command(name, task_id=task_id, priority=Priority.parse(args[1]))


# ---- handlers ----


def _render(header: str, tasks: list[Task]) -> str:
    return "\n".join([header, *(t.display() for t in tasks)])


def cmd_add(cmd: Command, task_list: TaskList) -> str:
    task = task_list.add(cmd.text or "")
    logger.info("Added task id=%s", task.id)
    return f"Added {task.text} as {task.id} with {task.priority} priority"


def cmd_list(cmd: Command, task_list: TaskList) -> str:
    return _render("Tasks:", task_list.list_all())


def cmd_list_done(cmd: Command, task_list: TaskList) -> str:
    return _render("Tasks Done:", task_list.list_done())


def cmd_list_todo(cmd: Command, task_list: TaskList) -> str:
    return _render("Tasks Todo:", task_list.list_todo())


def cmd_list_prio(cmd: Command, task_list: TaskList) -> str:
    if cmd.priority is None:
        raise PriorityError()
    return _render(
        f"Tasks with {cmd.priority} priority:", task_list.list_by_priority(cmd.priority)
    )


def cmd_done(cmd: Command, task_list: TaskList) -> str:
    if cmd.task_id is None:
        raise MissingArgument(cmd.name)
    task = task_list.mark_done(cmd.task_id)
    logger.info("Marked task id=%s as done", task.id)
    return f"Task {task.id} marked as done."


def cmd_set_prio(cmd: Command, task_list: TaskList) -> str:
    if cmd.task_id is None:
        raise InvalidId()
    if cmd.priority is None:
        raise PriorityError()
    task = task_list.set_priority(cmd.task_id, cmd.priority)
    logger.info("Set task id=%s priority=%s", task.id, task.priority.value)
    return f"Set task {task.id} to {task.priority} priority"


def cmd_help(cmd: Command, task_list: TaskList) -> str:
    return registry.build_help()


registry.register("add", cmd_add, "Add a new task.", parser=_parse_add, usage="add <text>")
registry.register("list", cmd_list, "List all tasks.")
registry.register("list-done", cmd_list_done, "List completed tasks.")
registry.register("list-todo", cmd_list_todo, "List tasks that are not done yet.")
registry.register(
    "list-prio",
    cmd_list_prio,
    "List tasks with the given priority (low|l, medium|med|m, high|h).",
    parser=_parse_list_prio,
    usage="list-prio <priority>",
)
registry.register("done", cmd_done, "Mark a task as done.", parser=_parse_done, usage="done <id>")
registry.register(
    "set-prio",
    cmd_set_prio,
    "Change the priority of a task.",
    parser=_parse_set_prio,
    usage="set-prio <id> <priority>",
)
registry.register("help", cmd_help, "Show available commands.")
