# src/todo_tracker/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering

from .errors import PriorityError, TaskNotFound


@total_ordering
class Priority(Enum):
    """
    Task urgency.

    Values are the canonical names used in the persisted document.
    Ordering follows declaration order: LOW < MEDIUM < HIGH.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def default(cls) -> Priority:
        return cls.LOW

    @classmethod
    def parse(cls, token: str) -> Priority:
        """Parse a user token: full name or abbreviation, case-insensitive."""
        p = _PRIORITY_TOKENS.get(token.lower())
        if p is None:
            raise PriorityError(token)
        return p

    @classmethod
    def from_name(cls, name: str) -> Priority:
        try:
            return cls(name)
        except ValueError as e:
            raise PriorityError(name) from e

    @property
    def rank(self) -> int:
        return _PRIORITY_ORDER.index(self)

    @property
    def short(self) -> str:
        return f"({self.value[0]})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.short


_PRIORITY_ORDER = (Priority.LOW, Priority.MEDIUM, Priority.HIGH)

_PRIORITY_TOKENS = {
    "low": Priority.LOW,
    "l": Priority.LOW,
    "medium": Priority.MEDIUM,
    "med": Priority.MEDIUM,
    "m": Priority.MEDIUM,
    "high": Priority.HIGH,
    "h": Priority.HIGH,
}


@dataclass(slots=True)
class Task:
    id: int
    text: str
    done: bool = False
    priority: Priority = Priority.LOW

    @property
    def marker(self) -> str:
        return "[x]" if self.done else "[ ]"

    def display(self) -> str:
        return f"{self.marker} {self.priority.short} {self.id}: {self.text}"

    def __str__(self) -> str:
        return self.display()


@dataclass(slots=True)
class TaskList:
    """
    Ordered collection of tasks plus the id counter.

    Ids start at 1, grow by exactly 1 per add and are never reused
    (there is no delete). Lookups are linear scans.
    """

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def __len__(self) -> int:
        return len(self.tasks)

    def add(self, text: str) -> Task:
        task = Task(id=self.next_id, text=text, priority=Priority.default())
        self.tasks.append(task)
        self.next_id = task.id + 1
        return task

    def find(self, task_id: int) -> Task | None:
        for t in self.tasks:
            if t.id == task_id:
                return t
        return None

    def _require(self, task_id: int) -> Task:
        task = self.find(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    def mark_done(self, task_id: int) -> Task:
        task = self._require(task_id)
        task.done = True
        return task

    def set_priority(self, task_id: int, priority: Priority) -> Task:
        task = self._require(task_id)
        task.priority = priority
        return task

    # ---- queries (insertion order preserved) ----

    def list_all(self) -> list[Task]:
        return list(self.tasks)

    def list_done(self) -> list[Task]:
        return [t for t in self.tasks if t.done]

    def list_todo(self) -> list[Task]:
        return [t for t in self.tasks if not t.done]

    def list_by_priority(self, priority: Priority) -> list[Task]:
        return [t for t in self.tasks if t.priority == priority]
