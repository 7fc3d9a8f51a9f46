"""Task board: pending tasks in a queue, completed tasks in a stack."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A numbered task with a free-text description."""

    id: int
    description: str


class NoTasksError(LookupError):
    """Raised when completing or undoing with nothing to act on."""


class TaskBoard:
    """Pending tasks are done first-in first-out; undo takes the latest completed."""

    def __init__(self) -> None:
        self._pending: deque[Task] = deque()
        self._completed: list[Task] = []
        self._next_id = 1

    def add(self, description: str) -> Task:
        """Queue a new task with the next id and return it."""
        task = Task(self._next_id, description)
        self._next_id += 1
        self._pending.append(task)
        return task

    def complete(self) -> Task:
        """Move the oldest pending task onto the completed stack."""
        if not self._pending:
            raise NoTasksError("No hay tareas pendientes.")
        task = self._pending.popleft()
        self._completed.append(task)
        return task

    def undo(self) -> Task:
        """Send the most recently completed task to the back of the queue."""
        if not self._completed:
            raise NoTasksError("No hay tareas para deshacer.")
        task = self._completed.pop()
        self._pending.append(task)
        return task

    def pending(self) -> list[Task]:
        """Pending tasks, next to be completed first."""
        return list(self._pending)

    def completed(self) -> list[Task]:
        """Completed tasks, most recent first."""
        return self._completed[::-1]