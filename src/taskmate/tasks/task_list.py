# src/taskmate/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered, in-memory list of tasks owned by the session.

    Display order is insertion order. Indices here are 0-based; the user sees
    them 1-based. Removing shifts later tasks down so indices stay dense.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    @property
    def size(self) -> int:
        return len(self._tasks)

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def replace(self, index: int, task: Task) -> Task:
        """Install `task` at `index`; returns the task it replaced."""
        self._check_index(index)
        old = self._tasks[index]
        self._tasks[index] = task
        return old

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def find(self, query: str) -> list[tuple[int, Task]]:
        """
        Tasks whose description contains `query` (case-sensitive), paired
        with their 0-based position in this list.
        """
        return [(i, t) for i, t in enumerate(self._tasks) if query in t.description]

    def _check_index(self, index: int) -> None:
        # Reject negatives explicitly: Python would otherwise index from the end.
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"task index out of range: {index}")
