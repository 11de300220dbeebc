# src/taskmate/core/ports.py

"""
Ports (interfaces) used by the core.

The session depends on this Protocol instead of the concrete file store,
so tests can swap in an in-memory fake.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Persistence collaborator for the session's task list."""

    def load(self) -> TaskList: ...
    def save(self, tasks: TaskList) -> None: ...
