# src/taskmate/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import TaskmateError
from .task_list import TaskList
from .task_models import decode_task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Line-oriented task file: one encoded task per line, in list order.

    Loading is best-effort: corrupt lines are logged and skipped so one bad
    line does not lose the rest of the list. Saving writes a temp file and
    swaps it in with os.replace.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        try:
            total = self.count_tasks()
        except OSError:
            total = -1
        logger.info("TaskStore ready path=%s total=%s", self._path, total)

    @property
    def path(self) -> Path:
        return self._path

    def _read_lines(self) -> list[bytes]:
        # Split on b"\n" only: a "\r" inside a description is data, not a line break.
        return self._path.read_bytes().split(b"\n")

    def count_tasks(self) -> int:
        if not self._path.exists():
            return 0
        return sum(1 for raw in self._read_lines() if raw.strip())

    def load(self) -> TaskList:
        tasks = TaskList()
        if not self._path.exists():
            logger.debug("No task file at %s; starting empty.", self._path)
            return tasks

        for lineno, raw in enumerate(self._read_lines(), start=1):
            if not raw.strip():
                continue
            try:
                tasks.append(decode_task(raw.decode("utf-8")))
            except (TaskmateError, UnicodeDecodeError) as e:
                logger.warning("Skipping corrupt task line %s:%d (%s)", self._path, lineno, e)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        body = "".join(task.encode() + "\n" for task in tasks)
        try:
            tmp.write_bytes(body.encode("utf-8"))
            os.replace(tmp, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
