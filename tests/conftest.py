# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Deadline, Event, Todo

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    A SimpleNamespace keeps unit tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="taskmate",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
        log_dir=tmp_path,
    )


@pytest.fixture()
def sample_tasks() -> TaskList:
    return TaskList(
        [
            Todo("buy milk"),
            Deadline("Report", by=datetime(2025, 1, 31, 23, 59)),
            Event("Team meeting", at=datetime(2024, 12, 1, 10, 0), done=True),
        ]
    )


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def state(settings: SimpleNamespace, repo: FakeTaskRepo) -> AppState:
    """AppState with an empty task list and an in-memory store."""
    return AppState(settings=settings, task_store=repo, tasks=repo.load())
