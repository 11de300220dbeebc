# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read app_name etc.
    settings: object

    task_store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)
