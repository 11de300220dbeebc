# src/taskmate/commands/command_models.py

"""
Command variants produced by the parser.

A command is an immutable, fully-validated instruction. The caller applies it
once against the session's TaskList and, when `mutates` is set, persists the
list afterwards. Commands never print; they hand back a CommandResult whose
message the connector shows to the user.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


@dataclass(slots=True, frozen=True)
class CommandResult:
    message: str
    exit_requested: bool = False


def _count_line(tasks: TaskList) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


@dataclass(slots=True, frozen=True)
class ListCommand:
    mutates: ClassVar[bool] = False

    def apply(self, tasks: TaskList) -> CommandResult:
        if not len(tasks):
            return CommandResult("Your list is empty.")
        lines = ["Here are the tasks in your list:"]
        for i, task in enumerate(tasks, start=1):
            lines.append(f"{i}.{task.render()}")
        return CommandResult("\n".join(lines))


@dataclass(slots=True, frozen=True)
class ByeCommand:
    mutates: ClassVar[bool] = False

    def apply(self, tasks: TaskList) -> CommandResult:
        return CommandResult("Bye. Hope to see you again soon!", exit_requested=True)


@dataclass(slots=True, frozen=True)
class FindCommand:
    query: str

    mutates: ClassVar[bool] = False

    def apply(self, tasks: TaskList) -> CommandResult:
        matches = tasks.find(self.query)
        if not matches:
            return CommandResult(f"No tasks match {self.query!r}.")
        lines = ["Here are the matching tasks in your list:"]
        # Keep list positions so the numbers work with mark/unmark/delete.
        for i, task in matches:
            lines.append(f"{i + 1}.{task.render()}")
        return CommandResult("\n".join(lines))


@dataclass(slots=True, frozen=True)
class MarkCommand:
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> CommandResult:
        task = tasks.get(self.index).marked()
        tasks.replace(self.index, task)
        return CommandResult(f"Nice! I've marked this task as done:\n  {task.render()}")


@dataclass(slots=True, frozen=True)
class UnmarkCommand:
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> CommandResult:
        task = tasks.get(self.index).unmarked()
        tasks.replace(self.index, task)
        return CommandResult(f"OK, I've marked this task as not done yet:\n  {task.render()}")


@dataclass(slots=True, frozen=True)
class DeleteCommand:
    index: int

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> CommandResult:
        removed = tasks.remove(self.index)
        return CommandResult(
            f"Noted. I've removed this task:\n  {removed.render()}\n{_count_line(tasks)}"
        )


@dataclass(slots=True, frozen=True)
class AddCommand:
    task: Task

    mutates: ClassVar[bool] = True

    def apply(self, tasks: TaskList) -> CommandResult:
        tasks.append(self.task)
        return CommandResult(
            f"Got it. I've added this task:\n  {self.task.render()}\n{_count_line(tasks)}"
        )


Command = Union[
    ListCommand,
    ByeCommand,
    FindCommand,
    MarkCommand,
    UnmarkCommand,
    DeleteCommand,
    AddCommand,
]
