# src/taskmate/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum
from typing import TypeVar, Union

from ..core.errors import MSG_BLANK_DESCRIPTION, StorageError, TaskmateError

# Wire-level date/time literal: dd-mm-yyyy hh:mm, 24-hour clock, zero-padded.
DATETIME_FORMAT = "%d-%m-%Y %H:%M"
DISPLAY_FORMAT = "%b %d %Y %H:%M"

_DATETIME_RE = re.compile(r"\d{2}-\d{2}-\d{4} \d{2}:\d{2}")

FIELD_SEP = " | "


class TaskKind(StrEnum):
    """Type tag used in rendering and in the storage encoding."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_datetime(raw: str) -> datetime:
    """
    Parse a `dd-mm-yyyy hh:mm` literal.

    strptime alone accepts non-padded fields ("1-2-2024 9:05"), so the shape is
    checked first. Raises ValueError on any mismatch.
    """
    if not _DATETIME_RE.fullmatch(raw):
        raise ValueError(f"not a dd-mm-yyyy hh:mm literal: {raw!r}")
    return datetime.strptime(raw, DATETIME_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def _require_description(description: str) -> None:
    if not description or not description.strip():
        raise TaskmateError(MSG_BLANK_DESCRIPTION)


_T = TypeVar("_T", bound="_TaskCapabilities")


class _TaskCapabilities:
    """
    Behaviour shared by every task variant.

    Variants are frozen; the done-flag only changes through marked()/unmarked(),
    which hand back a new value for the TaskList to install.
    """

    __slots__ = ()

    kind: TaskKind
    description: str
    done: bool

    def marked(self: _T) -> _T:
        return replace(self, done=True)  # type: ignore[type-var]

    def unmarked(self: _T) -> _T:
        return replace(self, done=False)  # type: ignore[type-var]

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def _prefix(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}"

    def _encoded_head(self) -> list[str]:
        return [str(self.kind), "1" if self.done else "0", self.description]


@dataclass(frozen=True, slots=True)
class Todo(_TaskCapabilities):
    description: str
    done: bool = False

    kind = TaskKind.TODO

    def __post_init__(self) -> None:
        _require_description(self.description)

    def render(self) -> str:
        return self._prefix()

    def encode(self) -> str:
        return FIELD_SEP.join(self._encoded_head())


@dataclass(frozen=True, slots=True)
class Deadline(_TaskCapabilities):
    description: str
    by: datetime
    done: bool = False

    kind = TaskKind.DEADLINE

    def __post_init__(self) -> None:
        _require_description(self.description)

    @classmethod
    def from_text(cls, description: str, by: str) -> Deadline:
        """Raises ValueError when `by` is not a dd-mm-yyyy hh:mm literal."""
        return cls(description=description, by=parse_datetime(by))

    def render(self) -> str:
        return f"{self._prefix()} (by: {self.by.strftime(DISPLAY_FORMAT)})"

    def encode(self) -> str:
        return FIELD_SEP.join([*self._encoded_head(), format_datetime(self.by)])


@dataclass(frozen=True, slots=True)
class Event(_TaskCapabilities):
    description: str
    at: datetime
    done: bool = False

    kind = TaskKind.EVENT

    def __post_init__(self) -> None:
        _require_description(self.description)

    @classmethod
    def from_text(cls, description: str, at: str) -> Event:
        """Raises ValueError when `at` is not a dd-mm-yyyy hh:mm literal."""
        return cls(description=description, at=parse_datetime(at))

    def render(self) -> str:
        return f"{self._prefix()} (at: {self.at.strftime(DISPLAY_FORMAT)})"

    def encode(self) -> str:
        return FIELD_SEP.join([*self._encoded_head(), format_datetime(self.at)])


Task = Union[Todo, Deadline, Event]


def _decode_done(raw: str, line: str) -> bool:
    if raw == "1":
        return True
    if raw == "0":
        return False
    raise StorageError(f"Bad done-flag {raw!r} in stored task: {line!r}")


def decode_task(line: str) -> Task:
    """
    Inverse of Task.encode().

    The time value is split off from the right so descriptions containing the
    field separator survive a round trip.
    """
    parts = line.split(FIELD_SEP, 2)
    if len(parts) != 3:
        raise StorageError(f"Malformed stored task: {line!r}")

    tag, done_raw, rest = parts
    done = _decode_done(done_raw, line)

    try:
        kind = TaskKind(tag)
    except ValueError:
        raise StorageError(f"Unknown task type {tag!r} in stored task: {line!r}") from None

    if kind is TaskKind.TODO:
        return Todo(description=rest, done=done)

    description, sep, when_raw = rest.rpartition(FIELD_SEP)
    if not sep:
        raise StorageError(f"Missing date in stored task: {line!r}")
    try:
        when = parse_datetime(when_raw)
    except ValueError:
        raise StorageError(f"Bad date {when_raw!r} in stored task: {line!r}") from None

    if kind is TaskKind.DEADLINE:
        return Deadline(description=description, by=when, done=done)
    return Event(description=description, at=when, done=done)
