# src/taskmate/commands/command_parser.py

"""
Turns one raw input line into a Command.

Pipeline:
- tokenize(): trim, split off the lower-cased keyword, keep the trimmed rest
- build_command(): resolve the keyword, validate arguments, construct the command

parse(raw, task_count) chains the two and is the entry point callers should use.
It reads nothing but the task count (for index bounds) and never touches the list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import MSG_BLANK_DESCRIPTION, TaskmateError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo
from .command_models import (
    AddCommand,
    ByeCommand,
    Command,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)

logger = logging.getLogger(__name__)

MSG_NOT_LOADED = "Error: Parser has not been loaded with an instruction yet!"
MSG_BLANK_INSTRUCTION = "I can't do anything based off a blank instruction!"
MSG_NOT_RECOGNISED = "Command not recognised. Try again?"
MSG_BAD_NUMBER = (
    "Error when parsing user input - did you supply a valid number as an index?"
)
MSG_BAD_INDEX = "Invalid index provided. Try again?"
MSG_EMPTY_SEARCH = "Oops! Please provide a valid string to search for."
MSG_EVENT_FORMAT = (
    "Oops! To create an event, please format your input in this manner:\n"
    "<Event Name> /at dd-mm-yyyy hh:mm"
)
MSG_EVENT_DATE = "Oops! Events must have a date of occurrence, formatted as dd-mm-yyyy hh:mm."
MSG_DEADLINE_FORMAT = (
    "Oops! To create a deadline, please format your input in this manner:\n"
    "<Deadline Name> /by dd-mm-yyyy hh:mm"
)
MSG_DEADLINE_DATE = "Oops! Deadlines must have a valid deadline, formatted as dd-mm-yyyy hh:mm."
MSG_CREATE_FAILED = "Oops! An error occurred when creating a new task."

# Optional sign, then decimal digits of any script (Unicode Nd).
_INDEX_RE = re.compile(r"[+-]?\d+")

# An index must fit a signed 32-bit int; anything wider is not a valid number.
_INDEX_MIN = -(2**31)
_INDEX_MAX = 2**31 - 1

# Length of "/at " and "/by " - the time value starts right after it.
_DIVIDER_SKIP = 4


class Keyword(StrEnum):
    LIST = "list"
    BYE = "bye"
    FIND = "find"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    TODO = "todo"
    EVENT = "event"
    DEADLINE = "deadline"

    @classmethod
    def resolve(cls, token: str) -> Keyword | None:
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(slots=True, frozen=True)
class ParsedInput:
    """Result of tokenize(): lower-cased keyword plus the trimmed remainder."""

    keyword: str
    rest: str


def tokenize(raw: str) -> ParsedInput:
    """Never fails; a blank line yields an empty keyword."""
    text = raw.strip()
    head, _, tail = text.partition(" ")
    return ParsedInput(keyword=head.lower(), rest=tail.strip())


def parse(raw: str, task_count: int) -> Command:
    """Raises TaskmateError with a user-facing message on any invalid input."""
    return build_command(tokenize(raw), task_count)


def build_command(parsed: ParsedInput, task_count: int) -> Command:
    if parsed.keyword == "":
        raise TaskmateError(MSG_BLANK_INSTRUCTION)

    keyword = Keyword.resolve(parsed.keyword)
    if keyword is None:
        raise TaskmateError(MSG_NOT_RECOGNISED)

    handler = _HANDLERS[keyword]
    command = handler(keyword, parsed.rest, task_count)
    logger.debug("Parsed %r -> %r", parsed.keyword, command)
    return command


# ---- per-keyword handlers ----


def _handle_list(keyword: Keyword, rest: str, task_count: int) -> Command:
    return ListCommand()


def _handle_bye(keyword: Keyword, rest: str, task_count: int) -> Command:
    return ByeCommand()


def _handle_find(keyword: Keyword, rest: str, task_count: int) -> Command:
    if not rest.strip():
        raise TaskmateError(MSG_EMPTY_SEARCH)
    return FindCommand(rest)


def _handle_numerical(keyword: Keyword, rest: str, task_count: int) -> Command:
    if not _INDEX_RE.fullmatch(rest):
        raise TaskmateError(MSG_BAD_NUMBER)
    number = int(rest)
    if not _INDEX_MIN <= number <= _INDEX_MAX:
        raise TaskmateError(MSG_BAD_NUMBER)
    index = number - 1

    # Bounds reflect the list size at parse time, also for delete.
    if index >= task_count or index < 0:
        raise TaskmateError(MSG_BAD_INDEX)

    if keyword is Keyword.MARK:
        return MarkCommand(index)
    if keyword is Keyword.UNMARK:
        return UnmarkCommand(index)
    if keyword is Keyword.DELETE:
        return DeleteCommand(index)
    raise TaskmateError(MSG_NOT_RECOGNISED)


def _find_divider(rest: str) -> str | None:
    """The last space-separated token starting with '/', if any."""
    divider = None
    for token in rest.split(" "):
        if token.startswith("/"):
            divider = token
    return divider


def _split_timed(rest: str, slash_index: int) -> tuple[str, str]:
    """
    Cut `rest` into (description, time) around the first '/'.

    The description stops one character before the slash (the separating
    space); the time starts after the 4-character divider "/xx ".
    """
    if slash_index < 1:
        raise TaskmateError(MSG_BLANK_DESCRIPTION)
    description = rest[: slash_index - 1]
    if not description.strip():
        raise TaskmateError(MSG_BLANK_DESCRIPTION)
    return description, rest[slash_index + _DIVIDER_SKIP :]


def create_task(keyword: Keyword, rest: str, divider: str | None, slash_index: int) -> Task:
    """
    Build the task for an add-type keyword.

    NOTE: `divider` is the last '/'-token while `slash_index` is the first '/'
    character, so a description that itself contains '/' is cut short.
    """
    if keyword is Keyword.TODO:
        return Todo(rest)

    if keyword is Keyword.EVENT:
        if divider != "/at":
            raise TaskmateError(MSG_EVENT_FORMAT)
        description, at = _split_timed(rest, slash_index)
        try:
            return Event.from_text(description, at)
        except ValueError:
            raise TaskmateError(MSG_EVENT_DATE) from None

    if keyword is Keyword.DEADLINE:
        if divider != "/by":
            raise TaskmateError(MSG_DEADLINE_FORMAT)
        description, by = _split_timed(rest, slash_index)
        try:
            return Deadline.from_text(description, by)
        except ValueError:
            raise TaskmateError(MSG_DEADLINE_DATE) from None

    raise TaskmateError(MSG_CREATE_FAILED)


def _handle_add(keyword: Keyword, rest: str, task_count: int) -> Command:
    if rest == "":
        raise TaskmateError(MSG_BLANK_DESCRIPTION)

    divider = _find_divider(rest)
    slash_index = rest.find("/")
    return AddCommand(create_task(keyword, rest, divider, slash_index))


_Handler = Callable[[Keyword, str, int], Command]

_HANDLERS: dict[Keyword, _Handler] = {
    Keyword.LIST: _handle_list,
    Keyword.BYE: _handle_bye,
    Keyword.FIND: _handle_find,
    Keyword.MARK: _handle_numerical,
    Keyword.UNMARK: _handle_numerical,
    Keyword.DELETE: _handle_numerical,
    Keyword.TODO: _handle_add,
    Keyword.EVENT: _handle_add,
    Keyword.DEADLINE: _handle_add,
}


class CommandParser:
    """
    Two-step parser: parse_input() loads a line, execute() builds the command.

    Kept for callers that drive parsing in two phases. Each parse_input() call
    fully replaces the loaded keyword/rest. Prefer the pure parse() function.
    """

    def __init__(self, tasks: TaskList) -> None:
        self._tasks = tasks
        self.keyword: str | None = None
        self.rest_of_input: str = ""

    def parse_input(self, raw: str) -> None:
        parsed = tokenize(raw)
        self.keyword = parsed.keyword
        self.rest_of_input = parsed.rest

    def execute(self) -> Command:
        if self.keyword is None:
            raise TaskmateError(MSG_NOT_LOADED)
        return build_command(ParsedInput(self.keyword, self.rest_of_input), len(self._tasks))
