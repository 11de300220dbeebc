# tests/test_command_parser.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskmate.commands.command_models import (
    AddCommand,
    ByeCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from taskmate.commands.command_parser import (
    _HANDLERS,
    MSG_BAD_INDEX,
    MSG_BAD_NUMBER,
    MSG_BLANK_DESCRIPTION,
    MSG_BLANK_INSTRUCTION,
    MSG_CREATE_FAILED,
    MSG_DEADLINE_DATE,
    MSG_DEADLINE_FORMAT,
    MSG_EMPTY_SEARCH,
    MSG_EVENT_DATE,
    MSG_EVENT_FORMAT,
    MSG_NOT_LOADED,
    MSG_NOT_RECOGNISED,
    CommandParser,
    Keyword,
    ParsedInput,
    create_task,
    parse,
    tokenize,
)
from taskmate.core.errors import TaskmateError
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_models import Deadline, Event, Todo


def _error(raw: str, task_count: int = 0) -> str:
    with pytest.raises(TaskmateError) as exc:
        parse(raw, task_count)
    return exc.value.message


# ---- tokenize ----


def test_tokenize_lowercases_keyword_and_trims_rest() -> None:
    assert tokenize("  TODO   Buy Milk  ") == ParsedInput("todo", "Buy Milk")


def test_tokenize_keeps_internal_whitespace_and_case() -> None:
    assert tokenize("find  Two  Spaces").rest == "Two  Spaces"


def test_tokenize_without_remainder() -> None:
    assert tokenize("list") == ParsedInput("list", "")


def test_tokenize_blank_line_gives_empty_keyword() -> None:
    assert tokenize("   ") == ParsedInput("", "")


def test_tokenize_splits_on_space_only() -> None:
    # A tab is not a separator, so the whole token becomes the keyword.
    assert tokenize("list\tall").keyword == "list\tall"


# ---- routing ----


def test_every_keyword_has_a_handler() -> None:
    assert set(_HANDLERS) == set(Keyword)


@pytest.mark.parametrize("raw", ["hello", "lists", "remove 1", "/help", "todo-x"])
def test_unknown_keyword_not_recognised(raw: str) -> None:
    assert _error(raw, task_count=3) == MSG_NOT_RECOGNISED


def test_blank_instruction() -> None:
    assert _error("   ") == MSG_BLANK_INSTRUCTION


@pytest.mark.parametrize("raw", ["list", "LIST", "list everything please", "List 3"])
def test_list_ignores_trailing_text(raw: str) -> None:
    assert parse(raw, 0) == ListCommand()


@pytest.mark.parametrize("raw", ["bye", "Bye", "bye now"])
def test_bye_ignores_trailing_text(raw: str) -> None:
    assert parse(raw, 0) == ByeCommand()


# ---- find ----


def test_find_requires_query() -> None:
    assert _error("find") == MSG_EMPTY_SEARCH
    assert _error("find    ") == MSG_EMPTY_SEARCH


def test_find_preserves_query_verbatim() -> None:
    assert parse("find Milk  and Bread", 0) == FindCommand("Milk  and Bread")


# ---- numerical instructions ----


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("mark 1", MarkCommand(0)),
        ("unmark 2", UnmarkCommand(1)),
        ("delete 3", DeleteCommand(2)),
        ("MARK +2", MarkCommand(1)),
    ],
)
def test_numerical_commands_use_zero_based_index(raw: str, expected) -> None:
    assert parse(raw, 3) == expected


@pytest.mark.parametrize("raw", ["mark", "mark one", "delete 1.5", "unmark 1 2", "mark 1_0"])
def test_numerical_rejects_non_integers(raw: str) -> None:
    assert _error(raw, task_count=20) == MSG_BAD_NUMBER


def test_numerical_accepts_any_decimal_digits() -> None:
    assert parse("mark ٣", 20) == MarkCommand(2)
    assert parse("delete ३०", 40) == DeleteCommand(29)


@pytest.mark.parametrize("raw", ["mark 2147483648", "mark -2147483649", "delete 99999999999999999999"])
def test_numerical_beyond_32_bits_is_not_a_number(raw: str) -> None:
    assert _error(raw, task_count=3) == MSG_BAD_NUMBER


def test_numerical_at_32_bit_limits_is_a_bad_index() -> None:
    assert _error("mark 2147483647", task_count=3) == MSG_BAD_INDEX
    assert _error("mark -2147483648", task_count=3) == MSG_BAD_INDEX


@pytest.mark.parametrize("raw", ["mark 0", "mark -1", "delete 4", "unmark 100"])
def test_numerical_rejects_out_of_range(raw: str) -> None:
    assert _error(raw, task_count=3) == MSG_BAD_INDEX


def test_numerical_on_empty_list_always_out_of_range() -> None:
    assert _error("delete 1", task_count=0) == MSG_BAD_INDEX


# ---- add tasks ----


def test_todo_keeps_remainder_exactly() -> None:
    cmd = parse("todo read book /at home", 0)
    assert cmd == AddCommand(Todo("read book /at home"))


def test_todo_requires_description() -> None:
    assert _error("todo") == MSG_BLANK_DESCRIPTION
    assert _error("todo   ") == MSG_BLANK_DESCRIPTION


@pytest.mark.parametrize("keyword", ["event", "deadline"])
def test_timed_tasks_require_description(keyword: str) -> None:
    assert _error(keyword) == MSG_BLANK_DESCRIPTION


def test_event_is_split_around_divider() -> None:
    cmd = parse("event Meeting /at 01-12-2024 10:00", 0)
    assert cmd == AddCommand(Event("Meeting", at=datetime(2024, 12, 1, 10, 0)))


def test_deadline_is_split_around_divider() -> None:
    cmd = parse("deadline Report /by 31-01-2025 23:59", 0)
    assert cmd == AddCommand(Deadline("Report", by=datetime(2025, 1, 31, 23, 59)))


def test_multi_word_description_is_kept() -> None:
    cmd = parse("deadline submit tax return /by 30-04-2025 17:00", 0)
    assert isinstance(cmd, AddCommand)
    assert cmd.task.description == "submit tax return"


@pytest.mark.parametrize(
    "raw",
    ["event Meeting", "event Meeting /by 01-12-2024 10:00", "event Meeting/at 01-12-2024 10:00"],
)
def test_event_requires_at_divider(raw: str) -> None:
    assert _error(raw) == MSG_EVENT_FORMAT


@pytest.mark.parametrize("raw", ["deadline Report", "deadline Report /at 31-01-2025 23:59"])
def test_deadline_requires_by_divider(raw: str) -> None:
    assert _error(raw) == MSG_DEADLINE_FORMAT


@pytest.mark.parametrize(
    "when",
    ["tomorrow", "1-12-2024 10:00", "01-12-2024", "32-01-2024 10:00", "01-12-2024 25:00", ""],
)
def test_event_rejects_bad_dates(when: str) -> None:
    assert _error(f"event Meeting /at {when}".rstrip()) == MSG_EVENT_DATE


def test_deadline_rejects_bad_dates() -> None:
    assert _error("deadline Report /by 2025-01-31 23:59") == MSG_DEADLINE_DATE


def test_last_slash_token_is_the_divider() -> None:
    # "/at" is the last '/'-token so the divider check passes, but the time
    # value is read after the first '/', which is "/by".
    assert _error("event Meeting /by x /at 01-12-2024 10:00") == MSG_EVENT_DATE


def test_earlier_slash_in_description_cuts_description_short() -> None:
    # First '/' sits inside "N/A": the description ends just before it and the
    # time value is read from the wrong place.
    assert _error("event Fix N/A /at 01-12-2024 10:00") == MSG_EVENT_DATE


def test_divider_at_start_is_a_blank_description() -> None:
    assert _error("event /at 01-12-2024 10:00") == MSG_BLANK_DESCRIPTION


def test_create_task_rejects_non_add_keywords() -> None:
    with pytest.raises(TaskmateError) as exc:
        create_task(Keyword.LIST, "whatever", None, -1)
    assert exc.value.message == MSG_CREATE_FAILED


# ---- properties ----


@pytest.mark.parametrize(
    "raw",
    ["todo buy milk", "event Meeting /at 01-12-2024 10:00", "mark 2", "find milk", "list"],
)
def test_parsing_is_repeatable(raw: str) -> None:
    assert parse(raw, 5) == parse(raw, 5)


def test_parse_does_not_touch_any_list(sample_tasks: TaskList) -> None:
    before = list(sample_tasks)
    parse("delete 1", len(sample_tasks))
    assert list(sample_tasks) == before


# ---- two-step parser ----


def test_command_parser_requires_loading() -> None:
    parser = CommandParser(TaskList())
    with pytest.raises(TaskmateError) as exc:
        parser.execute()
    assert exc.value.message == MSG_NOT_LOADED


def test_command_parser_reads_current_list_size(sample_tasks: TaskList) -> None:
    parser = CommandParser(sample_tasks)
    parser.parse_input("mark 3")
    assert parser.execute() == MarkCommand(2)

    sample_tasks.remove(2)
    with pytest.raises(TaskmateError):
        parser.execute()


def test_command_parser_overwrites_previous_line() -> None:
    parser = CommandParser(TaskList())
    parser.parse_input("todo first thing")
    parser.parse_input("list")
    assert parser.keyword == "list"
    assert parser.rest_of_input == ""
    assert parser.execute() == ListCommand()
