# src/taskmate/core/session.py

from __future__ import annotations

import logging

from ..commands.command_models import CommandResult
from ..commands.command_parser import parse
from .errors import TaskmateError
from .state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str) -> CommandResult:
    """
    Parse one input line, apply it to state.tasks and persist if it mutated.

    Validation errors come back as the reply text; the list is left untouched.
    """
    try:
        command = parse(line, len(state.tasks))
    except TaskmateError as e:
        logger.info("Rejected input %r: %s", line, e.message)
        return CommandResult(e.message)

    result = command.apply(state.tasks)
    logger.debug("Applied %r (tasks=%d)", command, len(state.tasks))

    if command.mutates:
        try:
            state.task_store.save(state.tasks)
        except OSError:
            logger.exception("Failed to save tasks.")
            return CommandResult(
                f"{result.message}\n(Warning: could not save your tasks to disk.)",
                exit_requested=result.exit_requested,
            )

    return result
