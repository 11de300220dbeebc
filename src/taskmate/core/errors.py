# src/taskmate/core/errors.py

from __future__ import annotations

MSG_BLANK_DESCRIPTION = "Oops! Descriptions for tasks cannot be blank!"


class TaskmateError(Exception):
    """
    The single user-facing error kind.

    Carries a human-readable message and nothing else. Every validation
    failure (routing, index parsing, bounds, divider/date format) is raised
    as this and shown to the user verbatim.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class StorageError(TaskmateError):
    """A stored task line could not be decoded."""
