# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.session import handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_reply(app_name: str, text: str) -> None:
    print(DIVIDER)
    print(f"<<< {app_name}: {text}")
    print(DIVIDER)


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskmate"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    _print_reply(app_name, f"Hello! I'm {app_name}. What can I do for you?")

    while True:
        try:
            user_input = input(">>> You: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            result = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            _print_reply(app_name, "Internal error while handling a command.")
            continue

        _print_reply(app_name, result.message)
        if result.exit_requested:
            break

    logger.info("Console connector finished.")
