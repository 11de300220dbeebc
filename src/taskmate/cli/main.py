# src/taskmate/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading saved tasks), then runs the
console REPL in the main thread until `bye`, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    log_file = setup_logging(log_dir=settings.log_dir, console_level=settings.console_log_level)
    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
