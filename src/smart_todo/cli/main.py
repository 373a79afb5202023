# src/smart_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads tasks (marking overdue ones),
then runs the console menu in the main thread until the user exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Final save on the way out; failures are reported, not raised."""
    if not state.service.persist():
        path = getattr(state.settings, "tasks_file_path", "the task file")
        print(f"Warning: could not save tasks to {path}.")


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    state.service.load_and_refresh()

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        print("Exiting...")
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
