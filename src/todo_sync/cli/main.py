# src/todo_sync/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, fetches the remote list once and then
runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..render import use_system_locale

logger = logging.getLogger(__name__)


def _print_loading(active: bool) -> None:
    if active:
        print("Loading...", flush=True)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, log_file=settings.log_file, console_level=console_level)
    use_system_locale()

    logger.info("Starting %s (remote=%s)...", settings.app_name, settings.api_url)

    state = create_initial_state(settings=settings, on_loading=_print_loading)
    try:
        state.service.load()
        run_console_loop(state)
    finally:
        shutdown_state(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
