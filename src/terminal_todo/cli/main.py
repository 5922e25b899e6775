# src/terminal_todo/cli/main.py

"""
CLI entrypoints.

`todo`: initializes logging, builds AppState, runs the console REPL.
`calc`: initializes logging, runs one interactive calculation.
"""

from __future__ import annotations

import logging

from ..calc.calculator import run_calculator
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleLineSource, run_console_loop
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def _init_logging(settings) -> None:
    console_level = level_from_name(getattr(settings, "log_level", "WARNING"))
    log_file = setup_logging(
        log_dir=getattr(settings, "log_dir", ".local/todo"),
        console_level=console_level,
        log_to_file=bool(getattr(settings, "log_to_file", False)),
    )
    if log_file is not None:
        logger.debug("Logging to %s", log_file)


def main() -> int:
    settings = get_settings()
    _init_logging(settings)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")
    # Quit and end of input are both a normal exit.
    return 0


def calc_main() -> int:
    settings = get_settings()
    _init_logging(settings)

    logger.info("Starting calculator...")
    return run_calculator(ConsoleLineSource())


if __name__ == "__main__":
    raise SystemExit(main())
