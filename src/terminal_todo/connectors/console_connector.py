# src/terminal_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..cli.commands import registry as command_registry
from ..core.ports import Emitter, LineSource
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "=== TODO APP (add/list/done/quit) ==="


class ConsoleLineSource:
    """Reads from stdin via input(). EOF and Ctrl+C both end the input."""

    def read_line(self, prompt: str = "") -> str | None:
        try:
            return input(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            return None
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            return None


class IterableLineSource:
    """Feeds a fixed sequence of lines (scripted input, tests). Prompts are ignored."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._it: Iterator[str] = iter(lines)

    def read_line(self, prompt: str = "") -> str | None:
        line = next(self._it, None)
        if line is None:
            return None
        return line.rstrip("\r\n")


def run_console_loop(
    state: AppState,
    source: LineSource | None = None,
    emit: Emitter = print,
) -> None:
    """
    Read-eval-print loop.

    Stops when a command moves the state to STOPPED (quit) or when the
    source runs out of input. Blank lines are skipped.
    """
    if source is None:
        source = ConsoleLineSource()

    settings = state.settings
    prompt = str(getattr(settings, "prompt", "> "))

    logger.info("Console connector started.")
    if getattr(settings, "show_banner", True):
        emit(BANNER)

    while state.running:
        line = source.read_line(prompt)
        if line is None:
            break

        if not line.strip():
            continue

        emit(command_registry.handle(state, line))

    logger.info("Console connector finished (tasks=%s).", state.task_store.count_tasks())
