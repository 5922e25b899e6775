# src/terminal_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings and wires a
fresh TaskStore into a new AppState. Nothing here is global, so several
independent sessions can live side by side.
"""

from __future__ import annotations

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, task_store=TaskStore())
