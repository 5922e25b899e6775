# src/terminal_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from ..tasks.task_store import TaskStore


class RunStatus(StrEnum):
    """Interpreter lifecycle: RUNNING -> STOPPED on quit. STOPPED is terminal."""

    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class AppState:
    # Settings object (config.Settings or any object with the same attributes).
    settings: object

    task_store: TaskStore = field(default_factory=TaskStore)
    status: RunStatus = RunStatus.RUNNING

    @property
    def running(self) -> bool:
        return self.status is RunStatus.RUNNING

    def stop(self) -> None:
        self.status = RunStatus.STOPPED
