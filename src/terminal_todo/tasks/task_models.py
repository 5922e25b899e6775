# src/terminal_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    One todo item.

    `id` and `description` never change after creation. The dataclass itself
    is mutable; only TaskStore touches its own records (and only `done`),
    everything it hands out is a copy.
    """

    id: int
    description: str
    done: bool = False

    @property
    def mark(self) -> str:
        return "x" if self.done else " "

    def render(self) -> str:
        """One list line: `<id> [<mark>] <description>`."""
        return f"{self.id} [{self.mark}] {self.description}"
