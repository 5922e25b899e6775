# src/terminal_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the REPL loops.

The loops depend on these Protocols instead of stdin/stdout directly,
so tests, files or any other source can drive them one line at a time.
"""

from collections.abc import Callable
from typing import Protocol

Emitter = Callable[[str], None]
# Writes one user-visible reply (may contain newlines).


class LineSource(Protocol):
    """One call = one line of input. None means end of input."""

    def read_line(self, prompt: str = "") -> str | None: ...
