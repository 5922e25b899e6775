# src/terminal_todo/core/parser.py

"""
Line -> Command classification.

Case policy: the command keyword (first word) is matched case-insensitively,
the argument keeps the casing the user typed. `ADD Buy Milk` is Add("Buy Milk").

Priority, first match wins:
  "quit" (exact)  -> Quit
  "list" (exact)  -> ListTasks
  "add" keyword   -> Add(rest)       rest may be empty, the handler rejects it
  "done" keyword  -> Complete(rest)  rest may be empty, the handler rejects it
  anything else   -> Unrecognized(trimmed line)
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidIdError


@dataclass(frozen=True, slots=True)
class Add:
    description: str


@dataclass(frozen=True, slots=True)
class ListTasks:
    pass


@dataclass(frozen=True, slots=True)
class Complete:
    raw_id: str


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Unrecognized:
    text: str


Command = Add | ListTasks | Complete | Quit | Unrecognized


def _split_keyword(line: str) -> tuple[str, str]:
    parts = line.split(maxsplit=1)
    if not parts:
        return "", ""
    rest = parts[1].strip() if len(parts) > 1 else ""
    return parts[0].lower(), rest


def parse_command(line: str) -> Command:
    text = (line or "").strip()
    keyword, rest = _split_keyword(text)

    if keyword == "quit" and not rest:
        return Quit()
    if keyword == "list" and not rest:
        return ListTasks()
    if keyword == "add":
        return Add(rest)
    if keyword == "done":
        return Complete(rest)
    return Unrecognized(text)


def parse_task_id(text: str) -> int:
    """Parse a non-negative decimal id. Signs, spaces inside and non-ASCII digits are rejected."""
    raw = (text or "").strip()
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidIdError(raw)
    return int(raw)
