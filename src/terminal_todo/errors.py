# src/terminal_todo/errors.py

"""
Error taxonomy.

Every error carries the exact message shown to the user, so callers can
report it without knowing the concrete type.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for recoverable, user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyDescriptionError(TodoError):
    def __init__(self) -> None:
        super().__init__("Please enter a task after 'add'")


# Name used by the CLI error table.
EmptyInputError = EmptyDescriptionError


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found.")
        self.task_id = task_id


class InvalidIdError(TodoError):
    def __init__(self, raw: str) -> None:
        super().__init__("Invalid ID: use a number")
        self.raw = raw


class UnrecognizedCommandError(TodoError):
    def __init__(self, text: str, usage: str) -> None:
        super().__init__(f"Unknown command. Try: {usage}")
        self.text = text


# ---- calculator ----


class CalculatorError(TodoError):
    """Base class for calculator input and arithmetic errors."""


class InvalidNumberError(CalculatorError):
    def __init__(self, raw: str) -> None:
        super().__init__("Invalid number")
        self.raw = raw


class UnknownOperatorError(CalculatorError):
    def __init__(self, raw: str) -> None:
        super().__init__("Unknown operator")
        self.raw = raw


class DivisionByZeroError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")
