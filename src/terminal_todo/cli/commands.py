# src/terminal_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.parser import Add, Command, Complete, ListTasks, Quit, parse_command, parse_task_id
from ..core.state import AppState
from ..errors import TodoError, UnrecognizedCommandError

CommandHandler = Callable[[AppState, Any], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps parsed command types to handlers (add, list, done, quit)."""

    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}
        self._usage: dict[type, str] = {}
        self._help: dict[type, str] = {}

    def register(
        self,
        command_type: type,
        handler: CommandHandler,
        usage: str,
        help_text: str = "",
    ) -> None:
        self._handlers[command_type] = handler
        self._usage[command_type] = usage
        self._help[command_type] = help_text

    def handle(self, state: AppState, line: str) -> str:
        """
        Parse one input line, run its handler and return the reply text.
        Recoverable errors become their message; the state is left as it was.
        """
        command: Command = parse_command(line)
        handler = self._handlers.get(type(command))

        try:
            if handler is None:
                raise UnrecognizedCommandError(line.strip(), self.build_usage())
            return handler(state, command)
        except TodoError as e:
            logger.debug("Command %s failed: %s", type(command).__name__, e.message)
            return e.message

    def build_usage(self) -> str:
        return " / ".join(self._usage.values())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command_type, usage in self._usage.items():
            lines.append(f"  {usage} - {self._help[command_type]}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_add(state: AppState, command: Add) -> str:
    task_id = state.task_store.create_task(command.description)
    return f"Added task #{task_id}"


def cmd_list(state: AppState, command: ListTasks) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks yet!"
    return "\n".join(t.render() for t in tasks)


def cmd_done(state: AppState, command: Complete) -> str:
    task_id = parse_task_id(command.raw_id)
    state.task_store.complete_task(task_id)
    return f"Marked task #{task_id} as done!"


def cmd_quit(state: AppState, command: Quit) -> str:
    state.stop()
    logger.info("Quit command received.")
    return "Goodbye!"


registry.register(Add, cmd_add, usage="add [task]", help_text="Add a new task.")
registry.register(ListTasks, cmd_list, usage="list", help_text="Show all tasks.")
registry.register(Complete, cmd_done, usage="done [id]", help_text="Mark a task as done.")
registry.register(Quit, cmd_quit, usage="quit", help_text="Exit.")
