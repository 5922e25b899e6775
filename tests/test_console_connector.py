# tests/test_console_connector.py

from __future__ import annotations

import builtins

import pytest

from terminal_todo.connectors.console_connector import (
    BANNER,
    ConsoleLineSource,
    IterableLineSource,
    run_console_loop,
)
from terminal_todo.core.state import AppState, RunStatus


class RecordingSource(IterableLineSource):
    """IterableLineSource that counts how many lines were requested."""

    def __init__(self, lines) -> None:
        super().__init__(lines)
        self.reads = 0

    def read_line(self, prompt: str = "") -> str | None:
        self.reads += 1
        return super().read_line(prompt)


def _run(state: AppState, lines: list[str]) -> list[str]:
    out: list[str] = []
    run_console_loop(state, IterableLineSource(lines), emit=out.append)
    return out


def test_end_to_end_scenario(state: AppState) -> None:
    out = _run(
        state,
        [
            "add buy milk",
            "add write report",
            "list",
            "done 1",
            "list",
            "done 9",
            "quit",
        ],
    )

    assert out == [
        "Added task #1",
        "Added task #2",
        "1 [ ] buy milk\n2 [ ] write report",
        "Marked task #1 as done!",
        "1 [x] buy milk\n2 [ ] write report",
        "Task #9 not found.",
        "Goodbye!",
    ]
    assert state.status is RunStatus.STOPPED


def test_quit_stops_reading_further_input(state: AppState) -> None:
    source = RecordingSource(["quit", "add never"])
    out: list[str] = []
    run_console_loop(state, source, emit=out.append)

    assert out == ["Goodbye!"]
    assert source.reads == 1
    assert state.task_store.count_tasks() == 0


def test_end_of_input_ends_loop_without_farewell(state: AppState) -> None:
    out = _run(state, ["add a"])
    assert out == ["Added task #1"]
    assert state.status is RunStatus.RUNNING


def test_blank_lines_are_skipped(state: AppState) -> None:
    out = _run(state, ["", "   ", "list\n", "quit"])
    assert out == ["No tasks yet!", "Goodbye!"]


def test_errors_do_not_end_the_loop(state: AppState) -> None:
    out = _run(state, ["bogus", "add", "done x", "add ok", "quit"])
    assert out == [
        "Unknown command. Try: add [task] / list / done [id] / quit",
        "Please enter a task after 'add'",
        "Invalid ID: use a number",
        "Added task #1",
        "Goodbye!",
    ]


def test_banner_printed_when_enabled(state: AppState) -> None:
    state.settings.show_banner = True
    out = _run(state, ["quit"])
    assert out == [BANNER, "Goodbye!"]


def test_console_source_maps_eof_and_interrupt_to_none(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return "list"

    monkeypatch.setattr(builtins, "input", fake_input)
    assert ConsoleLineSource().read_line("> ") == "list"
    assert prompts == ["> "]

    def raise_eof(prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", raise_eof)
    assert ConsoleLineSource().read_line() is None

    def raise_interrupt(prompt: str = "") -> str:
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", raise_interrupt)
    assert ConsoleLineSource().read_line() is None
