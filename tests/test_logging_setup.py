# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from terminal_todo.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    # Drop only what setup_logging installed; pytest manages its own handlers.
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        ):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("terminal_todo.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("nonsense") == logging.WARNING


def test_setup_without_file(restore_root_logging, tmp_path: Path) -> None:
    assert setup_logging(log_dir=tmp_path / "logs") is None
    assert not (tmp_path / "logs").exists()
    assert len(logging.getLogger().handlers) == 1


def test_setup_with_file(restore_root_logging, tmp_path: Path) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", log_to_file=True)
    assert log_file == tmp_path / "logs" / "todo.log"

    logging.getLogger("terminal_todo.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in log_file.read_text("utf-8")
