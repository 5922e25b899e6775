# src/terminal_todo/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import EmptyDescriptionError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    - tasks are kept in insertion order (oldest first), which is also display order
    - ids come from a counter that starts at 1 and only ever moves forward
    - a failed call leaves both the list and the counter untouched

    One store belongs to one AppState; nothing else holds a reference to the list.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id: int = 1
        logger.debug("TaskStore ready (in-memory)")

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def create_task(self, description: str) -> int:
        text = (description or "").strip()
        if not text:
            raise EmptyDescriptionError()

        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=text))
        self._next_id += 1
        logger.debug("Task added id=%s total=%s", task_id, len(self._tasks))
        return task_id

    def list_tasks(self) -> tuple[Task, ...]:
        """
        Snapshot of all tasks in insertion order.

        The tuple holds copies: it can be iterated any number of times and
        does not change when the store is mutated afterwards.
        """
        return tuple(replace(t) for t in self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return replace(t)
        return None

    def complete_task(self, task_id: int) -> Task:
        # ids are unique, so the first match is the only one
        for t in self._tasks:
            if t.id == task_id:
                if t.done:
                    logger.debug("Task id=%s already done", task_id)
                else:
                    t.done = True
                    logger.debug("Task done id=%s", task_id)
                return replace(t)
        raise TaskNotFoundError(task_id)
