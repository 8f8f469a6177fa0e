# src/todo_cli/tasks/todo_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from datetime import datetime

from ..core.ports import Clock
from .task_models import Task, TaskStatus, clean_text

logger = logging.getLogger(__name__)


def local_now() -> datetime:
    return datetime.now().astimezone()


class TodoList:
    """
    In-memory task collection keyed by positive integer id.

    Id policy: `add` takes the smallest positive integer not in use, so ids
    freed by `delete` are handed out again ({1, 3} -> next id is 2).

    Mutators expect an existing id. Checking existence is the caller's job
    (see cli/commands.py); an unknown id surfaces as KeyError.
    """

    def __init__(self, tasks: Mapping[int, Task] | None = None, *, clock: Clock | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        self._clock: Clock = clock or local_now
        for task_id, task in (tasks or {}).items():
            if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
                raise ValueError(f"task id must be a positive integer, got {task_id!r}")
            self._tasks[task_id] = task

    # ---- queries ----

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def items(self) -> Iterator[tuple[int, Task]]:
        """Tasks in ascending id order."""
        for task_id in sorted(self._tasks):
            yield task_id, self._tasks[task_id]

    def list(self) -> list[str]:
        return [t.description for _, t in self.items()]

    def list_done(self) -> list[str]:
        return self._descriptions_with(TaskStatus.DONE)

    def list_todo(self) -> list[str]:
        return self._descriptions_with(TaskStatus.TODO)

    def list_in_progress(self) -> list[str]:
        return self._descriptions_with(TaskStatus.IN_PROGRESS)

    def _descriptions_with(self, status: TaskStatus) -> list[str]:
        return [t.description for _, t in self.items() if t.status == status]

    # ---- mutations ----

    def _next_id(self) -> int:
        task_id = 1
        while task_id in self._tasks:
            task_id += 1
        return task_id

    def add(self, description: str) -> int:
        task_id = self._next_id()
        now = self._clock()
        self._tasks[task_id] = Task(
            description=clean_text(description),
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        logger.debug("Task added id=%s", task_id)
        return task_id

    def update(self, task_id: int, description: str) -> None:
        task = self._tasks[task_id]
        task.description = clean_text(description)
        self._touch(task)
        logger.debug("Task updated id=%s", task_id)

    def delete(self, task_id: int) -> None:
        del self._tasks[task_id]
        logger.debug("Task deleted id=%s", task_id)

    def mark_in_progress(self, task_id: int) -> None:
        self._set_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_done(self, task_id: int) -> None:
        self._set_status(task_id, TaskStatus.DONE)

    def _set_status(self, task_id: int, status: TaskStatus) -> None:
        task = self._tasks[task_id]
        task.status = status
        self._touch(task)
        logger.debug("Task status id=%s status=%s", task_id, status.name)

    def _touch(self, task: Task) -> None:
        # Wall clock may step back; updated_at must not.
        task.updated_at = max(self._clock(), task.updated_at)
