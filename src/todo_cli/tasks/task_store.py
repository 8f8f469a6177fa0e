# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import StorageError
from ..core.ports import Clock
from .task_codec import decode_tasks, encode_tasks
from .todo_list import TodoList

logger = logging.getLogger(__name__)


def _parse(data: bytes, clock: Clock | None) -> TodoList:
    try:
        tasks = decode_tasks(data)
    except StorageError as e:
        raise StorageError(f"Error parsing json: {e}") from e
    return TodoList(tasks, clock=clock)


class JsonFileStorage:
    """
    Task file on local disk.

    The whole collection is read on load and rewritten in full on save.
    Writes go straight to the target path (no temp file, no rename, no lock),
    so a crash mid-write can leave a truncated file and concurrent runs are
    last-writer-wins.
    """

    def __init__(self, path: str | Path = "todolist.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, clock: Clock | None = None) -> TodoList:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No task file at %s, starting empty", self._path)
            return TodoList(clock=clock)
        except OSError as e:
            raise StorageError(f"Error reading file: {e}") from e

        todo_list = _parse(data, clock)
        logger.debug("Loaded %d tasks from %s", len(todo_list), self._path)
        return todo_list

    def save(self, todo_list: TodoList) -> None:
        data = encode_tasks(dict(todo_list.items()))
        try:
            self._path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Error writing file: {e}") from e
        logger.debug("Saved %d tasks to %s", len(todo_list), self._path)


class InMemoryStorage:
    """Same contract as JsonFileStorage over a bytes buffer."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = data
        self.saves = 0

    def load(self, *, clock: Clock | None = None) -> TodoList:
        return _parse(self.data, clock)

    def save(self, todo_list: TodoList) -> None:
        self.data = encode_tasks(dict(todo_list.items()))
        self.saves += 1
