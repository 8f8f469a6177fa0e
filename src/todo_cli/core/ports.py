# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher and entrypoint depend on these Protocols instead of concrete
storage classes, so tests can run against an in-memory buffer.
"""

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.todo_list import TodoList

Clock = Callable[[], datetime]
# Returns a timezone-aware "now".

Emitter = Callable[[str], None]
# Receives user-facing output, one line per call.


class TaskStorage(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def load(self, *, clock: Clock | None = None) -> TodoList: ...

    def save(self, todo_list: TodoList) -> None: ...
