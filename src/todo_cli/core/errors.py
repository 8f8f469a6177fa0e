# src/todo_cli/core/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for failures that are reported to the user as a single line."""


class StorageError(TodoError):
    """The task file could not be read, parsed or written."""


class CommandError(TodoError):
    """Bad command line: missing/unknown command, operand count, id or filter."""
