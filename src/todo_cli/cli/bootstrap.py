# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- turns Settings into a configured logging setup,
- wires the concrete storage implementation for the entrypoint.
"""

from __future__ import annotations

import logging

from ..config import Settings
from ..core.errors import TodoError
from ..core.ports import TaskStorage
from ..logging_setup import setup_logging
from ..tasks.task_store import JsonFileStorage

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, None)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    try:
        setup_logging(console_level=console_level, log_file=settings.log_file)
    except OSError as e:
        raise TodoError(f"Error opening log file: {e}") from e


def create_storage(settings: Settings) -> TaskStorage:
    """
    Storage for this run. The path is not created or touched here; the file
    only appears on the first successful save.
    """
    storage = JsonFileStorage(settings.storage_path)
    logger.debug("Using task file %s", storage.path)
    return storage
