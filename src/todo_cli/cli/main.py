# src/todo_cli/cli/main.py

"""
CLI entrypoint.

One invocation = load the task file, run one command, write the task file.
Only this module turns errors into an exit status.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import configure_logging, create_storage
from ..cli.commands import registry
from ..config import Settings, get_settings
from ..core.errors import CommandError, TodoError
from ..core.ports import Clock, Emitter, TaskStorage

logger = logging.getLogger(__name__)


def run(
    args: Sequence[str],
    storage: TaskStorage,
    *,
    emit: Emitter,
    clock: Clock | None = None,
) -> None:
    """
    Load -> dispatch -> save.

    The collection is saved even for read-only commands (list), so the file is
    rewritten on every successful run. Nothing is saved if loading or the
    command fails.
    """
    todo_list = storage.load(clock=clock)

    if not args:
        raise CommandError("Write a command")

    registry.handle(todo_list, list(args), emit)
    storage.save(todo_list)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    try:
        configure_logging(settings)
        logger.debug("Starting %s args=%s", settings.app_name, list(argv))
        run(argv, create_storage(settings), emit=print)
    except TodoError as e:
        logger.debug("Command failed", exc_info=True)
        print(" ".join(str(e).splitlines()), file=sys.stderr)
        return 1
    return 0


def entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entry()
