# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.errors import CommandError
from ..core.ports import Emitter
from ..tasks.todo_list import TodoList

CommandHandler = Callable[[TodoList, list[str], Emitter], None]

logger = logging.getLogger(__name__)

# Same grammar as Go's strconv.Atoi: optional sign, ASCII digits, nothing else.
_INT_RE = re.compile(r"[+-]?[0-9]+")


class CommandRegistry:
    """
    One-shot command table: `<name> <operands...>` -> handler.

    Every check (operand count, id format, id existence, list filter) runs
    before the handler touches the collection.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._operands: dict[str, tuple[int, ...]] = {}

    def register(self, name: str, handler: CommandHandler, operands: tuple[int, ...]) -> None:
        self._handlers[name] = handler
        self._operands[name] = operands

    def handle(self, todo_list: TodoList, args: list[str], emit: Emitter) -> None:
        """Run the command in args[0] with operands args[1:]; raise CommandError on bad input."""
        if not args:
            raise CommandError("Write a command")

        name, operands = args[0], args[1:]
        handler = self._handlers.get(name)
        if handler is None:
            raise CommandError(f"Unknown command: {name}")

        allowed = self._operands[name]
        if len(operands) not in allowed:
            expected = " or ".join(str(n) for n in allowed)
            raise CommandError(
                f"{name}: Invalid number of arguments: {len(operands)}, expected: {expected}"
            )

        logger.debug("Dispatching %s operands=%d", name, len(operands))
        handler(todo_list, operands, emit)


registry = CommandRegistry()


def parse_id(command: str, todo_list: TodoList, raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise CommandError(f"{command}: Invalid id: {raw}")
    task_id = int(raw)
    if task_id not in todo_list:
        raise CommandError(f"{command}: Id does not exist: {task_id}")
    return task_id


def cmd_add(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    task_id = todo_list.add(args[0])
    emit(f"Task added successfully (ID: {task_id})")


def cmd_update(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    task_id = parse_id("update", todo_list, args[0])
    todo_list.update(task_id, args[1])


def cmd_delete(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    task_id = parse_id("delete", todo_list, args[0])
    todo_list.delete(task_id)


def cmd_mark_in_progress(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    task_id = parse_id("mark-in-progress", todo_list, args[0])
    todo_list.mark_in_progress(task_id)


def cmd_mark_done(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    task_id = parse_id("mark-done", todo_list, args[0])
    todo_list.mark_done(task_id)


def cmd_list(todo_list: TodoList, args: list[str], emit: Emitter) -> None:
    """
    list              -> every description
    list done         -> only Done
    list todo         -> only Todo
    list in-progress  -> only InProgress
    """
    if not args:
        descriptions = todo_list.list()
    else:
        listers = {
            "done": todo_list.list_done,
            "todo": todo_list.list_todo,
            "in-progress": todo_list.list_in_progress,
        }
        lister = listers.get(args[0])
        if lister is None:
            raise CommandError(f"list: Invalid argument: {args[0]}")
        descriptions = lister()

    for description in descriptions:
        emit(description)


registry.register("add", cmd_add, operands=(1,))
registry.register("update", cmd_update, operands=(2,))
registry.register("delete", cmd_delete, operands=(1,))
registry.register("mark-in-progress", cmd_mark_in_progress, operands=(1,))
registry.register("mark-done", cmd_mark_done, operands=(1,))
registry.register("list", cmd_list, operands=(0, 1))
