# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_cli.config import Settings
from todo_cli.tasks.task_models import TaskStatus
from todo_cli.tasks.todo_list import TodoList

from .fakes import StepClock


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test task file; no log file."""
    return Settings(
        app_name="todo-test",
        log_level="WARNING",
        log_file=None,
        storage_path=tmp_path / "todolist.json",
    )


@pytest.fixture()
def abc_list(clock: StepClock) -> TodoList:
    """{1: "a"/Todo, 2: "b"/Done, 3: "c"/InProgress}"""
    todo_list = TodoList(clock=clock)
    todo_list.add("a")
    todo_list.add("b")
    todo_list.add("c")
    todo_list.mark_done(2)
    todo_list.mark_in_progress(3)
    assert todo_list.get(1).status is TaskStatus.TODO
    return todo_list
