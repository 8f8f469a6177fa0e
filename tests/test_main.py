# tests/test_main.py

from __future__ import annotations

import json

import pytest

from todo_cli.cli.main import main, run
from todo_cli.config import Settings
from todo_cli.core.errors import CommandError, StorageError
from todo_cli.tasks.task_store import InMemoryStorage

from .fakes import StepClock


def test_add_on_empty_storage_creates_task_one(settings: Settings, capsys) -> None:
    assert main(["add", "buy milk"], settings=settings) == 0

    assert "ID: 1" in capsys.readouterr().out
    doc = json.loads(settings.storage_path.read_text("utf-8"))
    task = doc["tasks"]["1"]
    assert task["description"] == "buy milk"
    assert task["status"] == 1
    assert task["createdAt"] == task["updatedAt"]


def test_full_session(settings: Settings, capsys) -> None:
    assert main(["add", "a"], settings=settings) == 0
    assert main(["add", "b"], settings=settings) == 0
    assert main(["add", "c"], settings=settings) == 0
    assert main(["mark-done", "2"], settings=settings) == 0
    assert main(["mark-in-progress", "3"], settings=settings) == 0
    assert main(["update", "1", "a!"], settings=settings) == 0
    capsys.readouterr()

    assert main(["list", "done"], settings=settings) == 0
    assert capsys.readouterr().out == "b\n"

    assert main(["delete", "1"], settings=settings) == 0
    assert main(["add", "d"], settings=settings) == 0
    assert capsys.readouterr().out == "Task added successfully (ID: 1)\n"

    assert main(["list"], settings=settings) == 0
    assert sorted(capsys.readouterr().out.splitlines()) == ["b", "c", "d"]


def test_failed_update_leaves_no_file(settings: Settings, capsys) -> None:
    assert main(["update", "99", "x"], settings=settings) == 1

    err = capsys.readouterr().err
    assert err == "update: Id does not exist: 99\n"
    assert not settings.storage_path.exists()


def test_no_arguments_fails_without_touching_storage(settings: Settings, capsys) -> None:
    assert main([], settings=settings) == 1
    assert capsys.readouterr().err == "Write a command\n"
    assert not settings.storage_path.exists()


def test_failed_command_keeps_existing_file(settings: Settings, capsys) -> None:
    assert main(["add", "keep"], settings=settings) == 0
    before = settings.storage_path.read_bytes()

    assert main(["mark-done", "x"], settings=settings) == 1
    assert main(["frobnicate"], settings=settings) == 1

    assert settings.storage_path.read_bytes() == before
    assert capsys.readouterr().err.splitlines() == [
        "mark-done: Invalid id: x",
        "Unknown command: frobnicate",
    ]


def test_corrupt_file_is_reported(settings: Settings, capsys) -> None:
    settings.storage_path.write_text("not json", "utf-8")

    assert main(["list"], settings=settings) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error parsing json:")
    assert len(err.splitlines()) == 1
    assert settings.storage_path.read_text("utf-8") == "not json"


def test_run_saves_even_for_list(clock: StepClock) -> None:
    storage = InMemoryStorage()
    lines: list[str] = []

    run(["list"], storage, emit=lines.append, clock=clock)

    assert lines == []
    assert storage.saves == 1
    assert json.loads(storage.data) == {"tasks": {}}


def test_run_raises_instead_of_exiting(clock: StepClock) -> None:
    storage = InMemoryStorage(b"{broken")
    with pytest.raises(StorageError):
        run(["list"], storage, emit=print, clock=clock)

    storage = InMemoryStorage()
    with pytest.raises(CommandError):
        run([], storage, emit=print, clock=clock)
    assert storage.saves == 0


def test_log_file_receives_debug_records(settings: Settings, tmp_path, capsys) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    s = Settings(
        app_name=settings.app_name,
        log_level="WARNING",
        log_file=log_file,
        storage_path=settings.storage_path,
    )

    assert main(["add", "logged"], settings=s) == 0

    text = log_file.read_text("utf-8")
    assert "Task added id=1" in text
    # console stays quiet at WARNING
    assert capsys.readouterr().err == ""


def test_add_with_undecodable_argument(settings: Settings, capsys) -> None:
    raw = b"\xff".decode("utf-8", "surrogateescape")

    assert main(["add", raw], settings=settings) == 0
    assert main(["list"], settings=settings) == 0

    assert capsys.readouterr().out.splitlines() == ["Task added successfully (ID: 1)", "\ufffd"]
    doc = json.loads(settings.storage_path.read_text("utf-8"))
    assert doc["tasks"]["1"]["description"] == "\ufffd"


def test_list_with_surrogate_escape_in_file(settings: Settings, capsys) -> None:
    settings.storage_path.write_text(
        '{"tasks": {"1": {"description": "\\ud800", "status": 1, '
        '"createdAt": "2024-01-01T00:00:00Z", "updatedAt": "2024-01-01T00:00:00Z"}}}',
        "utf-8",
    )

    assert main(["list"], settings=settings) == 0

    assert capsys.readouterr().out == "\ufffd\n"


def test_unusable_log_file_is_reported(settings: Settings, tmp_path, capsys) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")
    s = Settings(
        app_name=settings.app_name,
        log_level="WARNING",
        log_file=blocker / "todo.log",
        storage_path=settings.storage_path,
    )

    assert main(["add", "x"], settings=s) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error opening log file:")
    assert len(err.splitlines()) == 1
    assert not settings.storage_path.exists()
