# src/todo_cli/tasks/task_codec.py

"""
JSON codec for the task file.

Layout:

    {
      "tasks": {
        "<id>": {
          "description": "...",
          "status": 1 | 2 | 3,
          "createdAt": "<ISO-8601>",
          "updatedAt": "<ISO-8601>"
        }
      }
    }

Files written by the older Go build of this tool carry RFC 3339 timestamps
with nanosecond fractions and a "Z" suffix; the decoder accepts those too.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.errors import StorageError
from .task_models import Task, TaskStatus, clean_text

# seconds, fraction, rest (offset)
_FRACTION_RE = re.compile(r"^(.*T\d{2}:\d{2}:\d{2})\.(\d+)(.*)$")
_DIGITS_RE = re.compile(r"[0-9]+")


def format_timestamp(ts: datetime) -> str:
    return ts.isoformat()


def parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        raise ValueError(f"invalid timestamp: {raw!r}")
    text = raw
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    m = _FRACTION_RE.match(text)
    if m:
        # datetime keeps microseconds only
        text = f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}{m.group(3)}"
    try:
        ts = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"invalid timestamp: {raw!r}") from None
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "description": task.description,
        "status": int(task.status),
        "createdAt": format_timestamp(task.created_at),
        "updatedAt": format_timestamp(task.updated_at),
    }


def _task_from_dict(raw: object) -> Task:
    if not isinstance(raw, dict):
        raise ValueError(f"task record must be an object, got {type(raw).__name__}")
    description = raw.get("description", "")
    if not isinstance(description, str):
        raise ValueError("description must be a string")
    return Task(
        description=clean_text(description),
        status=TaskStatus.from_code(raw.get("status")),
        created_at=parse_timestamp(raw.get("createdAt")),
        updated_at=parse_timestamp(raw.get("updatedAt")),
    )


def _parse_id(key: str) -> int:
    if not _DIGITS_RE.fullmatch(key) or int(key) < 1:
        raise ValueError(f"task id must be a positive integer, got {key!r}")
    return int(key)


def encode_tasks(tasks: Mapping[int, Task]) -> bytes:
    payload = {"tasks": {str(task_id): _task_to_dict(tasks[task_id]) for task_id in sorted(tasks)}}
    return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")


def decode_tasks(data: bytes) -> dict[int, Task]:
    """
    Decode a task file body.

    Empty input means "no tasks yet". Raises StorageError on anything that is
    not a well-formed task document.
    """
    if not data.strip():
        return {}
    try:
        doc = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StorageError(str(e)) from e

    if not isinstance(doc, dict):
        raise StorageError(f"top-level value must be an object, got {type(doc).__name__}")
    raw_tasks = doc.get("tasks")
    if raw_tasks is None:
        return {}
    if not isinstance(raw_tasks, dict):
        raise StorageError(f'"tasks" must be an object, got {type(raw_tasks).__name__}')

    out: dict[int, Task] = {}
    for key, raw in raw_tasks.items():
        try:
            out[_parse_id(key)] = _task_from_dict(raw)
        except ValueError as e:
            raise StorageError(f"task {key}: {e}") from e
    return out
