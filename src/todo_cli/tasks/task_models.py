# src/todo_cli/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

_LONE_SURROGATE_RE = re.compile("[\ud800-\udc7f\udd00-\udfff]")


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    The integer value is what gets written to the task file.
    """

    TODO = 1
    IN_PROGRESS = 2
    DONE = 3

    @classmethod
    def from_code(cls, raw: object) -> TaskStatus:
        # bool is an int subclass; "status": true is not a valid code
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"invalid status: {raw!r}")
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"invalid status: {raw!r}") from None


def clean_text(text: str) -> str:
    """
    Make text safe to encode as UTF-8.

    Undecodable argv bytes arrive surrogate-escaped, and JSON "\\ud800" escapes
    load as lone surrogates; both come out as U+FFFD.
    """
    try:
        text.encode("utf-8")
        return text
    except UnicodeEncodeError:
        pass
    # \udc80-\udcff carry raw bytes; any other surrogate is just invalid.
    text = _LONE_SURROGATE_RE.sub("\ufffd", text)
    raw = text.encode("utf-8", "surrogateescape")
    return raw.decode("utf-8", errors="replace")


@dataclass(slots=True)
class Task:
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
