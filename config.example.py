# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App name shown in log lines (default: todo).",
    "TODO_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TODO_LOG_FILE": "Optional path of a DEBUG log file (default: unset, no file).",
    # Storage
    "TODO_STORAGE_PATH": "Task file, relative to the working directory (default: todolist.json).",
}
