"""
todo_cli: a small file-backed task tracker for the command line.

Subpackages:
- core: error types and ports (interfaces)
- tasks: task models, the in-memory collection, JSON codec and storage
- cli: command registry, bootstrap and entrypoint
"""

__version__ = "0.1.0"
