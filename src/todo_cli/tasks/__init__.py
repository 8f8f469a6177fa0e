"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- todo_list.py: in-memory collection with id assignment and mutations
- task_codec.py: JSON encoding of the task file
- task_store.py: file-backed and in-memory storage
"""
