from __future__ import annotations


class TaskListError(RuntimeError):
    pass


class InvalidTaskInput(TaskListError):
    """Add-task input was rejected (blank title, missing or bad deadline)."""
