"""In-memory task store.

The collection is kept as a tuple of frozen ``Task`` records. Every mutation
builds a new tuple, so a tuple handed out earlier never changes under the
caller. Ids come from a per-store monotonic counter.
"""
from __future__ import annotations

import itertools
import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Iterator, Optional, Tuple

from tasklist.models import PRIORITIES, Task

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self) -> None:
        self._tasks: Tuple[Task, ...] = ()
        self._ids: Iterator[int] = itertools.count(1)

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Optional[Task]:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def add(self, title: Any, priority: Any, deadline: Any) -> Optional[Task]:
        """Append a new, not yet completed task.

        A record that could not be sorted or shown (blank title, unknown
        priority, deadline that is not a naive datetime) is refused: nothing is
        stored and None is returned.
        """
        if not isinstance(title, str) or not title.strip():
            logger.debug("Add ignored, blank title")
            return None
        if priority not in PRIORITIES:
            logger.debug("Add ignored, unknown priority=%r", priority)
            return None
        if not isinstance(deadline, datetime) or deadline.tzinfo is not None:
            logger.debug("Add ignored, deadline is not a naive datetime: %r", deadline)
            return None
        task = Task(id=next(self._ids), title=title, priority=priority, deadline=deadline)
        self._tasks = self._tasks + (task,)
        logger.debug("Task added id=%s priority=%s total=%s", task.id, task.priority, len(self._tasks))
        return task

    def delete(self, task_id: int) -> bool:
        remaining = tuple(t for t in self._tasks if t.id != task_id)
        if len(remaining) == len(self._tasks):
            logger.debug("Delete ignored, unknown id=%s", task_id)
            return False
        self._tasks = remaining
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return True

    def complete(self, task_id: int) -> bool:
        current = self.get(task_id)
        if current is None or current.completed:
            logger.debug("Complete ignored id=%s (missing or already completed)", task_id)
            return False
        self._tasks = tuple(replace(t, completed=True) if t.id == task_id else t for t in self._tasks)
        logger.debug("Task completed id=%s", task_id)
        return True
