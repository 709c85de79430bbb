"""Derived views over the task collection.

Pure functions: they never mutate the input collection and can be
recomputed any number of times.
"""
from __future__ import annotations

from typing import Iterable, List, NamedTuple

from tasklist.models import SORT_BY_PRIORITY, Task
from tasklist.sort_control import SortState


class TaskViews(NamedTuple):
    active: List[Task]
    completed: List[Task]


def sort_tasks(tasks: Iterable[Task], sort_state: SortState) -> List[Task]:
    """Return a sorted copy of ``tasks`` per the current sort key and order."""
    if sort_state.sort_type == SORT_BY_PRIORITY:
        key = lambda t: t.rank  # noqa: E731
    else:
        key = lambda t: t.deadline  # noqa: E731
    return sorted(tasks, key=key, reverse=not sort_state.ascending)


def active_tasks(tasks: Iterable[Task], sort_state: SortState) -> List[Task]:
    return sort_tasks((t for t in tasks if not t.completed), sort_state)


def completed_tasks(tasks: Iterable[Task], sort_state: SortState) -> List[Task]:
    return sort_tasks((t for t in tasks if t.completed), sort_state)


def derive_views(tasks: Iterable[Task], sort_state: SortState) -> TaskViews:
    tasks = tuple(tasks)
    return TaskViews(
        active=active_tasks(tasks, sort_state),
        completed=completed_tasks(tasks, sort_state),
    )
