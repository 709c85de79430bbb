"""Session state for the task list page.

``TaskListState`` owns everything one browser session can change: the task
store, the sort setting and the section flags. The page keeps exactly one
instance in ``st.session_state`` and routes every UI event through it.
After each mutation the derived views are recomputed explicitly, so
``views`` always reflects the current store and sort setting.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from tasklist.errors import InvalidTaskInput
from tasklist.forms import validate_task_input
from tasklist.models import Task
from tasklist.sections import SectionVisibility
from tasklist.sort_control import SortState
from tasklist.store import TaskStore
from tasklist.views import TaskViews, derive_views

logger = logging.getLogger(__name__)


class TaskListState:
    def __init__(
        self,
        store: Optional[TaskStore] = None,
        sort: Optional[SortState] = None,
        sections: Optional[SectionVisibility] = None,
    ) -> None:
        self.store = store or TaskStore()
        self.sort = sort or SortState()
        self.sections = sections or SectionVisibility()
        self.views: TaskViews = self.recompute()

    def recompute(self) -> TaskViews:
        self.views = derive_views(self.store.tasks, self.sort)
        return self.views

    # -------------------- task operations --------------------
    def add_task(self, title: Optional[str], priority: str, deadline: Any) -> Optional[Task]:
        """Add a task from form input; invalid input adds nothing and returns None."""
        try:
            data = validate_task_input(title, priority, deadline)
        except InvalidTaskInput as e:
            logger.info("Add rejected: %s", e)
            return None
        task = self.store.add(data.title, data.priority, data.deadline)
        if task is None:
            return None
        self.recompute()
        logger.info("Added task id=%s", task.id)
        return task

    def delete_task(self, task_id: int) -> bool:
        changed = self.store.delete(task_id)
        self.recompute()
        if changed:
            logger.info("Deleted task id=%s", task_id)
        return changed

    def complete_task(self, task_id: int) -> bool:
        changed = self.store.complete(task_id)
        self.recompute()
        if changed:
            logger.info("Completed task id=%s", task_id)
        return changed

    # -------------------- sort / sections --------------------
    def select_sort(self, key: str) -> SortState:
        self.sort = self.sort.select(key)
        self.recompute()
        logger.debug("Sort now %s/%s", self.sort.sort_type, self.sort.sort_order)
        return self.sort

    def toggle_section(self, name: str) -> SectionVisibility:
        self.sections = self.sections.toggle(name)
        logger.debug("Section %s open=%s", name, self.sections.is_open(name))
        return self.sections

    def __str__(self) -> str:
        return (f"Active: {len(self.views.active)} tasks, "
                f"Completed: {len(self.views.completed)} tasks, "
                f"Sort: {self.sort.sort_type}/{self.sort.sort_order}")
