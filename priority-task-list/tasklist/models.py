from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Tuple


PRIORITIES: Tuple[str, ...] = ("High", "Medium", "Low")
# Lower rank sorts first in ascending order.
PRIORITY_RANK: Dict[str, int] = {"High": 1, "Medium": 2, "Low": 3}
DEFAULT_PRIORITY = "Low"

SORT_BY_DATE = "date"
SORT_BY_PRIORITY = "priority"
SORT_KEYS: Tuple[str, ...] = (SORT_BY_DATE, SORT_BY_PRIORITY)

ASCENDING = "asc"
DESCENDING = "desc"
SORT_ORDERS: Tuple[str, ...] = (ASCENDING, DESCENDING)


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Instances are immutable; the store replaces a task with an updated copy
    when it is completed.
    """

    id: int
    title: str
    priority: str
    deadline: datetime
    completed: bool = False

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self.priority]
