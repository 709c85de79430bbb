from __future__ import annotations

from datetime import datetime

import pytest

from tasklist.state import TaskListState
from tasklist.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def state() -> TaskListState:
    return TaskListState()


@pytest.fixture
def report_and_milk(store: TaskStore):
    """Two tasks whose date order and priority order disagree."""
    a = store.add("Write report", "High", datetime(2025, 1, 10, 9, 0))
    b = store.add("Buy milk", "Low", datetime(2025, 1, 5, 9, 0))
    return a, b
