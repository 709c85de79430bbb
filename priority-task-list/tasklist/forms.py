"""Add-task form handling.

The store trusts its input, so everything the form submits goes through
``validate_task_input`` first. Deadlines are parsed with pandas, naive and
without any timezone conversion.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional

import pandas as pd

from tasklist.errors import InvalidTaskInput
from tasklist.models import PRIORITIES


@dataclass(frozen=True)
class TaskInput:
    title: str
    priority: str
    deadline: datetime


def parse_deadline(value: Any) -> datetime:
    """Parse a deadline from a datetime, date, Timestamp or ISO-like string.

    ``"2025-01-10T09:00"`` (the shape of a datetime-local field) is accepted.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidTaskInput("Deadline is required.")
    ts = pd.to_datetime(value, errors="coerce")
    if ts is None or pd.isna(ts):
        raise InvalidTaskInput(f"Could not parse deadline: {value!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def combine_deadline(day: Optional[date], time_of_day: Optional[time]) -> Optional[datetime]:
    """Join the page's separate date and time widgets into one deadline.

    A missing date means no deadline; a missing time defaults to midnight.
    """
    if day is None:
        return None
    return datetime.combine(day, time_of_day or time(0, 0))


def validate_task_input(title: Optional[str], priority: str, deadline: Any) -> TaskInput:
    if not title or not title.strip():
        raise InvalidTaskInput("Title is required.")
    if priority not in PRIORITIES:
        raise InvalidTaskInput(f"Unknown priority: {priority!r}")
    return TaskInput(title=title, priority=priority, deadline=parse_deadline(deadline))
