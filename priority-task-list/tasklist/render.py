"""HTML fragments and labels used by the task list page."""
from __future__ import annotations

from datetime import datetime
from html import escape

from tasklist.models import Task
from tasklist.sort_control import SortState

FOOTER_TEXT = (
    "Technologies and concepts used: Python, Streamlit, session state, "
    "immutable dataclasses, pandas date parsing, conditional rendering, "
    "filter / sort / map over the task list, event handling."
)


def format_deadline(dt: datetime) -> str:
    """Locale-style display, e.g. ``1/10/2025, 9:00:00 AM``."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


def task_item_html(task: Task) -> str:
    priority_cls = task.priority.lower()
    done_cls = " done" if task.completed else ""
    return (
        f'<div class="task-item {priority_cls}{done_cls}">'
        f'<div class="task-info">'
        f'<div>{escape(task.title)} <strong>{escape(task.priority)}</strong></div>'
        f'<div class="task-deadline">Due: {format_deadline(task.deadline)}</div>'
        f'</div>'
        f'</div>'
    )


def sort_button_label(label: str, key: str, sort_state: SortState) -> str:
    glyph = sort_state.indicator(key)
    return f"{label} {glyph}" if glyph else label


def section_toggle_label(is_open: bool) -> str:
    return "−" if is_open else "+"


def empty_list_html(message: str) -> str:
    return f'<div class="task-empty">{escape(message)}</div>'
