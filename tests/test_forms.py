from datetime import date, datetime, time

import pandas as pd
import pytest

from tasklist.errors import InvalidTaskInput, TaskListError
from tasklist.forms import combine_deadline, parse_deadline, validate_task_input


def test_parse_datetime_local_string():
    assert parse_deadline("2025-01-10T09:00") == datetime(2025, 1, 10, 9, 0)


def test_parse_passthrough_types():
    dt = datetime(2025, 1, 5, 9, 30)
    assert parse_deadline(dt) == dt
    assert parse_deadline(pd.Timestamp(dt)) == dt
    assert parse_deadline(date(2025, 1, 5)) == datetime(2025, 1, 5)


def test_parse_drops_timezone():
    parsed = parse_deadline("2025-01-10T09:00:00+02:00")
    assert parsed.tzinfo is None
    assert parsed == datetime(2025, 1, 10, 9, 0)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date"])
def test_parse_rejects_missing_or_garbage(value):
    with pytest.raises(InvalidTaskInput):
        parse_deadline(value)


def test_combine_deadline():
    assert combine_deadline(date(2025, 1, 10), time(9, 0)) == datetime(2025, 1, 10, 9, 0)
    assert combine_deadline(date(2025, 1, 10), None) == datetime(2025, 1, 10, 0, 0)
    assert combine_deadline(None, time(9, 0)) is None


def test_validate_ok_keeps_title_as_entered():
    data = validate_task_input(" Write report ", "High", "2025-01-10T09:00")
    assert data.title == " Write report "
    assert data.priority == "High"
    assert data.deadline == datetime(2025, 1, 10, 9, 0)


@pytest.mark.parametrize(
    "title,priority,deadline",
    [
        ("", "Low", "2025-01-10T09:00"),
        ("   ", "Low", "2025-01-10T09:00"),
        (None, "Low", "2025-01-10T09:00"),
        ("Buy milk", "Low", None),
        ("Buy milk", "Urgent", "2025-01-10T09:00"),
    ],
)
def test_validate_rejects(title, priority, deadline):
    with pytest.raises(InvalidTaskInput):
        validate_task_input(title, priority, deadline)


def test_invalid_input_is_a_tasklist_error():
    assert issubclass(InvalidTaskInput, TaskListError)
