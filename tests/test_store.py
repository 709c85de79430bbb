from datetime import date, datetime, timezone

import pytest

from tasklist.sort_control import SortState
from tasklist.store import TaskStore
from tasklist.views import derive_views

DUE = datetime(2025, 3, 1, 12, 0)


def test_add_appends_incomplete_task(store):
    task = store.add("Write report", "High", DUE)
    assert store.tasks == (task,)
    assert task.completed is False
    assert task.title == "Write report"
    assert task.deadline == DUE


def test_ids_unique_and_increasing(store):
    tasks = [store.add(f"task {i}", "Medium", DUE) for i in range(25)]
    ids = [t.id for t in tasks]
    assert len(store) == 25
    assert len(set(ids)) == 25
    assert ids == sorted(ids)


def test_ids_not_reused_after_delete(store):
    first = store.add("a", "Low", DUE)
    store.delete(first.id)
    second = store.add("b", "Low", DUE)
    assert second.id != first.id


def test_stores_have_independent_counters():
    one, two = TaskStore(), TaskStore()
    assert one.add("x", "Low", DUE).id == two.add("y", "Low", DUE).id == 1


def test_delete_is_idempotent(store, report_and_milk):
    a, b = report_and_milk
    assert store.delete(a.id) is True
    after_first = store.tasks
    assert store.delete(a.id) is False
    assert store.tasks == after_first == (b,)


def test_delete_unknown_id_is_noop(store, report_and_milk):
    before = store.tasks
    assert store.delete(9999) is False
    assert store.tasks is before


def test_complete_is_idempotent(store, report_and_milk):
    a, b = report_and_milk
    assert store.complete(a.id) is True
    after_first = store.tasks
    assert store.complete(a.id) is False
    assert store.tasks == after_first
    assert store.get(a.id).completed is True
    assert store.get(b.id).completed is False


def test_complete_unknown_id_is_noop(store, report_and_milk):
    before = store.tasks
    assert store.complete(42) is False
    assert store.tasks is before


def test_complete_keeps_other_fields(store, report_and_milk):
    a, _ = report_and_milk
    store.complete(a.id)
    done = store.get(a.id)
    assert (done.id, done.title, done.priority, done.deadline) == (a.id, a.title, a.priority, a.deadline)


def test_snapshots_are_not_mutated(store, report_and_milk):
    a, b = report_and_milk
    snapshot = store.tasks
    store.complete(a.id)
    store.delete(b.id)
    store.add("later", "Medium", DUE)
    assert snapshot == (a, b)
    assert snapshot[0].completed is False


def test_get_missing_returns_none(store):
    assert store.get(1) is None


@pytest.mark.parametrize(
    "title,priority,deadline",
    [
        ("", "Low", DUE),
        ("   ", "Low", DUE),
        (None, "Low", DUE),
        ("Buy milk", "Urgent", DUE),
        ("Buy milk", None, DUE),
        ("Buy milk", "Low", None),
        ("Buy milk", "Low", "2025-01-10T09:00"),
        ("Buy milk", "Low", date(2025, 1, 10)),
        ("Buy milk", "Low", datetime(2025, 1, 10, 9, 0, tzinfo=timezone.utc)),
    ],
)
def test_add_refuses_unsortable_records(store, report_and_milk, title, priority, deadline):
    before = store.tasks
    assert store.add(title, priority, deadline) is None
    assert store.tasks is before


@pytest.mark.parametrize("sort_state", [SortState("date", "asc"), SortState("priority", "desc")])
def test_refused_records_keep_views_derivable(store, report_and_milk, sort_state):
    a, b = report_and_milk
    store.add("", "Low", None)
    store.add("x", "Urgent", DUE)
    views = derive_views(store.tasks, sort_state)
    assert {t.id for t in views.active} == {a.id, b.id}


def test_refused_add_does_not_consume_an_id(store):
    store.add("", "Low", DUE)
    assert store.add("real", "Low", DUE).id == 1
