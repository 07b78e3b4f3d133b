# tests/test_task_store.py

from __future__ import annotations

from daytasks.core.task_store import TaskStore


def test_add_appends_in_call_order() -> None:
    store = TaskStore()
    store.add_task("2024-03-05", "Buy milk")
    store.add_task("2024-03-05", "Call dentist")
    assert store.tasks_for("2024-03-05") == ("Buy milk", "Call dentist")


def test_duplicates_are_kept() -> None:
    store = TaskStore()
    store.add_task("2024-03-05", "Buy milk")
    store.add_task("2024-03-05", "Buy milk")
    assert store.tasks_for("2024-03-05") == ("Buy milk", "Buy milk")
    assert store.count_tasks() == 2


def test_empty_text_or_missing_key_is_ignored() -> None:
    store = TaskStore()
    store.add_task("2024-03-05", "")
    store.add_task("2024-03-05", "   \t")
    store.add_task(None, "Buy milk")
    store.add_task("", "Buy milk")
    assert store.tasks_for("2024-03-05") == ()
    assert store.count_tasks() == 0
    assert store.dates_with_tasks(2024, 2) == frozenset()


def test_tasks_for_unknown_key_is_empty_and_does_not_create() -> None:
    store = TaskStore()
    assert store.tasks_for("2030-01-01") == ()
    assert store.tasks_for(None) == ()
    assert store.dates_with_tasks(2030, 0) == frozenset()


def test_returned_sequence_is_a_snapshot() -> None:
    store = TaskStore()
    store.add_task("2024-03-05", "a")
    snapshot = store.tasks_for("2024-03-05")
    store.add_task("2024-03-05", "b")
    assert snapshot == ("a",)


def test_dates_with_tasks_filters_by_month() -> None:
    store = TaskStore()
    store.add_task("2024-03-01", "a")
    store.add_task("2024-03-15", "b")
    store.add_task("2024-04-01", "c")
    assert store.dates_with_tasks(2024, 2) == {"2024-03-01", "2024-03-15"}
    assert store.dates_with_tasks(2024, 3) == {"2024-04-01"}
