# tests/test_board_state.py

from __future__ import annotations

from datetime import date

from taskboard.client.state import (
    BoardState,
    apply_filters,
    form_from_task,
    is_overdue,
    sort_tasks,
    toggled_status,
)

from .fakes import make_task

TODAY = date(2024, 6, 15)


def test_is_overdue() -> None:
    assert is_overdue(make_task("1", dueDate="2024-06-14T00:00:00.000Z"), TODAY)
    assert is_overdue(make_task("1", dueDate="2000-01-01T00:00:00.000Z", status="in-progress"), TODAY)
    # due today is not yet overdue
    assert not is_overdue(make_task("1", dueDate="2024-06-15T00:00:00.000Z"), TODAY)
    assert not is_overdue(make_task("1", dueDate="2024-06-14T00:00:00.000Z", status="completed"), TODAY)
    assert not is_overdue(make_task("1"), TODAY)


def test_sort_order_tiers() -> None:
    tasks = [
        make_task("low-undated", priority="low"),
        make_task("high-undated-old", priority="high", createdAt="2024-01-01T00:00:00.000Z"),
        make_task("high-undated-new", priority="high", createdAt="2024-05-01T00:00:00.000Z"),
        make_task("high-due-late", priority="high", dueDate="2024-09-01T00:00:00.000Z"),
        make_task("high-due-soon", priority="high", dueDate="2024-07-01T00:00:00.000Z"),
        make_task("low-overdue", priority="low", dueDate="2024-01-01T00:00:00.000Z"),
        make_task("medium-overdue", dueDate="2024-06-01T00:00:00.000Z"),
        make_task("done-past", priority="high", status="completed", dueDate="2024-01-01T00:00:00.000Z"),
    ]

    ordered = [t["id"] for t in sort_tasks(tasks, TODAY)]

    assert ordered == [
        "medium-overdue",
        "low-overdue",
        "done-past",
        "high-due-soon",
        "high-due-late",
        "high-undated-new",
        "high-undated-old",
        "low-undated",
    ]


def test_sort_does_not_depend_on_input_order() -> None:
    tasks = [
        make_task(str(i), priority=p, createdAt=f"2024-05-{i + 1:02d}T00:00:00.000Z")
        for i, p in enumerate(["low", "high", "medium"] * 3)
    ]
    expected = [t["id"] for t in sort_tasks(tasks, TODAY)]

    assert [t["id"] for t in sort_tasks(list(reversed(tasks)), TODAY)] == expected
    assert expected[:3] == ["7", "4", "1"]


def test_filters_are_anded() -> None:
    state = BoardState(
        tasks=[
            make_task("1", title="Buy milk", priority="high"),
            make_task("2", title="Write report", description="Quarterly MILK numbers"),
            make_task("3", title="Walk dog", status="completed"),
        ]
    )

    assert [t["id"] for t in apply_filters(state)] == ["1", "2", "3"]

    state.search_term = "milk"
    assert [t["id"] for t in apply_filters(state)] == ["1", "2"]

    state.priority_filter = "high"
    assert [t["id"] for t in apply_filters(state)] == ["1"]

    state.search_term = ""
    state.priority_filter = "all"
    state.status_filter = "completed"
    assert [t["id"] for t in apply_filters(state)] == ["3"]


def test_toggled_status_never_goes_through_in_progress() -> None:
    assert toggled_status("completed") == "pending"
    assert toggled_status("pending") == "completed"
    assert toggled_status("in-progress") == "completed"


def test_form_from_task() -> None:
    assert form_from_task()["status"] == "pending"
    form = form_from_task(make_task("1", dueDate="2024-07-01T00:00:00.000Z"))
    assert form["dueDate"] == "2024-07-01"
    assert form["category"] == ""
