# tests/test_board_view.py

from __future__ import annotations

from datetime import date

from taskboard.client.state import BoardState, apply_filters
from taskboard.client.view import render

from .fakes import make_task

TODAY = date(2024, 6, 15)


def test_render_cards_sorted_with_labels() -> None:
    state = BoardState(
        tasks=[
            make_task("a", title="Later", priority="low"),
            make_task(
                "b",
                title="Late",
                status="in-progress",
                category="home",
                dueDate="2024-06-01T00:00:00.000Z",
            ),
            make_task("c", title="Done", status="completed"),
        ]
    )
    apply_filters(state)

    view = render(state, TODAY)

    assert [c.id for c in view.cards] == ["b", "c", "a"]
    late = view.cards[0]
    assert late.overdue
    assert late.status_label == "in progress"
    assert late.due_label == "Jun 1, 2024"
    assert late.overdue_label == "(OVERDUE)"
    assert late.category == "home"
    assert late.status_icon == "radio_button_unchecked"
    done = view.cards[1]
    assert done.completed
    assert done.status_icon == "check_circle"
    assert done.due_label is None
    assert done.overdue_label is None
    assert not view.show_no_tasks


def test_render_empty_board_and_stats() -> None:
    state = BoardState(
        stats={
            "totalTasks": 4,
            "completedTasks": 1,
            "inProgressTasks": 2,
            "pendingTasks": 1,
            "completionRate": 25,
        },
        is_loading=True,
    )

    view = render(state, TODAY)

    assert view.cards == []
    assert view.show_no_tasks
    assert view.show_loading
    assert [(s.title, s.value) for s in view.stats] == [
        ("Total Tasks", "4"),
        ("Completed", "1"),
        ("In Progress", "2"),
        ("Completion Rate", "25%"),
    ]


def test_render_editor_labels() -> None:
    state = BoardState(editor_open=True)
    assert render(state).editor_title == "Add New Task"

    state.editing_task_id = "x"
    view = render(state)
    assert view.editor_title == "Edit Task"
    assert view.save_label == "Update Task"

    assert render(BoardState()).editor_title is None
