"""Pure rendering: ``render(state)`` describes what the board shows.

The description is plain data, so any front end (HTML, terminal, tests) can
draw it. The task grid is rebuilt in full on every call.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from taskboard.client.state import BoardState, Notification, due_day, is_overdue, sort_tasks


@dataclass
class TaskCard:
    id: str
    title: str
    description: str
    status: str
    priority: str
    status_icon: str
    status_label: str
    completed: bool
    overdue: bool
    category: Optional[str] = None
    due_label: Optional[str] = None
    overdue_label: Optional[str] = None


@dataclass
class StatCard:
    title: str
    value: str
    icon: str
    css_class: str
    color: str


@dataclass
class BoardView:
    cards: List[TaskCard] = field(default_factory=list)
    stats: List[StatCard] = field(default_factory=list)
    show_no_tasks: bool = False
    show_loading: bool = False
    editor_title: Optional[str] = None
    save_label: Optional[str] = None
    notifications: List[Notification] = field(default_factory=list)


def format_due_date(day: date) -> str:
    """Like ``Jan 1, 2000``."""
    return f"{day.strftime('%b')} {day.day}, {day.year}"


def render_card(task: Mapping[str, Any], today: Optional[date] = None) -> TaskCard:
    status = task.get("status", "pending")
    completed = status == "completed"
    day = due_day(task)
    overdue = is_overdue(task, today)
    return TaskCard(
        id=task.get("id"),
        title=task.get("title", ""),
        description=task.get("description", ""),
        status=status,
        priority=task.get("priority", "medium"),
        status_icon="check_circle" if completed else "radio_button_unchecked",
        status_label=status.replace("-", " "),
        completed=completed,
        overdue=overdue,
        category=task.get("category") or None,
        due_label=format_due_date(day) if day else None,
        overdue_label="(OVERDUE)" if overdue else None,
    )


def render_stats(stats: Optional[Mapping[str, Any]]) -> List[StatCard]:
    if not stats:
        return []
    return [
        StatCard("Total Tasks", str(stats["totalTasks"]), "assignment", "total", "#1976d2"),
        StatCard("Completed", str(stats["completedTasks"]), "check_circle", "completed", "#4caf50"),
        StatCard("In Progress", str(stats["inProgressTasks"]), "schedule", "progress", "#ff9800"),
        StatCard(
            "Completion Rate", f"{stats['completionRate']}%", "trending_up", "rate", "#9c27b0"
        ),
    ]


def render(state: BoardState, today: Optional[date] = None) -> BoardView:
    cards = [render_card(t, today) for t in sort_tasks(state.filtered_tasks, today)]
    view = BoardView(
        cards=cards,
        stats=render_stats(state.stats),
        show_no_tasks=not cards,
        show_loading=state.is_loading,
        notifications=list(state.notifications),
    )
    if state.editor_open:
        editing = state.editing_task_id is not None
        view.editor_title = "Edit Task" if editing else "Add New Task"
        view.save_label = "Update Task" if editing else "Save Task"
    return view
