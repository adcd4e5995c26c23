"""Client-side board state and the pure functions that derive the visible list.

Tasks are kept as the JSON dicts the API returns (camelCase keys). The state
is a non-authoritative mirror: it is rebuilt from the server after every
mutation.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}

ALL = "all"


@dataclass
class Notification:
    message: str
    kind: str = "info"  # info | success | error


@dataclass
class BoardState:
    tasks: List[Dict[str, Any]] = field(default_factory=list)
    filtered_tasks: List[Dict[str, Any]] = field(default_factory=list)
    stats: Optional[Dict[str, Any]] = None
    search_term: str = ""
    status_filter: str = ALL
    priority_filter: str = ALL
    editing_task_id: Optional[str] = None
    editor_open: bool = False
    form: Dict[str, str] = field(default_factory=dict)
    is_loading: bool = False
    notifications: List[Notification] = field(default_factory=list)

    def find_task(self, task_id: str) -> Optional[Dict[str, Any]]:
        for task in self.tasks:
            if task.get("id") == task_id:
                return task
        return None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def due_day(task: Mapping[str, Any]) -> Optional[date]:
    due = parse_timestamp(task.get("dueDate"))
    return due.astimezone(timezone.utc).date() if due else None


def is_overdue(task: Mapping[str, Any], today: Optional[date] = None) -> bool:
    """A task is overdue when its due date is before today and it is not completed."""
    day = due_day(task)
    if day is None or task.get("status") == "completed":
        return False
    if today is None:
        today = datetime.now(timezone.utc).date()
    return day < today


def matches_filters(
    task: Mapping[str, Any], search_term: str, status_filter: str, priority_filter: str
) -> bool:
    term = search_term.lower()
    matches_search = (
        term in (task.get("title") or "").lower()
        or term in (task.get("description") or "").lower()
    )
    matches_status = status_filter == ALL or task.get("status") == status_filter
    matches_priority = priority_filter == ALL or task.get("priority") == priority_filter
    return matches_search and matches_status and matches_priority


def apply_filters(state: BoardState) -> List[Dict[str, Any]]:
    state.filtered_tasks = [
        t
        for t in state.tasks
        if matches_filters(t, state.search_term, state.status_filter, state.priority_filter)
    ]
    return state.filtered_tasks


def sort_key(task: Mapping[str, Any], today: Optional[date] = None):
    # overdue first, then priority high..low, then earliest due date (undated last),
    # then newest created
    day = due_day(task)
    created = parse_timestamp(task.get("createdAt"))
    return (
        0 if is_overdue(task, today) else 1,
        -PRIORITY_RANK.get(task.get("priority"), 0),
        day is None,
        day or date.max,
        -created.timestamp() if created else 0.0,
    )


def sort_tasks(tasks: Sequence[Mapping[str, Any]], today: Optional[date] = None) -> list:
    return sorted(tasks, key=lambda t: sort_key(t, today))


def toggled_status(status: str) -> str:
    """Completion toggle never passes through in-progress."""
    return "pending" if status == "completed" else "completed"


def form_from_task(task: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
    if task is None:
        return {
            "title": "",
            "description": "",
            "category": "",
            "dueDate": "",
            "status": "pending",
            "priority": "medium",
        }
    return {
        "title": task.get("title") or "",
        "description": task.get("description") or "",
        "category": task.get("category") or "",
        "dueDate": (task.get("dueDate") or "").split("T")[0],
        "status": task.get("status") or "pending",
        "priority": task.get("priority") or "medium",
    }
