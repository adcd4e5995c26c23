"""Event wiring for the task board client.

Each public method corresponds to one user action. After any successful
mutation the full task list and the statistics are fetched again; the two
requests are independent, so a failure of one leaves the other's result in
place. Failures are reported once through a notification and never retried.
"""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from taskboard.client.api_client import ApiError, TaskApiClient
from taskboard.client.state import (
    BoardState,
    Notification,
    apply_filters,
    form_from_task,
    toggled_status,
)
from taskboard.client.view import BoardView, render

logger = logging.getLogger(__name__)


def task_payload(task: Mapping[str, Any], **overrides) -> Dict[str, Any]:
    """The mutable fields of ``task`` in the shape the update endpoint replaces."""
    payload = form_from_task(task)
    payload.update(overrides)
    return payload


class BoardController:
    def __init__(self, api: TaskApiClient, state: Optional[BoardState] = None):
        self.api = api
        self.state = state if state is not None else BoardState()

    # -------------------- notifications --------------------
    def notify(self, message: str, kind: str = "info") -> None:
        self.state.notifications.append(Notification(message, kind))

    def dismiss_notifications(self) -> None:
        self.state.notifications.clear()

    # -------------------- fetching --------------------
    def refresh(self) -> None:
        self.fetch_tasks()
        self.fetch_stats()

    def fetch_tasks(self) -> None:
        self.state.is_loading = True
        try:
            self.state.tasks = self.api.list_tasks()
            apply_filters(self.state)
        except ApiError as exc:
            logger.error("Error fetching tasks: %s", exc)
            self.notify("Failed to load tasks", "error")
        finally:
            self.state.is_loading = False

    def fetch_stats(self) -> None:
        try:
            self.state.stats = self.api.get_stats()
        except ApiError as exc:
            logger.error("Error fetching stats: %s", exc)

    # -------------------- mutations --------------------
    def create_task(self, task_data: Dict[str, Any]) -> bool:
        return self._mutate(
            lambda: self.api.create_task(task_data),
            "Task created successfully!",
            "Failed to create task",
            close_editor=True,
        )

    def update_task(self, task_id: str, task_data: Dict[str, Any]) -> bool:
        return self._mutate(
            lambda: self.api.update_task(task_id, task_data),
            "Task updated successfully!",
            "Failed to update task",
            close_editor=True,
        )

    def delete_task(self, task_id: str, confirm: Optional[Callable[[], bool]] = None) -> bool:
        if confirm is not None and not confirm():
            return False
        return self._mutate(
            lambda: self.api.delete_task(task_id),
            "Task deleted successfully!",
            "Failed to delete task",
        )

    def toggle_task(self, task_id: str) -> bool:
        task = self.state.find_task(task_id)
        if task is None:
            return False
        new_status = toggled_status(task.get("status"))
        try:
            self.api.update_task(task_id, task_payload(task, status=new_status))
        except ApiError as exc:
            logger.error("Error updating task status: %s", exc)
            self.notify("Failed to update task status", "error")
            return False
        self.notify(f"Task marked as {new_status}!", "success")
        self.refresh()
        return True

    def _mutate(self, call, success: str, failure: str, close_editor: bool = False) -> bool:
        self.state.is_loading = True
        try:
            call()
        except ApiError as exc:
            logger.error("%s: %s", failure, exc)
            self.notify(failure, "error")
            return False
        finally:
            self.state.is_loading = False
        self.notify(success, "success")
        if close_editor:
            self.close_editor()
        self.refresh()
        return True

    # -------------------- search / filters --------------------
    def set_search(self, term: str) -> None:
        self.state.search_term = term
        apply_filters(self.state)

    def set_status_filter(self, value: str) -> None:
        self.state.status_filter = value
        apply_filters(self.state)

    def set_priority_filter(self, value: str) -> None:
        self.state.priority_filter = value
        apply_filters(self.state)

    # -------------------- editor --------------------
    def open_editor(self, task_id: Optional[str] = None) -> None:
        task = self.state.find_task(task_id) if task_id is not None else None
        self.state.editing_task_id = task.get("id") if task else None
        self.state.form = form_from_task(task)
        self.state.editor_open = True

    def close_editor(self) -> None:
        self.state.editor_open = False
        self.state.editing_task_id = None
        self.state.form = {}

    def submit_form(self, form: Optional[Mapping[str, str]] = None) -> bool:
        if form:
            self.state.form.update(form)
        data = dict(self.state.form)
        data["title"] = (data.get("title") or "").strip()
        data["description"] = (data.get("description") or "").strip()
        if not data["title"] or not data["description"]:
            self.notify("Please fill in all required fields", "error")
            return False
        if self.state.editing_task_id:
            return self.update_task(self.state.editing_task_id, data)
        return self.create_task(data)

    def view(self, today=None) -> BoardView:
        return render(self.state, today)
