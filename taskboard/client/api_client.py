"""HTTP client for the task API.

Every failure, whether the server answered with an error status or could not
be reached at all, surfaces as :class:`ApiError`. Nothing is retried.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:5000/api"


class ApiError(Exception):
    def __init__(self, action: str, status_code: Optional[int] = None):
        self.action = action
        self.status_code = status_code
        detail = f"HTTP {status_code}" if status_code is not None else "no response"
        super().__init__(f"Failed to {action} ({detail})")


class TaskApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, action: str, payload=None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("%s %s failed with status %s", method, url, status)
            raise ApiError(action, status) from exc
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(action) from exc

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/tasks", "fetch tasks")

    def get_stats(self) -> Dict[str, Any]:
        return self._request("GET", "/tasks/stats", "fetch stats")

    def create_task(self, task_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/tasks", "create task", task_data)

    def update_task(self, task_id: str, task_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/tasks/{task_id}", "update task", task_data)

    def delete_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/tasks/{task_id}", "delete task")
