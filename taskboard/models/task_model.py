from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, Mapping, Optional

from taskboard.utils.db import format_timestamp

STATUSES = ("pending", "in-progress", "completed")
PRIORITIES = ("low", "medium", "high")

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
CATEGORY_MAX_LENGTH = 50


class TaskValidationError(ValueError):
    """Raised when a payload does not satisfy the task schema."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_due_date(value: Any) -> Optional[datetime]:
    """Turn a date-like input into a UTC midnight datetime.

    Accepts ``YYYY-MM-DD``, a full ISO timestamp (a trailing ``Z`` is fine),
    or a date/datetime object. Empty values mean "no due date".
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        day = value.astimezone(timezone.utc).date() if value.tzinfo else value.date()
    elif isinstance(value, date):
        day = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(text.split("T", 1)[0])
            except ValueError:
                raise TaskValidationError(f"Invalid dueDate: {value!r}") from None
        day = parsed.astimezone(timezone.utc).date() if parsed.tzinfo else parsed.date()
    else:
        raise TaskValidationError(f"Invalid dueDate type: {type(value).__name__}")
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def _required_text(payload: Mapping[str, Any], name: str, max_length: int) -> str:
    value = payload.get(name)
    if value is None or value == "":
        raise TaskValidationError(f"{name} is required")
    if not isinstance(value, str):
        raise TaskValidationError(f"{name} must be a string")
    if len(value) > max_length:
        raise TaskValidationError(f"{name} must be at most {max_length} characters")
    return value


def _choice(payload: Mapping[str, Any], name: str, choices, default: str) -> str:
    value = payload.get(name)
    if value is None or value == "":
        return default
    if value not in choices:
        raise TaskValidationError(f"{name} must be one of {', '.join(choices)}")
    return value


def _optional_text(payload: Mapping[str, Any], name: str, max_length: int) -> Optional[str]:
    value = payload.get(name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise TaskValidationError(f"{name} must be a string")
    if len(value) > max_length:
        raise TaskValidationError(f"{name} must be at most {max_length} characters")
    return value


@dataclass
class Task:
    title: str
    description: str
    status: str = "pending"  # pending | in-progress | completed
    priority: str = "medium"  # low | medium | high
    category: Optional[str] = None
    # Calendar date only, kept as UTC midnight
    due_date: Optional[datetime] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Task":
        """Build a task from a request body, enforcing the schema.

        Only the mutable fields are read; ``id`` and the timestamps in the
        body are ignored.
        """
        if not isinstance(payload, Mapping):
            raise TaskValidationError("Task payload must be a JSON object")
        return cls(
            title=_required_text(payload, "title", TITLE_MAX_LENGTH),
            description=_required_text(payload, "description", DESCRIPTION_MAX_LENGTH),
            status=_choice(payload, "status", STATUSES, "pending"),
            priority=_choice(payload, "priority", PRIORITIES, "medium"),
            category=_optional_text(payload, "category", CATEGORY_MAX_LENGTH),
            due_date=parse_due_date(payload.get("dueDate")),
        )

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Task":
        return cls(
            id=str(doc["_id"]),
            title=doc.get("title"),
            description=doc.get("description"),
            status=doc.get("status", "pending"),
            priority=doc.get("priority", "medium"),
            category=doc.get("category"),
            due_date=doc.get("due_date"),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    def mutable_fields(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "category": self.category,
            "due_date": self.due_date,
        }

    def to_document(self) -> Dict[str, Any]:
        """Mongo document for insertion; absent optional fields are left out."""
        doc = {k: v for k, v in self.mutable_fields().items() if v is not None}
        doc["created_at"] = self.created_at
        doc["updated_at"] = self.updated_at
        return doc

    def to_json(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
        }
        if self.category is not None:
            data["category"] = self.category
        if self.due_date is not None:
            data["dueDate"] = format_timestamp(self.due_date)
        data["createdAt"] = format_timestamp(self.created_at)
        data["updatedAt"] = format_timestamp(self.updated_at)
        return data
