# src/task_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Task lifecycle status, stored verbatim in the JSON file."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: object) -> TaskStatus | None:
        """Case-insensitive lookup; None for unknown or non-string values."""
        if not raw or not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class TaskError(Exception):
    """Base class for errors reported back to the user."""


class InvalidTaskIdError(TaskError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__("Task ID must be an integer.")
        self.raw = raw


class TaskNotFoundError(TaskError, KeyError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


def utc_now_iso(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_task_id(raw: str) -> int:
    """
    Parse a decimal task id coming from the command line.

    Only checks the format; whether a task with that id exists is up to the store.
    """
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        raise InvalidTaskIdError(str(raw)) from None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from one element of the JSON array.

        Raises ValueError when a required field is missing or malformed.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass; reject it explicitly
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"task id must be an integer, got {task_id!r}")

        status = TaskStatus.parse(raw.get("status"))
        if status is None:
            raise ValueError(f"task {task_id} has unknown status {raw.get('status')!r}")

        created_at = str(raw.get("createdAt") or "")
        return cls(
            id=task_id,
            description=str(raw.get("description") or ""),
            status=status,
            created_at=created_at,
            updated_at=str(raw.get("updatedAt") or created_at),
        )
