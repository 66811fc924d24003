# src/task_cli/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from .task_models import Task, TaskNotFoundError, TaskStatus, utc_now_iso

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in one pretty-printed JSON array:
    - every call re-reads the file (no in-memory cache between commands)
    - every mutation rewrites the file in full (temp file + os.replace)
    - a missing file is an empty collection

    Not safe for concurrent writers; there is no locking.
    """

    def __init__(self, path: str | Path = "tasks.json", *, clock: Clock | None = None) -> None:
        self._path = Path(path)
        self._clock = clock or _utc_now
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _now(self) -> str:
        return utc_now_iso(self._clock())

    def _load(self) -> list[Task]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error("Error loading tasks from %s: %s", self._path, e)
            return []

        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        try:
            data = json.loads(raw.decode("utf-8"))
            if not isinstance(data, list):
                raise ValueError("top-level JSON value must be an array")
            return [Task.from_dict(item) for item in data]
        except ValueError as e:
            logger.error("Error loading tasks from %s: %s", self._path, e)
            self._preserve_corrupt_file(raw)
            return []

    def _preserve_corrupt_file(self, raw: bytes) -> None:
        """
        Copy an unreadable tasks file aside before the next write replaces it.

        Each distinct corrupt content gets its own timestamped backup; content
        that is already backed up is not copied again.
        """
        prefix = self._path.name + ".corrupt-"
        for existing in self._path.parent.glob(prefix + "*"):
            try:
                if existing.read_bytes() == raw:
                    return
            except OSError:
                continue

        stamp = self._clock().strftime("%Y%m%dT%H%M%S%f")
        backup = self._path.with_name(prefix + stamp)
        try:
            backup.write_bytes(raw)
        except OSError:
            logger.exception("Failed to back up unreadable tasks file %s", self._path)
            return
        logger.warning("Unreadable tasks file copied to %s", backup)

    def _save(self, tasks: list[Task]) -> bool:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.error("Error saving tasks to %s: %s", self._path, e)
            return False
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True

    @staticmethod
    def _index_of(tasks: list[Task], task_id: int) -> int:
        for i, task in enumerate(tasks):
            if task.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._load())

    def get(self, task_id: int) -> Task | None:
        for task in self._load():
            if task.id == task_id:
                return task
        return None

    def add(self, description: str) -> int:
        if not description or not description.strip():
            raise ValueError("description is required")

        tasks = self._load()
        task_id = max((t.id for t in tasks), default=0) + 1
        now = self._now()
        tasks.append(
            Task(
                id=task_id,
                description=description,
                status=TaskStatus.TODO,
                created_at=now,
                updated_at=now,
            )
        )
        self._save(tasks)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def update(self, task_id: int, description: str) -> Task:
        if not description or not description.strip():
            raise ValueError("description is required")

        tasks = self._load()
        task = tasks[self._index_of(tasks, task_id)]
        task.description = description
        task.updated_at = self._now()
        self._save(tasks)
        logger.debug("Task updated id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        tasks = self._load()
        task = tasks.pop(self._index_of(tasks, task_id))
        self._save(tasks)
        logger.debug("Task deleted id=%s", task_id)
        return task

    def set_status(self, task_id: int, status: TaskStatus) -> bool:
        """
        Move a task to `status`.

        Returns False (and writes nothing) when the task already has that status.
        """
        tasks = self._load()
        task = tasks[self._index_of(tasks, task_id)]
        if task.status == status:
            return False

        task.status = status
        task.updated_at = self._now()
        self._save(tasks)
        logger.debug("Task status changed id=%s status=%s", task_id, status.value)
        return True

    def list_tasks(self, status: TaskStatus | None = None) -> list[Task]:
        tasks = self._load()
        if status is None:
            return tasks
        return [t for t in tasks if t.status == status]
