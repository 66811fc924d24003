# src/task_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import DEFAULT_PROG_NAME
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings kept on the state for easy access from command handlers.
    settings: object
    task_store: TaskStore

    @property
    def prog_name(self) -> str:
        return str(getattr(self.settings, "prog_name", DEFAULT_PROG_NAME))
