# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_cli.core.state import AppState
from task_cli.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command layer.

    A SimpleNamespace keeps tests independent of the real environment / .env.
    """
    return SimpleNamespace(
        app_name="task-cli",
        prog_name="task-cli",
        prompt="",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.json",
        log_file_enabled=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(settings: SimpleNamespace, clock: FakeClock) -> TaskStore:
    return TaskStore(settings.tasks_path, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real JSON TaskStore over tmp_path."""
    return AppState(settings=settings, task_store=store)
