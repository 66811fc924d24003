# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_cli import config
from task_cli.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "TASK_CLI_APP_NAME",
        "TASK_CLI_PROG_NAME",
        "TASK_CLI_LOG_LEVEL",
        "TASK_CLI_LOG_FILE_ENABLED",
        "TASK_CLI_PROMPT",
        "TASK_CLI_DATA_DIR",
        "TASK_CLI_TASKS_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "task-cli"
    assert s.prog_name == "task-cli"
    assert s.log_level == "WARNING"
    assert s.console_log_level == logging.WARNING
    assert s.log_file_enabled is True
    assert s.prompt == ""
    assert s.data_dir == Path(".local/task-cli")
    assert s.tasks_path == Path("tasks.json")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_CLI_PROG_NAME", "todo")
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_CLI_LOG_FILE_ENABLED", "off")
    monkeypatch.setenv("TASK_CLI_PROMPT", "> ")
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", str(tmp_path / "mine.json"))

    s = Settings.from_env()
    assert s.prog_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.console_log_level == logging.DEBUG
    assert s.log_file_enabled is False
    assert s.prompt == "> "
    assert s.tasks_path == tmp_path / "mine.json"


def test_invalid_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TASK_CLI_PROG_NAME", "   ")
    monkeypatch.setenv("TASK_CLI_TASKS_PATH", "")

    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.prog_name == "task-cli"
    assert s.tasks_path == Path("tasks.json")


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "_load_dotenv", lambda: None)
    monkeypatch.setenv("TASK_CLI_PROG_NAME", "first")
    first = config.get_settings()

    monkeypatch.setenv("TASK_CLI_PROG_NAME", "second")
    assert config.get_settings() is first

    config.reset_settings()
    assert config.get_settings().prog_name == "second"
