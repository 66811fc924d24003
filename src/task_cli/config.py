# src/task_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; running with no environment at all works.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_PROG_NAME = "task-cli"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load a local .env if present. Real environment variables win."""
    load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    prog_name: str
    log_level: str
    log_file_enabled: bool

    # ---- Console ----
    prompt: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    @property
    def console_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-cli").strip() or "task-cli"
        # The first token every command line must start with.
        prog_name = _env(_k("PROG_NAME"), DEFAULT_PROG_NAME).strip() or DEFAULT_PROG_NAME
        log_level = _env_log_level(_k("LOG_LEVEL"), "WARNING")
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        prompt = _env(_k("PROMPT"), "")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-cli"))
        tasks_path = _env_path(_k("TASKS_PATH"), Path("tasks.json"))

        return Settings(
            app_name=app_name,
            prog_name=prog_name,
            log_level=log_level,
            log_file_enabled=log_file_enabled,
            prompt=prompt,
            data_dir=data_dir,
            tasks_path=tasks_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings on first use (after .env is loaded) and reuse them afterwards."""
    global _SETTINGS
    if _SETTINGS is None:
        _load_dotenv()
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None
