# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_cli.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_passes_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("task_cli.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file_log(tmp_path: Path, restore_root_logger) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("task_cli.test").debug("hello file")
    for h in restore_root_logger.handlers:
        h.flush()

    text = (tmp_path / "logs" / LOG_FILE_NAME).read_text("utf-8")
    assert "DEBUG task_cli.test: hello file" in text


def test_setup_logging_without_file(restore_root_logger) -> None:
    setup_logging(log_dir=None)

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert not isinstance(handlers[0], logging.FileHandler)
