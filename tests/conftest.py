"""Shared fixtures for ft-config tests."""

import os
from typing import Any, List, Tuple
from unittest.mock import patch

import pytest

from ft_config.logger import Logger, disable_logging


class RecordingLogger(Logger):
    """Logger backend that keeps every call for assertions."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, **kwargs)

    def get_session_id(self) -> str:
        return "recording"

    def messages(self, level: str = "") -> List[str]:
        return [m for lvl, m, _ in self.records if not level or lvl == level]


@pytest.fixture(autouse=True)
def isolated_environ():
    """Restore os.environ after each test, including variables exported from .env files."""
    with patch.dict(os.environ):
        yield


@pytest.fixture(autouse=True)
def reset_logging_switch():
    yield
    disable_logging()


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def write_env(tmp_path):
    """Write a .env file under tmp_path and return its path."""

    def _write(content: str, name: str = ".env.test"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
