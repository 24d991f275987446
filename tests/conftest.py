# tests/conftest.py
"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- Temporary history log paths
- Scripted terminal, shell runner and clipboard (see tests/fakes.py)
- Isolated settings without .env or CMDRUNNER_ variables
"""

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from cmdrunner.config import Settings
from tests.fakes import FakeClipboard, RecordingRunner, ScriptedTerminal


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    """Path of a history log inside a temporary directory.

    Returns:
        Path that does not exist yet.
    """
    return tmp_path / "history" / ".command_runner_history"


@pytest.fixture
def isolated_settings(tmp_path: Path) -> Generator[Settings, None, None]:
    """Provide Settings unaffected by the developer's environment.

    Yields:
        Settings with the history log in a temporary directory.
    """
    clean_env = {k: v for k, v in os.environ.items() if not k.upper().startswith("CMDRUNNER_")}
    with patch.dict(os.environ, clean_env, clear=True):
        yield Settings(_env_file=None, history_path=str(tmp_path / ".command_runner_history"))


@pytest.fixture
def terminal() -> ScriptedTerminal:
    return ScriptedTerminal()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()
