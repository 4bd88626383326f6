"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import signal

import pytest

from minishell.config import runtime
from tests.helpers.process_fakes import FakeProcessApi

_SETTING_VARIABLES = (
    "MINISHELL_PROMPT",
    "MINISHELL_MAX_LINE",
    "MINISHELL_EXEC_FAILURE_STATUS",
    "MINISHELL_LOG_LEVEL",
    "MINISHELL_LOG_FILE",
    "MINISHELL_LOG_APPEND",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep developer .env files and MINISHELL_* variables out of tests."""
    for name in _SETTING_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime.reset_default_values()
    yield
    runtime.reset_default_values()


@pytest.fixture
def fake_process_api():
    """Provide a factory for recording process APIs."""

    def factory(**kwargs) -> FakeProcessApi:
        return FakeProcessApi(**kwargs)

    return factory


@pytest.fixture
def missing_program() -> str:
    """A program name guaranteed not to resolve on PATH."""
    name = f"minishell-missing-{os.getpid()}"
    search_path = os.environ.get("PATH", "").split(os.pathsep)
    assert not any(os.path.exists(os.path.join(directory, name)) for directory in search_path)
    return name


@pytest.fixture
def sigchld_ignored():
    """Run the test as if the shell was started with SIGCHLD ignored."""
    previous = signal.signal(signal.SIGCHLD, signal.SIG_IGN)
    yield
    signal.signal(signal.SIGCHLD, previous)
