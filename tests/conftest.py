"""Shared test fixtures for tasklist tests.

Provides:
- MockContext for isolating tests from global settings and environment
- Store fixtures in empty and pre-filled states
"""

import os
from pathlib import Path
from typing import Generator

import pytest
import structlog

from tasklist.config import (
    Settings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from tasklist.tasks import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Removing TASKLIST_* environment variables for the duration
    - Installing a Settings instance as the global singleton
    - Resetting global settings and structlog on exit

    Usage:
        with MockContext(thread_safe=True) as ctx:
            settings = ctx.settings
    """

    def __init__(self, **settings_kwargs) -> None:
        self._settings_kwargs = settings_kwargs
        self._settings: Settings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        for var in list(os.environ):
            if var.startswith("TASKLIST_"):
                self._original_env[var] = os.environ.pop(var)

        self._settings = Settings(**self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        for var in list(os.environ):
            if var.startswith("TASKLIST_"):
                del os.environ[var]
        os.environ.update(self._original_env)
        reload_settings()
        structlog.reset_defaults()

    @property
    def settings(self) -> Settings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def thread_safe_context() -> Generator[MockContext, None, None]:
    """Fixture providing a context that asks for a synchronized store."""
    with MockContext(thread_safe=True) as ctx:
        yield ctx


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory so no project config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def store() -> TaskStore:
    """Fixture providing an empty store."""
    return TaskStore()


@pytest.fixture
def abc_store() -> TaskStore:
    """Fixture providing a store holding A, B and C in that order."""
    s = TaskStore()
    for description in ("A", "B", "C"):
        assert s.add(description)
    return s
