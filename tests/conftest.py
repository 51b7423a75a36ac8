# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from task_keeper.cli.bootstrap import create_initial_state
from task_keeper.core.state import AppState
from task_keeper.tasks.task_store import TaskStore

from .fakes import FakeNotifier


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the monitor runner.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-keeper-test",
        log_level="DEBUG",
        log_file=None,
        monitor_enabled=True,
        monitor_interval_seconds=0.01,
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, notifier: FakeNotifier) -> AppState:
    """AppState wired through the real composition root, with a fake notifier."""
    return create_initial_state(settings=settings, notifier=notifier)


@pytest.fixture()
def store(state: AppState) -> TaskStore:
    return state.task_store
