# src/task_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import OverdueNotifier


@dataclass
class AppState:
    # Settings are kept on the state so connectors do not re-read config.
    settings: object

    task_store: TaskStore
    notifier: OverdueNotifier
