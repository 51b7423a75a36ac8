# src/task_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

PRIORITY_HIGHEST = 1
PRIORITY_LOWEST = 3


class TaskField(StrEnum):
    """Field names accepted by TaskStore.update_task()."""

    TITLE = "title"
    DESCRIPTION = "description"
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    COMPLETED = "completed"

    @classmethod
    def from_text(cls, raw: str | None) -> TaskField | None:
        # Exact, case-sensitive match, like command words.
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


class ChangeKind(StrEnum):
    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: int  # 1 (high) .. 3 (low)
    due_date: date
    completed: bool = False


@dataclass(slots=True, frozen=True)
class TaskChange:
    """
    A "list changed" hint published by the store.

    version is a monotonic counter; it tells a waiter that *something* changed,
    not what the list looks like now (use list_tasks() for that).
    """

    kind: ChangeKind
    task_id: int
    version: int
