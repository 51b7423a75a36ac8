# src/task_keeper/errors.py

"""
Error taxonomy.

- ResourceAllocationError: the task store could not be created (fatal).
- ParseError: user-supplied text could not be turned into a field value
  (recovered locally by re-prompting or rejecting a single update).

"Not found" is not an exception: store operations return False instead.
"""

from __future__ import annotations


class TaskKeeperError(Exception):
    """Base class for all task-keeper errors."""


class ResourceAllocationError(TaskKeeperError, RuntimeError):
    pass


class ParseError(TaskKeeperError, ValueError):
    def __init__(self, message: str, *, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw
