# src/taskpal/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore, so tests can
swap in an in-memory repo that records which write path was taken.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def write_all(self, tasks: Iterable[Task]) -> None: ...
    def append(self, task: Task) -> None: ...
