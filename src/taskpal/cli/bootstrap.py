# src/taskpal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once (or takes them injected),
- wires the file-backed TaskStore into AppState,
- loads persisted tasks, skipping lines that cannot be read.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    notices: list[str] = []

    try:
        loaded = store.load()
    except StorageError as e:
        # Start with an empty list rather than refusing to run.
        logger.error("Startup load failed: %s", e.message)
        notices.append(f"{e.message} Starting with an empty list.")
        return AppState(settings=settings, task_store=store, startup_notices=notices)

    if loaded.skipped:
        lines = ", ".join(str(lineno) for lineno, _ in loaded.skipped)
        notices.append(
            f"Skipped {len(loaded.skipped)} unreadable line(s) in {store.path} (line {lines})."
        )

    return AppState(
        settings=settings,
        task_store=store,
        tasks=TaskList(loaded.tasks),
        startup_notices=notices,
    )
