# src/taskpal/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import StorageError, TaskError
from .task_models import Task, task_from_storage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    # (line number, reason) for every storage line that could not be loaded
    skipped: list[tuple[int, str]] = field(default_factory=list)


class TaskStore:
    """
    Flat-file task store: one storage line per task, in list order.

    - load(): reads every line independently; malformed lines are skipped
      and reported in LoadResult.skipped
    - write_all(): rewrites the whole file (tmp file + os.replace)
    - append(): adds a single line for a freshly added task

    OSError is re-raised as StorageError so the command layer can report it.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        logger.info("TaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoadResult:
        result = LoadResult()
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return result

        try:
            raw = self._path.read_text("utf-8")
        except OSError as e:
            raise StorageError(f"Could not read tasks from {self._path}: {e}") from e

        for lineno, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                result.tasks.append(task_from_storage(line))
            except TaskError as e:
                logger.warning("Skipping %s line %d: %s", self._path, lineno, e.message)
                result.skipped.append((lineno, e.message))

        logger.info(
            "Loaded %d task(s) from %s (skipped=%d)", len(result.tasks), self._path, len(result.skipped)
        )
        return result

    def write_all(self, tasks: Iterable[Task]) -> None:
        lines = [t.to_storage_string() for t in tasks]
        text = "".join(f"{line}\n" for line in lines)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to rewrite %s", self._path)
            raise StorageError(f"Could not save tasks to {self._path}: {e}") from e
        logger.debug("Rewrote %s with %d task(s)", self._path, len(lines))

    def _missing_final_newline(self) -> bool:
        """True when the file has content whose last byte is not a newline."""
        if not self._path.exists() or self._path.stat().st_size == 0:
            return False
        with self._path.open("rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"

    def append(self, task: Task) -> None:
        line = task.to_storage_string()
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            prefix = "\n" if self._missing_final_newline() else ""
            with self._path.open("a", encoding="utf-8") as f:
                f.write(f"{prefix}{line}\n")
        except OSError as e:
            logger.exception("Failed to append to %s", self._path)
            raise StorageError(f"Could not save task to {self._path}: {e}") from e
        logger.debug("Appended to %s: %s", self._path, line)
