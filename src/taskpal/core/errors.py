# src/taskpal/core/errors.py

"""
User-facing error taxonomy.

Every error here is recoverable: the command registry catches TaskError,
prints its message and the session continues.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for errors reported back to the user verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyDescriptionError(TaskError):
    pass


class MissingSeparatorError(TaskError):
    pass


class MissingFromSeparatorError(MissingSeparatorError):
    pass


class MissingToSeparatorError(MissingSeparatorError):
    pass


class EmptyDateFieldError(TaskError):
    pass


class InvalidDateFormatError(TaskError):
    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Cannot read the date '{raw}'. Use the format: d MMM yyyy HHmm (e.g. 2 Dec 2019 1800)."
        )
        self.raw = raw


class InvalidCommandFormatError(TaskError):
    pass


class IndexOutOfRangeError(TaskError):
    def __init__(self, index: int, size: int) -> None:
        # index is 0-based internally; users count from 1
        super().__init__(f"There is no task #{index + 1}. The list has {size} task(s).")
        self.index = index
        self.size = size


class UnknownCommandError(TaskError):
    pass


class MalformedRecordError(TaskError):
    """A storage line that cannot be turned back into a task."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Malformed storage line ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class StorageError(TaskError):
    """Wraps OSError raised while reading or writing the task file."""
