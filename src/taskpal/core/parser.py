# src/taskpal/core/parser.py

"""
Command grammar.

Classification looks only at the leading token of the trimmed line.
Field extraction is done per task variant and only splits text; turning
date strings into timestamps is left to the task models.
"""

from __future__ import annotations

import re
from enum import StrEnum

from .errors import (
    EmptyDateFieldError,
    EmptyDescriptionError,
    InvalidCommandFormatError,
    MissingFromSeparatorError,
    MissingSeparatorError,
    MissingToSeparatorError,
)

# A separator is " /by" etc. followed by a space or the end of the line, so
# "deadline x /by" (trailing blank trimmed away) still reports an empty date.
BY_SEP = re.compile(r" /by(?= |$)")
FROM_SEP = re.compile(r" /from(?= |$)")
TO_SEP = re.compile(r" /to(?= |$)")
STORAGE_DELIMITER = "|"


class CommandType(StrEnum):
    LIST = "list"
    MARK = "mark"
    DELETE = "delete"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    UNKNOWN = "unknown"


_KEYWORDS: dict[str, CommandType] = {
    "mark": CommandType.MARK,
    "delete": CommandType.DELETE,
    "todo": CommandType.TODO,
    "deadline": CommandType.DEADLINE,
    "event": CommandType.EVENT,
}


def classify(line: str) -> CommandType:
    text = line.strip()
    if text.lower() == "list":
        return CommandType.LIST
    parts = text.split(maxsplit=1)
    if not parts:
        return CommandType.UNKNOWN
    return _KEYWORDS.get(parts[0].lower(), CommandType.UNKNOWN)


def _check_description(description: str) -> str:
    # "|" separates fields in the storage file.
    if STORAGE_DELIMITER in description:
        raise InvalidCommandFormatError(
            f"'{STORAGE_DELIMITER}' is not allowed in a description."
        )
    return description


def _body(line: str, keyword: str) -> str:
    """Text after the leading keyword, with the separating space kept."""
    return line.strip()[len(keyword):]


def parse_todo(line: str) -> str:
    description = _body(line, "todo").strip()
    if not description:
        raise EmptyDescriptionError("The description of a todo cannot be empty.")
    return _check_description(description)


def parse_deadline(line: str) -> tuple[str, str]:
    """Split "deadline <desc> /by <date>" into (desc, raw date)."""
    body = _body(line, "deadline")
    if not body.strip():
        raise EmptyDescriptionError("The description of a deadline cannot be empty.")

    m = BY_SEP.search(body)
    if m is None:
        raise MissingSeparatorError("The deadline command must contain a /by.")

    description = body[: m.start()].strip()
    by = body[m.end():].strip()
    if not description:
        raise EmptyDescriptionError("The description of a deadline cannot be empty.")
    if not by:
        raise EmptyDateFieldError("The deadline command must contain a date after /by.")
    return _check_description(description), by


def parse_event(line: str) -> tuple[str, str, str]:
    """Split "event <desc> /from <date> /to <date>" into (desc, start, end)."""
    body = _body(line, "event")
    if not body.strip():
        raise EmptyDescriptionError("The description of an event cannot be empty.")

    m_from = FROM_SEP.search(body)
    if m_from is None:
        raise MissingFromSeparatorError("The event command must contain a /from.")
    m_to = TO_SEP.search(body, m_from.end())
    if m_to is None:
        raise MissingToSeparatorError("The event command must contain a /to after /from.")

    description = body[: m_from.start()].strip()
    start = body[m_from.end(): m_to.start()].strip()
    end = body[m_to.end():].strip()

    if not description:
        raise EmptyDescriptionError("The description of an event cannot be empty.")
    if not start:
        raise EmptyDateFieldError("The event command must contain a date after /from.")
    if not end:
        raise EmptyDateFieldError("The event command must contain a date after /to.")
    return _check_description(description), start, end


def parse_index(line: str) -> int:
    """Return the 0-based index named by "mark <n>" / "delete <n>"."""
    parts = line.split()
    if len(parts) < 2:
        raise InvalidCommandFormatError("Please give a task number, e.g. 'mark 2'.")
    try:
        number = int(parts[1])
    except ValueError:
        raise InvalidCommandFormatError(f"'{parts[1]}' is not a task number.") from None
    return number - 1
