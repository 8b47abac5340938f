# src/taskpal/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..core.errors import InvalidDateFormatError, MalformedRecordError
from ..core.parser import CommandType, parse_deadline, parse_event, parse_todo

# Input and storage share one format ("2 Dec 2019 1800"); display uses another.
INPUT_DATE_FORMAT = "%d %b %Y %H%M"
DISPLAY_DATE_FORMAT = "%d-%m-%Y %H:%M"
FIELD_SEP = " | "
# strptime alone would take "180" as 18:00; HHmm needs four digits.
INPUT_DATE_SHAPE = re.compile(r"\d{1,2} [A-Za-z]{3} \d{4} \d{4}")


class TaskKind(StrEnum):
    """Variant letter used both in display ([T]) and in storage lines."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_timestamp(raw: str) -> datetime:
    text = raw.strip()
    if not INPUT_DATE_SHAPE.fullmatch(text):
        raise InvalidDateFormatError(raw)
    try:
        return datetime.strptime(text, INPUT_DATE_FORMAT)
    except ValueError as e:
        raise InvalidDateFormatError(raw) from e


def format_storage_timestamp(dt: datetime) -> str:
    # Day is not zero-padded; "%-d" is not portable.
    return f"{dt.day} {dt.strftime('%b %Y %H%M')}"


def format_display_timestamp(dt: datetime) -> str:
    return dt.strftime(DISPLAY_DATE_FORMAT)


@dataclass(slots=True)
class _TaskBase:
    kind: ClassVar[TaskKind]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def mark_as_done(self) -> None:
        self.is_done = True

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}{self._display_suffix()}"

    def to_storage_string(self) -> str:
        fields = [str(self.kind), "1" if self.is_done else "0", self.description]
        fields.extend(self._storage_dates())
        return FIELD_SEP.join(fields)

    def _display_suffix(self) -> str:
        return ""

    def _storage_dates(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class ToDo(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: datetime = field(kw_only=True)

    @classmethod
    def from_fields(cls, description: str, by: str, *, is_done: bool = False) -> Deadline:
        return cls(description, by=parse_timestamp(by), is_done=is_done)

    def _display_suffix(self) -> str:
        return f" (by: {format_display_timestamp(self.by)})"

    def _storage_dates(self) -> list[str]:
        return [format_storage_timestamp(self.by)]


@dataclass(slots=True)
class Event(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: datetime = field(kw_only=True)
    end: datetime = field(kw_only=True)

    @classmethod
    def from_fields(
        cls, description: str, start: str, end: str, *, is_done: bool = False
    ) -> Event:
        return cls(description, start=parse_timestamp(start), end=parse_timestamp(end), is_done=is_done)

    def _display_suffix(self) -> str:
        return (
            f" (from: {format_display_timestamp(self.start)}"
            f" to: {format_display_timestamp(self.end)})"
        )

    def _storage_dates(self) -> list[str]:
        return [format_storage_timestamp(self.start), format_storage_timestamp(self.end)]


Task = ToDo | Deadline | Event

_FIELD_COUNTS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def task_from_command(command_type: CommandType, line: str) -> Task:
    """Build a new (not done) task from an add-type command line."""
    match command_type:
        case CommandType.TODO:
            return ToDo(parse_todo(line))
        case CommandType.DEADLINE:
            description, by = parse_deadline(line)
            return Deadline.from_fields(description, by)
        case CommandType.EVENT:
            description, start, end = parse_event(line)
            return Event.from_fields(description, start, end)
        case _:
            raise ValueError(f"not an add command: {command_type}")


def task_from_storage(line: str) -> Task:
    """
    Rebuild a task from one storage line.

    Storage is trusted for grammar (no separator checks), but the record
    shape is still verified and timestamps are parsed again.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEP)
    try:
        kind = TaskKind(parts[0].strip())
    except ValueError:
        raise MalformedRecordError(line, f"unknown task type {parts[0]!r}") from None

    if len(parts) != _FIELD_COUNTS[kind]:
        raise MalformedRecordError(line, f"expected {_FIELD_COUNTS[kind]} fields, got {len(parts)}")

    done_flag = parts[1].strip()
    if done_flag not in ("0", "1"):
        raise MalformedRecordError(line, f"bad done flag {done_flag!r}")
    is_done = done_flag == "1"

    description = parts[2]
    if not description.strip():
        raise MalformedRecordError(line, "empty description")

    match kind:
        case TaskKind.TODO:
            return ToDo(description, is_done=is_done)
        case TaskKind.DEADLINE:
            return Deadline.from_fields(description, parts[3], is_done=is_done)
        case TaskKind.EVENT:
            return Event.from_fields(description, parts[3], parts[4], is_done=is_done)
