# tests/test_parser.py

from __future__ import annotations

import pytest

from taskpal.core.errors import (
    EmptyDateFieldError,
    EmptyDescriptionError,
    InvalidCommandFormatError,
    MissingFromSeparatorError,
    MissingSeparatorError,
    MissingToSeparatorError,
)
from taskpal.core.parser import (
    CommandType,
    classify,
    parse_deadline,
    parse_event,
    parse_index,
    parse_todo,
)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("list", CommandType.LIST),
        ("  list  ", CommandType.LIST),
        ("mark 1", CommandType.MARK),
        ("delete 3", CommandType.DELETE),
        ("todo read", CommandType.TODO),
        ("todo", CommandType.TODO),
        ("deadline x /by 2 Dec 2019 1800", CommandType.DEADLINE),
        ("event x /from a /to b", CommandType.EVENT),
        ("Todo read", CommandType.TODO),
        ("list all", CommandType.UNKNOWN),
        ("blah", CommandType.UNKNOWN),
        ("", CommandType.UNKNOWN),
    ],
)
def test_classify(line: str, expected: CommandType) -> None:
    assert classify(line) is expected


def test_parse_todo() -> None:
    assert parse_todo("todo read book") == "read book"
    with pytest.raises(EmptyDescriptionError):
        parse_todo("todo")
    with pytest.raises(EmptyDescriptionError):
        parse_todo("todo    ")


def test_parse_deadline_splits_on_by() -> None:
    assert parse_deadline("deadline homework /by 2 Dec 2019 1800") == ("homework", "2 Dec 2019 1800")


def test_parse_deadline_errors() -> None:
    with pytest.raises(EmptyDescriptionError):
        parse_deadline("deadline /by 2 Dec 2019 1800")
    with pytest.raises(EmptyDescriptionError):
        parse_deadline("deadline")
    with pytest.raises(MissingSeparatorError):
        parse_deadline("deadline homework 2 Dec 2019 1800")
    with pytest.raises(EmptyDateFieldError):
        parse_deadline("deadline homework /by")
    with pytest.raises(EmptyDateFieldError):
        parse_deadline("deadline homework /by   ")


def test_parse_deadline_ignores_by_inside_words() -> None:
    with pytest.raises(MissingSeparatorError):
        parse_deadline("deadline read /bytes docs")


def test_parse_event_splits_in_order() -> None:
    assert parse_event("event meeting /from 1 Jan 2020 0900 /to 1 Jan 2020 1000") == (
        "meeting",
        "1 Jan 2020 0900",
        "1 Jan 2020 1000",
    )


def test_parse_event_errors() -> None:
    with pytest.raises(EmptyDescriptionError):
        parse_event("event")
    with pytest.raises(MissingFromSeparatorError):
        parse_event("event meeting 1 Jan 2020 0900 /to 1 Jan 2020 1000")
    with pytest.raises(MissingToSeparatorError):
        parse_event("event meeting /from 1 Jan 2020 0900")
    with pytest.raises(MissingToSeparatorError):
        parse_event("event meeting /to 1 Jan 2020 1000 /from 1 Jan 2020 0900")
    with pytest.raises(EmptyDescriptionError):
        parse_event("event /from 1 Jan 2020 0900 /to 1 Jan 2020 1000")
    with pytest.raises(EmptyDateFieldError):
        parse_event("event meeting /from /to 1 Jan 2020 1000")
    with pytest.raises(EmptyDateFieldError):
        parse_event("event meeting /from 1 Jan 2020 0900 /to")


def test_missing_from_and_to_are_separator_errors() -> None:
    assert issubclass(MissingFromSeparatorError, MissingSeparatorError)
    assert issubclass(MissingToSeparatorError, MissingSeparatorError)


def test_parse_index_is_zero_based() -> None:
    assert parse_index("mark 1") == 0
    assert parse_index("delete 12") == 11
    assert parse_index("mark 0") == -1


@pytest.mark.parametrize("line", ["mark", "mark two", "delete 1.5", "delete "])
def test_parse_index_rejects_bad_numbers(line: str) -> None:
    with pytest.raises(InvalidCommandFormatError):
        parse_index(line)


@pytest.mark.parametrize(
    "line",
    [
        "todo read A | B",
        "todo a|b",
        "deadline pay | rent /by 2 Dec 2019 1800",
        "event sync | standup /from 1 Jan 2020 0900 /to 1 Jan 2020 1000",
    ],
)
def test_storage_delimiter_rejected_in_description(line: str) -> None:
    parse = {"todo": parse_todo, "deadline": parse_deadline, "event": parse_event}[line.split()[0]]
    with pytest.raises(InvalidCommandFormatError):
        parse(line)
