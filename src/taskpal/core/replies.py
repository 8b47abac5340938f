# src/taskpal/core/replies.py

"""Pre-formatted reply text handed to the console connector for printing."""

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

INDENT = "  "
ERROR_PREFIX = "OOPS!!! "
UNKNOWN_COMMAND = "I'm sorry, but I don't know what that means :-("


def welcome(app_name: str) -> str:
    return f"Hello! I'm {app_name}.\nWhat can I do for you?"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"


def _count(n: int) -> str:
    return f"Now you have {n} task{'s' if n != 1 else ''} in the list."


def task_list(tasks: Sequence[Task]) -> str:
    lines = ["Here are the tasks in your list:"]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}.{task.render()}")
    return "\n".join(lines)


def added(task: Task, total: int) -> str:
    return f"Got it. I've added this task:\n{INDENT}{task.render()}\n{_count(total)}"


def marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n{INDENT}{task.render()}"


def deleted(task: Task, total: int) -> str:
    return f"Noted. I've removed this task:\n{INDENT}{task.render()}\n{_count(total)}"


def error(message: str) -> str:
    return f"{ERROR_PREFIX}{message}"
