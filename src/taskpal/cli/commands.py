# src/taskpal/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import replies
from ..core.errors import TaskError, UnknownCommandError
from ..core.parser import CommandType, classify, parse_index
from ..core.state import AppState
from ..tasks.task_models import task_from_command

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps each CommandType to a handler; used by the console connector."""

    def __init__(self) -> None:
        self._handlers: dict[CommandType, CommandHandler] = {}

    def register(self, command_type: CommandType, handler: CommandHandler) -> None:
        self._handlers[command_type] = handler

    def handle(self, state: AppState, line: str) -> str:
        """
        Classify and run one input line.
        Returns the reply text; TaskError never escapes, it becomes an error reply.
        """
        command_type = classify(line)
        handler = self._handlers.get(command_type)
        try:
            if handler is None:
                raise UnknownCommandError(replies.UNKNOWN_COMMAND)
            return handler(state, line)
        except TaskError as e:
            logger.debug("Command %s rejected: %s", command_type, e.message)
            return replies.error(e.message)


registry = CommandRegistry()


def cmd_list(state: AppState, line: str) -> str:
    return replies.task_list(state.tasks.all_tasks())


def cmd_mark(state: AppState, line: str) -> str:
    task = state.tasks.get(parse_index(line))
    task.mark_as_done()
    # Already-done tasks are rewritten too.
    state.task_store.write_all(state.tasks)
    return replies.marked(task)


def cmd_delete(state: AppState, line: str) -> str:
    task = state.tasks.remove(parse_index(line))
    state.task_store.write_all(state.tasks)
    return replies.deleted(task, state.tasks.size())


def cmd_add(state: AppState, line: str) -> str:
    task = task_from_command(classify(line), line)
    state.tasks.add(task)
    # Only one new record exists, so append instead of rewriting the file.
    state.task_store.append(task)
    logger.info("Added task #%d: %s", state.tasks.size(), task.to_storage_string())
    return replies.added(task, state.tasks.size())


registry.register(CommandType.LIST, cmd_list)
registry.register(CommandType.MARK, cmd_mark)
registry.register(CommandType.DELETE, cmd_delete)
registry.register(CommandType.TODO, cmd_add)
registry.register(CommandType.DEADLINE, cmd_add)
registry.register(CommandType.EVENT, cmd_add)
