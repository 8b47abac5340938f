# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core import replies
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"
DIVIDER = "_" * 60


def _print_block(text: str) -> None:
    print(DIVIDER)
    print(text)
    print(DIVIDER)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = _print_block,
) -> None:
    """
    Read one command per line until "bye" or end of input.

    Each command is fully handled (parsed, applied, persisted) before the
    next line is read. Unexpected exceptions are logged and reported, and
    the loop keeps going.
    """
    app_name = str(getattr(state.settings, "app_name", "taskpal"))
    logger.info("Console connector started (%d task(s) loaded).", state.tasks.size())

    write(replies.welcome(app_name))
    for notice in state.startup_notices:
        write(replies.error(notice))

    while True:
        try:
            user_input = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input == EXIT_COMMAND:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception as e:
            logger.exception("Command handler crashed.")
            reply = replies.error(f"An unexpected error occurred: {e}")

        write(reply)

    write(replies.farewell())
    logger.info("Console connector finished.")
