# src/todo_sync/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandIO, render_current
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def make_confirm(read: InputFn) -> Callable[[str], bool]:
    def confirm(question: str) -> bool:
        try:
            answer = read(f"{question} [y/N] ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            return False
        return answer in ("y", "yes")

    return confirm


def input_prompt(state: AppState) -> str:
    """While editing, the prompt carries the id and the text being replaced."""
    st = state.service.state
    if st.editing_id is None:
        return "todo> "
    return f"edit #{st.editing_id} [{st.draft}]> "


def handle_line(state: AppState, line: str, io: CommandIO) -> str | None:
    """
    One REPL step: slash commands go to the registry, plain text is submitted
    (new task, or the new title of the task being edited).
    """
    try:
        reply = command_registry.handle(state, line, io)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    try:
        state.service.submit(line)
    except Exception:
        logger.exception("Submit crashed.")
        return "Internal error while saving the task."
    return render_current(state)


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started.")
    write(f"[{_ts_local()}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    io = CommandIO(emit=emit, confirm=make_confirm(read))
    write(render_current(state))

    while True:
        try:
            user_input = read(input_prompt(state)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input, io)
        if reply:
            write(reply)

    logger.info("Console connector finished.")
