# src/todo_sync/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import cast

from ..core.ports import Confirm
from ..core.service import DELETE_PROMPT
from ..core.state import AppState
from ..render import render_page
from ..todos.errors import TodoNotFound

CommandEmitter = Callable[[str], None]


@dataclass(slots=True)
class CommandIO:
    """Connector-side hooks a command may use while it runs."""

    emit: CommandEmitter | None = None
    confirm: Confirm | None = None


CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandIO], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, io: CommandIO | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, io or CommandIO())

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  (plain text adds a task, or saves the task being edited)")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_date(raw: str) -> date | None:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def render_current(state: AppState) -> str:
    svc = state.service
    out = render_page(svc.current_view(), editing_id=svc.state.editing_id)
    err = svc.visible_error()
    if err:
        out = f"{out}\n[ERROR] {err}"
    return out


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_current(state)


def cmd_reload(state: AppState, args: list[str], io: CommandIO) -> str:
    if io.emit is not None:
        io.emit(f"Fetching tasks from {getattr(state.settings, 'api_url', 'the server')}...")
    state.service.load()
    return render_current(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <text>  -> create a task (or save the edited one when editing)
    """
    text = " ".join(args)
    if not text.strip():
        return "Usage: /add <task text>"
    state.service.submit(text)
    return render_current(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id>   -> start editing; next plain text (or /add) saves the new title
    """
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /edit <id>"
    try:
        todo = state.service.begin_edit(todo_id)
    except TodoNotFound as e:
        logger.debug("Edit requested for unknown id=%s", todo_id)
        return str(e)
    return f"Editing #{todo.id}: {todo.title}\nType the new title (or /cancel)."


def cmd_cancel(state: AppState, args: list[str]) -> str:
    if state.service.state.editing_id is None:
        return "Nothing is being edited."
    state.service.cancel_edit()
    return "Edit cancelled."


def cmd_delete(state: AppState, args: list[str], io: CommandIO) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /delete <id>"

    if bool(getattr(state.settings, "confirm_delete", True)):
        if io.confirm is None:
            return "Delete needs confirmation, which this connector cannot ask for."
        if not io.confirm(DELETE_PROMPT):
            return "Delete cancelled."

    state.service.delete(todo_id)
    return render_current(state)


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search         -> clear the text filter
    /search <text>  -> case-insensitive substring match on the title
    """
    state.service.set_search(" ".join(args))
    return render_current(state)


def _date_command(args: list[str]) -> tuple[bool, date | None]:
    if not args:
        return True, None
    if len(args) != 1:
        return False, None
    parsed = _parse_date(args[0])
    return parsed is not None, parsed


def cmd_from(state: AppState, args: list[str]) -> str:
    ok, value = _date_command(args)
    if not ok:
        return "Usage: /from [YYYY-MM-DD]  (no date clears the bound)"
    state.service.set_from_date(value)
    return render_current(state)


def cmd_to(state: AppState, args: list[str]) -> str:
    ok, value = _date_command(args)
    if not ok:
        return "Usage: /to [YYYY-MM-DD]  (no date clears the bound)"
    state.service.set_to_date(value)
    return render_current(state)


def cmd_page(state: AppState, args: list[str]) -> str:
    page = _parse_id(args)
    if page is None or page < 1:
        return "Usage: /page <n>  (n >= 1)"
    state.service.go_to_page(page)
    return render_current(state)


def cmd_next(state: AppState, args: list[str]) -> str:
    svc = state.service
    view = svc.current_view()
    if svc.state.current_page >= view.page_count:
        return "Already on the last page."
    svc.go_to_page(svc.state.current_page + 1)
    return render_current(state)


def cmd_prev(state: AppState, args: list[str]) -> str:
    svc = state.service
    if svc.state.current_page <= 1:
        return "Already on the first page."
    svc.go_to_page(svc.state.current_page - 1)
    return render_current(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    st = state.service.state
    flt = st.filter
    view = state.service.current_view()
    editing = f"#{st.editing_id}" if st.editing_id is not None else "-"
    return (
        "Status:\n"
        f"  Remote: {getattr(state.settings, 'api_url', '?')}\n"
        f"  Tasks loaded: {len(st.todos)} (matching filter: {view.total})\n"
        f"  Page: {st.current_page} of {view.page_count}\n"
        f"  Search: {flt.search or '-'}\n"
        f"  From: {flt.from_date or '-'}  To: {flt.to_date or '-'}\n"
        f"  Editing: {editing}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current page.", aliases=["ls"])
registry.register("reload", cmd_reload, help_text="Fetch the task list from the server again.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("edit", cmd_edit, help_text="Edit a task title: /edit <id>.")
registry.register("cancel", cmd_cancel, help_text="Stop editing.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("search", cmd_search, help_text="Filter by title: /search [text].")
registry.register("from", cmd_from, help_text="Created on/after: /from [YYYY-MM-DD].")
registry.register("to", cmd_to, help_text="Created on/before: /to [YYYY-MM-DD].")
registry.register("page", cmd_page, help_text="Go to page: /page <n>.")
registry.register("next", cmd_next, help_text="Next page.")
registry.register("prev", cmd_prev, help_text="Previous page.")
registry.register("status", cmd_status, help_text="Show filter, paging and edit state.")
