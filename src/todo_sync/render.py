# src/todo_sync/render.py

from __future__ import annotations

import locale
import logging
from datetime import datetime

from .todos.models import PageView, Todo

logger = logging.getLogger(__name__)

EMPTY_TEXT = "No tasks found"
EDITING_MARK = "  <- editing"


def format_created(dt: datetime) -> str:
    """
    Creation date in the local timezone.

    %x follows LC_TIME, which cli.main sets from the environment at startup;
    without that call it is the C locale's MM/DD/YY.
    """
    return dt.astimezone().strftime("%x")


def render_todo(todo: Todo, *, editing: bool = False) -> str:
    row = f"[{todo.id}] {todo.title}  {format_created(todo.created_at)}"
    return row + EDITING_MARK if editing else row


def render_pagination(view: PageView) -> str:
    parts = []
    for i in range(1, view.page_count + 1):
        parts.append(f"[{i}]" if i == view.page else str(i))
    return " ".join(parts)


def render_page(view: PageView, *, editing_id: int | None = None) -> str:
    if not view.items:
        lines = [EMPTY_TEXT]
    else:
        lines = [render_todo(t, editing=t.id == editing_id) for t in view.items]

    bar = render_pagination(view)
    if bar:
        lines.append(f"Pages: {bar}")
    return "\n".join(lines)


def use_system_locale() -> bool:
    """Adopt the user's LC_TIME so format_created prints local date order."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.debug("System locale is not available; dates stay in the C locale.", exc_info=True)
        return False
    return True
