# src/todo_sync/todos/view.py

"""
Pure list maths for the rendered view: text/date filtering and pagination.

Date bounds are calendar days taken as midnight UTC, both inclusive. A
`to_date` therefore only admits items created at or before 00:00 UTC of
that day.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, datetime, time, timezone

from .models import PageView, Todo, TodoFilter

PAGE_SIZE = 10


def day_start_utc(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=timezone.utc)


def matches(todo: Todo, flt: TodoFilter) -> bool:
    if flt.search and flt.search.lower() not in todo.title.lower():
        return False
    if flt.from_date is not None and todo.created_at < day_start_utc(flt.from_date):
        return False
    if flt.to_date is not None and todo.created_at > day_start_utc(flt.to_date):
        return False
    return True


def filter_todos(todos: Iterable[Todo], flt: TodoFilter) -> list[Todo]:
    return [t for t in todos if matches(t, flt)]


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def paginate(items: list[Todo], page: int, page_size: int = PAGE_SIZE) -> list[Todo]:
    """Slice one page. Pages past the end come back empty; nothing is clamped."""
    start = max(0, (page - 1) * page_size)
    return items[start : start + page_size]


def build_page(
    todos: Iterable[Todo],
    flt: TodoFilter,
    page: int,
    page_size: int = PAGE_SIZE,
) -> PageView:
    filtered = filter_todos(todos, flt)
    return PageView(
        page=page,
        page_count=page_count(len(filtered), page_size),
        total=len(filtered),
        items=paginate(filtered, page, page_size),
    )
