# tests/test_view.py

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from todo_sync.todos.models import Todo, TodoFilter
from todo_sync.todos.view import build_page, filter_todos, page_count, paginate

UTC = timezone.utc


def _todo(i: int, title: str, created: datetime) -> Todo:
    return Todo(id=i, title=title, completed=False, created_at=created)


def _many(n: int) -> list[Todo]:
    base = datetime(2024, 5, 1, tzinfo=UTC)
    return [_todo(i, f"item {i}", base) for i in range(1, n + 1)]


def test_search_is_case_insensitive_substring_and_keeps_order() -> None:
    now = datetime(2024, 5, 1, tzinfo=UTC)
    todos = [
        _todo(1, "Buy MILK", now),
        _todo(2, "walk dog", now),
        _todo(3, "milkshake", now),
    ]
    out = filter_todos(todos, TodoFilter(search="Milk"))
    assert [t.id for t in out] == [1, 3]


def test_empty_filter_passes_everything() -> None:
    todos = _many(3)
    assert filter_todos(todos, TodoFilter()) == todos


def test_date_bounds_are_inclusive_midnight_utc() -> None:
    todos = [
        _todo(1, "before", datetime(2024, 4, 30, 23, 59, tzinfo=UTC)),
        _todo(2, "at from", datetime(2024, 5, 1, 0, 0, tzinfo=UTC)),
        _todo(3, "inside", datetime(2024, 5, 5, 12, 0, tzinfo=UTC)),
        _todo(4, "at to", datetime(2024, 5, 10, 0, 0, tzinfo=UTC)),
        _todo(5, "later on to day", datetime(2024, 5, 10, 8, 0, tzinfo=UTC)),
    ]
    flt = TodoFilter(from_date=date(2024, 5, 1), to_date=date(2024, 5, 10))
    assert [t.id for t in filter_todos(todos, flt)] == [2, 3, 4]


def test_open_ended_ranges() -> None:
    base = datetime(2024, 5, 1, tzinfo=UTC)
    todos = [_todo(i, "x", base + timedelta(days=i)) for i in range(5)]

    only_from = filter_todos(todos, TodoFilter(from_date=date(2024, 5, 3)))
    assert [t.id for t in only_from] == [2, 3, 4]

    only_to = filter_todos(todos, TodoFilter(to_date=date(2024, 5, 2)))
    assert [t.id for t in only_to] == [0, 1]


def test_text_and_date_filters_combine() -> None:
    todos = [
        _todo(1, "report", datetime(2024, 1, 1, tzinfo=UTC)),
        _todo(2, "report", datetime(2024, 6, 1, tzinfo=UTC)),
        _todo(3, "other", datetime(2024, 6, 1, tzinfo=UTC)),
    ]
    flt = TodoFilter(search="rep", from_date=date(2024, 3, 1))
    assert [t.id for t in filter_todos(todos, flt)] == [2]


def test_page_count() -> None:
    assert page_count(0, 10) == 0
    assert page_count(1, 10) == 1
    assert page_count(10, 10) == 1
    assert page_count(11, 10) == 2
    assert page_count(100, 10) == 10


def test_paginate_slices_and_does_not_clamp() -> None:
    todos = _many(25)
    assert [t.id for t in paginate(todos, 1, 10)] == list(range(1, 11))
    assert [t.id for t in paginate(todos, 3, 10)] == [21, 22, 23, 24, 25]
    assert paginate(todos, 4, 10) == []


def test_build_page_counts_filtered_items() -> None:
    todos = _many(25)
    todos[0].title = "special"
    todos[24].title = "special too"

    view = build_page(todos, TodoFilter(search="special"), 1, 10)
    assert view.total == 2
    assert view.page_count == 1
    assert [t.id for t in view.items] == [1, 25]

    view_all = build_page(todos, TodoFilter(), 2, 10)
    assert view_all.total == 25
    assert view_all.page_count == 3
    assert view_all.page == 2
    assert len(view_all.items) == 10
