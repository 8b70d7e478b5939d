# tests/conftest.py

from __future__ import annotations

import random
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_sync.core.service import TodoService
from todo_sync.core.state import AppState, TodoListState
from todo_sync.todos.client import TodoApiClient

from .fakes import BASE_URL, FakeClock, FakeRemote, make_items


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="todo-sync-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_file="todo_sync.log",
        api_url=BASE_URL,
        fetch_limit=100,
        connect_timeout_seconds=1.0,
        read_timeout_seconds=1.0,
        page_size=10,
        error_display_seconds=3.0,
        confirm_delete=True,
    )


@pytest.fixture()
def remote() -> FakeRemote:
    return FakeRemote(items=make_items(25))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def client(remote: FakeRemote):
    with TodoApiClient(BASE_URL, transport=remote.transport()) as c:
        yield c


@pytest.fixture()
def service(client: TodoApiClient, clock: FakeClock) -> TodoService:
    return TodoService(client, TodoListState(), clock=clock, rng=random.Random(42))


@pytest.fixture()
def state(settings: SimpleNamespace, service: TodoService) -> AppState:
    """AppState wired with the fake remote (already loaded)."""
    service.load()
    return AppState(settings=settings, service=service, list_state=service.state)
