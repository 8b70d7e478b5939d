# src/todo_sync/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations, so the
HTTP client and the console prompts can be swapped for fakes in tests.
"""

from typing import Any, Callable, Protocol

Confirm = Callable[[str], bool]
# Asks the user a yes/no question; True means "go ahead".

LoadingListener = Callable[[bool], None]


class TodoRepo(Protocol):
    """Remote todos collection (see todos.client.TodoApiClient)."""

    def fetch_todos(self, *, limit: int = 100) -> list[dict[str, Any]]: ...
    def create_todo(self, title: str) -> dict[str, Any]: ...
    def update_todo(self, todo_id: int, title: str) -> dict[str, Any]: ...
    def delete_todo(self, todo_id: int) -> None: ...
