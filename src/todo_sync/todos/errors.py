# src/todo_sync/todos/errors.py

from __future__ import annotations


class TodoApiError(RuntimeError):
    """Base error for the remote todos collection. str(err) is user-facing."""

    default_message = "Remote request failed"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.status_code = status_code


class TodoFetchError(TodoApiError):
    default_message = "Failed to fetch todos"


class TodoCreateError(TodoApiError):
    default_message = "Failed to add todo"


class TodoUpdateError(TodoApiError):
    default_message = "Failed to update todo"


class TodoDeleteError(TodoApiError):
    default_message = "Failed to delete todo"


class TodoNotFound(KeyError):
    """Raised for local lookups of an id that is not in the list."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(todo_id)
        self.todo_id = todo_id

    def __str__(self) -> str:
        return f"No task with id {self.todo_id}"
