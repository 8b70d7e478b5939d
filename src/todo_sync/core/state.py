# src/todo_sync/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..todos.models import Todo, TodoFilter

if TYPE_CHECKING:
    from .service import TodoService


@dataclass
class TodoListState:
    """Everything the view is computed from. Newest local creations come first."""

    todos: list[Todo] = field(default_factory=list)
    current_page: int = 1
    editing_id: int | None = None
    draft: str = ""
    filter: TodoFilter = field(default_factory=TodoFilter)

    loading: bool = False
    error: str | None = None
    error_expires_at: float | None = None

    def find(self, todo_id: int) -> Todo | None:
        for t in self.todos:
            if t.id == todo_id:
                return t
        return None


@dataclass
class AppState:
    # Settings kept on the state for easy access from commands/connectors.
    settings: object
    service: TodoService
    list_state: TodoListState
