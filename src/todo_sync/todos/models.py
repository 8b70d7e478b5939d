# src/todo_sync/todos/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


@dataclass(slots=True)
class Todo:
    """
    One item of the remote collection as held locally.

    Notes:
    - created_at is NOT part of the remote payload; it is assigned locally
      when the item enters the list (synthetic for fetched items, "now" for
      items created in this session).
    """

    id: int
    title: str
    completed: bool
    created_at: datetime
    user_id: int | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any], *, created_at: datetime) -> Todo:
        raw_user = payload.get("userId")
        return cls(
            id=int(payload["id"]),
            title=str(payload.get("title") or ""),
            completed=bool(payload.get("completed", False)),
            created_at=created_at,
            user_id=int(raw_user) if raw_user is not None else None,
        )


@dataclass(frozen=True, slots=True)
class TodoFilter:
    search: str = ""
    from_date: date | None = None
    to_date: date | None = None

    @property
    def is_empty(self) -> bool:
        return not self.search and self.from_date is None and self.to_date is None


@dataclass(slots=True)
class PageView:
    page: int
    page_count: int
    total: int
    items: list[Todo] = field(default_factory=list)
