# src/todo_sync/todos/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import (
    TodoApiError,
    TodoCreateError,
    TodoDeleteError,
    TodoFetchError,
    TodoUpdateError,
)

logger = logging.getLogger(__name__)


def _make_timeout(connect_s: float, read_s: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)


class TodoApiClient:
    """
    Thin HTTP client for a JSONPlaceholder-style `/todos` collection.

    Every failure (non-2xx status, transport error, bad JSON) is raised as the
    operation-specific TodoApiError subclass so callers can show str(err).
    """

    def __init__(
        self,
        base_url: str,
        *,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            timeout=_make_timeout(connect_timeout, read_timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings, *, transport: httpx.BaseTransport | None = None) -> TodoApiClient:
        return cls(
            settings.api_url,
            connect_timeout=float(settings.connect_timeout_seconds),
            read_timeout=float(settings.read_timeout_seconds),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> TodoApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- low-level helpers ----

    def _item_url(self, todo_id: int) -> str:
        return f"{self._base_url}/{int(todo_id)}"

    def _request(
        self,
        method: str,
        url: str,
        error_cls: type[TodoApiError],
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            resp = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.info("%s %s failed: %s", method, url, e.__class__.__name__)
            raise error_cls() from e

        if not resp.is_success:
            logger.info("%s %s -> HTTP %s", method, url, resp.status_code)
            raise error_cls(status_code=resp.status_code)

        logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
        return resp

    @staticmethod
    def _json(resp: httpx.Response, error_cls: type[TodoApiError]) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise error_cls(status_code=resp.status_code) from e

    # ---- public API ----

    def fetch_todos(self, *, limit: int = 100) -> list[dict[str, Any]]:
        resp = self._request("GET", self._base_url, TodoFetchError, params={"_limit": int(limit)})
        data = self._json(resp, TodoFetchError)
        if not isinstance(data, list):
            raise TodoFetchError(status_code=resp.status_code)
        return [item for item in data if isinstance(item, dict) and "id" in item]

    def create_todo(self, title: str) -> dict[str, Any]:
        resp = self._request(
            "POST",
            self._base_url,
            TodoCreateError,
            json={"title": title, "completed": False},
        )
        data = self._json(resp, TodoCreateError)
        if not isinstance(data, dict) or "id" not in data:
            raise TodoCreateError(status_code=resp.status_code)
        return data

    def update_todo(self, todo_id: int, title: str) -> dict[str, Any]:
        resp = self._request(
            "PUT",
            self._item_url(todo_id),
            TodoUpdateError,
            json={"title": title, "completed": False},
        )
        data = self._json(resp, TodoUpdateError)
        if not isinstance(data, dict):
            raise TodoUpdateError(status_code=resp.status_code)
        return data

    def delete_todo(self, todo_id: int) -> None:
        self._request("DELETE", self._item_url(todo_id), TodoDeleteError)
