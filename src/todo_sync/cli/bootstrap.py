# src/todo_sync/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the HTTP client and the service into AppState.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..core.ports import LoadingListener
from ..core.service import TodoService
from ..core.state import AppState, TodoListState
from ..todos.client import TodoApiClient

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    transport: httpx.BaseTransport | None = None,
    on_loading: LoadingListener | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the HTTP transport) injectable makes the app easy to
    test. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    client = TodoApiClient.from_settings(settings, transport=transport)
    list_state = TodoListState()
    service = TodoService(
        client,
        list_state,
        page_size=settings.page_size,
        fetch_limit=settings.fetch_limit,
        error_display_seconds=settings.error_display_seconds,
        on_loading=on_loading,
    )
    logger.debug("State wired api_url=%s page_size=%s", client.base_url, settings.page_size)
    return AppState(settings=settings, service=service, list_state=list_state)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    close = getattr(state.service.repo, "close", None)
    if not callable(close):
        return
    try:
        close()
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)
