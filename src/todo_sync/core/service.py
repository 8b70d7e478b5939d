# src/todo_sync/core/service.py

"""
Reconciliation between the remote todos collection and the local view.

The remote side is treated as write-through: every mutation is sent first
and the local list is patched only after the server accepted it. Nothing is
re-fetched after a mutation, so the local list may drift from what the
server actually stores (JSONPlaceholder fakes all writes).
"""

from __future__ import annotations

import contextlib
import logging
import random
import time
from collections.abc import Callable, Iterator
from datetime import date, datetime, timedelta, timezone

from ..todos.errors import TodoApiError, TodoNotFound
from ..todos.models import PageView, Todo, TodoFilter
from ..todos.view import PAGE_SIZE, build_page
from .ports import Confirm, LoadingListener, TodoRepo
from .state import TodoListState

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this task?"

# Fetched items carry no creation date; they get one up to ~115 days in the past.
MAX_SYNTHETIC_AGE_MS = 10_000_000_000


class TodoService:
    def __init__(
        self,
        repo: TodoRepo,
        state: TodoListState | None = None,
        *,
        page_size: int = PAGE_SIZE,
        fetch_limit: int = 100,
        error_display_seconds: float = 3.0,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
        on_loading: LoadingListener | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.repo = repo
        self.state = state if state is not None else TodoListState()
        self.page_size = page_size
        self.fetch_limit = fetch_limit
        self.error_display_seconds = error_display_seconds
        self._clock = clock
        self._rng = rng or random.Random()
        self.on_loading = on_loading

    # ---- helpers ----

    def _now(self) -> datetime:
        return datetime.fromtimestamp(self._clock(), tz=timezone.utc)

    def _synthetic_created_at(self, now: datetime) -> datetime:
        return now - timedelta(milliseconds=self._rng.randrange(MAX_SYNTHETIC_AGE_MS))

    def _set_loading(self, value: bool) -> None:
        self.state.loading = value
        if self.on_loading is not None:
            try:
                self.on_loading(value)
            except Exception:
                logger.debug("on_loading listener failed.", exc_info=True)

    @contextlib.contextmanager
    def _busy(self) -> Iterator[None]:
        self._set_loading(True)
        try:
            yield
        finally:
            self._set_loading(False)

    def show_error(self, message: str) -> None:
        self.state.error = message
        self.state.error_expires_at = self._clock() + self.error_display_seconds

    def visible_error(self) -> str | None:
        """The last error, until its display window has passed."""
        st = self.state
        if st.error is None:
            return None
        if st.error_expires_at is not None and self._clock() >= st.error_expires_at:
            st.error = None
            st.error_expires_at = None
            return None
        return st.error

    # ---- remote operations ----

    def load(self) -> bool:
        """Replace the local list with the remote one. Returns False on failure."""
        with self._busy():
            try:
                raw = self.repo.fetch_todos(limit=self.fetch_limit)
            except TodoApiError as e:
                logger.warning("Fetch failed: %s", e)
                self.show_error(str(e))
                return False

        now = self._now()
        todos: list[Todo] = []
        for item in raw:
            try:
                todos.append(Todo.from_api(item, created_at=self._synthetic_created_at(now)))
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping malformed todo payload: %r", item)
        self.state.todos = todos
        logger.info("Loaded %d todos", len(todos))
        return True

    def submit(self, text: str) -> bool:
        """
        Create a task, or save the title of the task being edited.

        Blank input is ignored. On failure the error is shown and the edit
        session (if any) is kept so the user can retry.
        """
        title = (text or "").strip()
        if not title:
            return False

        st = self.state
        if st.editing_id is not None:
            return self._save_edit(st.editing_id, title)
        return self._create(title)

    def _create(self, title: str) -> bool:
        with self._busy():
            try:
                payload = self.repo.create_todo(title)
            except TodoApiError as e:
                logger.warning("Create failed: %s", e)
                self.show_error(str(e))
                return False

        try:
            todo = Todo.from_api(payload, created_at=self._now())
        except (KeyError, TypeError, ValueError):
            logger.warning("Create returned a malformed payload: %r", payload)
            self.show_error("Failed to add todo")
            return False

        self.state.todos.insert(0, todo)
        self.state.current_page = 1
        logger.info("Created todo id=%s", todo.id)
        return True

    def _save_edit(self, todo_id: int, title: str) -> bool:
        st = self.state
        with self._busy():
            try:
                payload = self.repo.update_todo(todo_id, title)
            except TodoApiError as e:
                logger.warning("Update failed id=%s: %s", todo_id, e)
                self.show_error(str(e))
                st.draft = title
                return False

        todo = st.find(todo_id)
        if todo is None:
            logger.warning("Edited todo id=%s is no longer in the list", todo_id)
        else:
            todo.title = str(payload.get("title") or title)
            logger.info("Updated todo id=%s", todo_id)

        st.editing_id = None
        st.draft = ""
        return True

    def delete(self, todo_id: int, confirm: Confirm | None = None) -> bool:
        if confirm is not None and not confirm(DELETE_PROMPT):
            logger.debug("Delete of id=%s not confirmed", todo_id)
            return False

        with self._busy():
            try:
                self.repo.delete_todo(todo_id)
            except TodoApiError as e:
                logger.warning("Delete failed id=%s: %s", todo_id, e)
                self.show_error(str(e))
                return False

        st = self.state
        st.todos = [t for t in st.todos if t.id != todo_id]
        if st.editing_id == todo_id:
            st.editing_id = None
            st.draft = ""
        logger.info("Deleted todo id=%s", todo_id)
        return True

    # ---- local edit session ----

    def begin_edit(self, todo_id: int) -> Todo:
        todo = self.state.find(todo_id)
        if todo is None:
            raise TodoNotFound(todo_id)
        self.state.editing_id = todo.id
        self.state.draft = todo.title
        return todo

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.draft = ""

    # ---- filter / paging ----

    def _set_filter(self, flt: TodoFilter) -> None:
        self.state.filter = flt
        self.state.current_page = 1

    def set_search(self, text: str) -> None:
        f = self.state.filter
        self._set_filter(TodoFilter(search=text or "", from_date=f.from_date, to_date=f.to_date))

    def set_from_date(self, value: date | None) -> None:
        f = self.state.filter
        self._set_filter(TodoFilter(search=f.search, from_date=value, to_date=f.to_date))

    def set_to_date(self, value: date | None) -> None:
        f = self.state.filter
        self._set_filter(TodoFilter(search=f.search, from_date=f.from_date, to_date=value))

    def set_date_range(self, from_date: date | None, to_date: date | None) -> None:
        self._set_filter(TodoFilter(search=self.state.filter.search, from_date=from_date, to_date=to_date))

    def go_to_page(self, page: int) -> None:
        if page < 1:
            raise ValueError("page must be >= 1")
        self.state.current_page = int(page)

    def current_view(self) -> PageView:
        st = self.state
        return build_page(st.todos, st.filter, st.current_page, self.page_size)
