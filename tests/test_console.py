# tests/test_console.py

from __future__ import annotations

from todo_sync.cli.bootstrap import create_initial_state, shutdown_state
from todo_sync.connectors.console_connector import input_prompt, make_confirm, run_console_loop

from .fakes import FakeRemote, make_items


def _scripted(lines: list[str]):
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_console_plain_text_adds_and_edits(state) -> None:
    out: list[str] = []
    run_console_loop(
        state,
        read=_scripted(["Call mum", "/edit 201", "Call mum tonight", "/exit", "never read"]),
        write=out.append,
    )
    todos = state.service.state.todos
    assert todos[0].id == 201
    assert todos[0].title == "Call mum tonight"
    assert state.service.state.editing_id is None


def test_console_delete_prompt(state) -> None:
    run_console_loop(state, read=_scripted(["/delete 1", "y", "/delete 2", "n"]), write=lambda s: None)
    assert state.service.state.find(1) is None
    assert state.service.state.find(2) is not None


def test_make_confirm_treats_eof_as_no() -> None:
    confirm = make_confirm(_scripted([]))
    assert confirm("sure?") is False


def test_bootstrap_wires_client_from_settings(settings) -> None:
    remote = FakeRemote(items=make_items(3))
    loading: list[bool] = []
    app = create_initial_state(settings=settings, transport=remote.transport(), on_loading=loading.append)
    try:
        assert settings.data_dir.exists()
        assert app.service.load() is True
        assert len(app.list_state.todos) == 3
        assert loading == [True, False]
        assert app.service.page_size == settings.page_size
    finally:
        shutdown_state(app)


def test_edit_prompt_shows_id_and_current_title(state) -> None:
    prompts: list[str] = []
    lines = iter(["/edit 3", "/cancel"])

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    run_console_loop(state, read=read, write=lambda s: None)
    assert prompts == ["todo> ", "edit #3 [task 3]> ", "todo> "]


def test_prompt_keeps_typed_text_after_failed_save(state, remote) -> None:
    state.service.begin_edit(2)
    remote.fail.add("PUT")
    state.service.submit("second try")
    assert input_prompt(state) == "edit #2 [second try]> "
