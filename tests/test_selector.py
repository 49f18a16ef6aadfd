from __future__ import annotations

import io
from typing import Iterable

import pytest
import readchar
from rich.console import Console

from ts_backend_starter import selector
from ts_backend_starter.selector import Option, SelectionState, confirm, select_option

OPTIONS = [
    Option("MongoDB", "mongodb", "document store"),
    Option("PostgreSQL", "postgresql", "relational store"),
]


def keys(sequence: Iterable[str]):
    iterator = iter(sequence)
    return lambda: next(iterator)


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=80)


def test_selection_state_starts_at_first_option():
    state = SelectionState(OPTIONS)
    assert state.index == 0
    assert state.current.value == "mongodb"


def test_selection_state_clamps_at_both_ends():
    state = SelectionState(OPTIONS)
    state.move_up()
    assert state.index == 0
    state.move_down()
    state.move_down()
    assert state.index == 1
    state.move_up()
    assert state.index == 0


def test_selection_state_requires_options():
    with pytest.raises(ValueError):
        SelectionState([])


def test_select_option_enter_returns_first(console: Console):
    assert select_option(OPTIONS, key_reader=keys(["enter"]), console=console) == "mongodb"


def test_select_option_moves_down(console: Console):
    value = select_option(OPTIONS, key_reader=keys(["down", "down", "enter"]), console=console)
    assert value == "postgresql"


def test_select_option_ignores_other_keys(console: Console):
    value = select_option(OPTIONS, key_reader=keys(["x", "down", "up", "up", "enter"]), console=console)
    assert value == "mongodb"


def test_select_option_propagates_interrupt(console: Console):
    def interrupt() -> str:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        select_option(OPTIONS, key_reader=interrupt, console=console)


def test_read_key_maps_arrows(monkeypatch: pytest.MonkeyPatch):
    pressed = iter([readchar.key.UP, readchar.key.DOWN, readchar.key.ENTER, "j", "q"])
    monkeypatch.setattr(selector.readchar, "readkey", lambda: next(pressed))
    assert [selector.read_key() for _ in range(5)] == ["up", "down", "enter", "down", "q"]


def test_read_key_ctrl_c_interrupts(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(selector.readchar, "readkey", lambda: readchar.key.CTRL_C)
    with pytest.raises(KeyboardInterrupt):
        selector.read_key()


def test_confirm_defaults_to_no(monkeypatch: pytest.MonkeyPatch, console: Console):
    monkeypatch.setattr("builtins.input", lambda *args: "")
    assert confirm("Start?", console=console) is False


def test_confirm_accepts_yes(monkeypatch: pytest.MonkeyPatch, console: Console):
    monkeypatch.setattr("builtins.input", lambda *args: "y")
    assert confirm("Start?", console=console) is True


def test_render_marks_only_highlighted_option():
    state = SelectionState([Option("Alpha", 1), Option("Beta", 2)])
    state.move_down()
    console = Console(file=io.StringIO(), force_terminal=False, width=80)

    console.print(selector._render(state, "Pick"))

    lines = console.file.getvalue().splitlines()
    alpha = next(line for line in lines if "Alpha" in line)
    beta = next(line for line in lines if "Beta" in line)
    assert selector.MARKER in beta
    assert selector.MARKER not in alpha
