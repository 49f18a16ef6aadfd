"""Terminal prompts: arrow-key single choice and yes/no confirmation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Sequence

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

__all__ = ["Option", "SelectionState", "confirm", "read_key", "select_option"]


LOGGER = logging.getLogger(__name__)

MARKER = "▶"


class Option(NamedTuple):
    label: str
    value: Any
    hint: str = ""


@dataclass(slots=True)
class SelectionState:
    """Highlight position within a fixed option list. Movement never wraps."""

    options: Sequence[Option]
    index: int = 0

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("at least one option is required")

    @property
    def last_index(self) -> int:
        return len(self.options) - 1

    @property
    def current(self) -> Option:
        return self.options[self.index]

    def move_up(self) -> None:
        if self.index > 0:
            self.index -= 1

    def move_down(self) -> None:
        if self.index < self.last_index:
            self.index += 1


def read_key() -> str:
    """Read one keypress and map it to ``up``, ``down`` or ``enter``.

    Other keys are returned unchanged. Ctrl+C raises ``KeyboardInterrupt``.
    """

    key = readchar.readkey()
    if key in (readchar.key.UP, "k"):
        return "up"
    if key in (readchar.key.DOWN, "j"):
        return "down"
    if key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
        return "enter"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return key


def _render(state: SelectionState, prompt: str) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", justify="left", width=2)
    table.add_column(justify="left")

    for position, option in enumerate(state.options):
        hint = f" [dim]({option.hint})[/dim]" if option.hint else ""
        if position == state.index:
            table.add_row(MARKER, f"[bold cyan]{option.label}[/bold cyan]{hint}")
        else:
            table.add_row(" ", f"{option.label}{hint}")

    table.add_row("", "")
    table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select[/dim]")
    return Panel(table, title=f"[bold]{prompt}[/bold]", border_style="cyan", padding=(1, 2))


def select_option(
    options: Sequence[Option],
    prompt: str = "Select an option",
    *,
    key_reader: Callable[[], str] = read_key,
    console: Console | None = None,
) -> Any:
    """Let the operator pick one of ``options`` and return its value.

    The list is redrawn in place after every keypress. ``KeyboardInterrupt``
    from ``key_reader`` is not handled here.
    """

    state = SelectionState(options)
    console = console or Console()

    with Live(_render(state, prompt), console=console, transient=True, auto_refresh=False) as live:
        while True:
            key = key_reader()
            if key == "enter":
                break
            if key == "up":
                state.move_up()
            elif key == "down":
                state.move_down()
            live.update(_render(state, prompt), refresh=True)

    chosen = state.current
    LOGGER.debug("selected option %r", chosen.label)
    console.print(f"{prompt}: [cyan]{chosen.label}[/cyan]")
    return chosen.value


def confirm(question: str, *, default: bool = False, console: Console | None = None) -> bool:
    """Ask a line-level yes/no ``question``."""

    return Confirm.ask(question, default=default, console=console or Console())
