"""Interactive questions, behind a small interface so the pipeline can run without a terminal."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional, Protocol, TypeVar

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .console import console as default_console

T = TypeVar("T")

# returns an error message for a bad answer, None for a good one
Validator = Callable[[str], Optional[str]]


class Prompter(Protocol):
    def confirm(self, message: str, default: bool = True) -> bool: ...

    def ask(self, message: str, validate: Validator | None = None) -> str: ...

    def select_many(self, message: str, choices: Sequence[tuple[str, T]]) -> list[T]: ...


class TerminalPrompter:
    """Prompter backed by typer prompts and a readchar/rich checkbox list."""

    def __init__(self, console: Console | None = None, page_size: int = 20) -> None:
        self.console = console or default_console
        self.page_size = page_size

    def confirm(self, message: str, default: bool = True) -> bool:
        return typer.confirm(message, default=default)

    def ask(self, message: str, validate: Validator | None = None) -> str:
        while True:
            answer = typer.prompt(message, default="", show_default=False)
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            self.console.print(f"[red]{escape(problem)}[/red]")

    def select_many(self, message: str, choices: Sequence[tuple[str, T]]) -> list[T]:
        if not choices:
            return []
        cursor = 0
        checked: set[int] = set()

        def render() -> Panel:
            # keep the cursor inside a window of page_size rows
            start = min(max(0, cursor - self.page_size + 1), max(0, len(choices) - self.page_size))
            table = Table.grid(padding=(0, 1))
            table.add_column(style="cyan", width=2)
            table.add_column(width=3)
            table.add_column()
            for i in range(start, min(start + self.page_size, len(choices))):
                pointer = "▶" if i == cursor else " "
                box = "[green]◉[/green]" if i in checked else "◯"
                table.add_row(pointer, box, escape(choices[i][0]))
            table.add_row("", "", "")
            table.add_row(
                "", "", "[dim]↑/↓ move, space toggle, a toggle all, enter confirm, esc select none[/dim]"
            )
            return Panel(table, title=f"[bold]{escape(message)}[/bold]", border_style="cyan", padding=(1, 2))

        with Live(render(), console=self.console, transient=True, auto_refresh=False) as live:
            while True:
                key = readchar.readkey()
                if key == readchar.key.UP:
                    cursor = (cursor - 1) % len(choices)
                elif key == readchar.key.DOWN:
                    cursor = (cursor + 1) % len(choices)
                elif key == " ":
                    checked ^= {cursor}
                elif key in ("a", "A"):
                    checked = set() if len(checked) == len(choices) else set(range(len(choices)))
                elif key in (readchar.key.ENTER, "\r", "\n"):
                    break
                elif key == readchar.key.ESC:
                    checked = set()
                    break
                elif key == readchar.key.CTRL_C:
                    raise KeyboardInterrupt
                live.update(render(), refresh=True)

        return [choices[i][1] for i in sorted(checked)]
