"""Service: summarise acquisition results as a console dashboard."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.console import console as default_console
from ..core.types import AcquisitionResult, AcquisitionStatus

STATUS_STYLE = {
    AcquisitionStatus.cloned: "green",
    AcquisitionStatus.existing: "yellow",
    AcquisitionStatus.failed: "red",
}

# (header, column width); cell text is cut to width - 2 to leave room for padding
COLUMNS = [
    ("Repository", 30),
    ("Language", 15),
    ("Size", 12),
    ("Stars", 10),
    ("Commits", 10),
    ("Status", 12),
    ("Location", 50),
]


class StatusCounts(NamedTuple):
    total: int
    cloned: int
    existing: int
    failed: int


def summarize(results: Sequence[AcquisitionResult]) -> StatusCounts:
    def count(status: AcquisitionStatus) -> int:
        return sum(1 for r in results if r.status == status)

    return StatusCounts(
        total=len(results),
        cloned=count(AcquisitionStatus.cloned),
        existing=count(AcquisitionStatus.existing),
        failed=count(AcquisitionStatus.failed),
    )


def truncate(text: str, width: int) -> str:
    return text[: width - 3] + "..." if len(text) > width else text


def format_size(kb: int) -> str:
    if kb < 1024:
        return f"{kb} KB"
    if kb < 1024 * 1024:
        return f"{kb / 1024:.2f} MB"
    return f"{kb / (1024 * 1024):.2f} GB"


def _row(r: AcquisitionResult) -> list[str]:
    size = r.size_on_disk if r.size_on_disk is not None else r.size
    cells = [
        r.name,
        r.language or "N/A",
        format_size(size or 0),
        str(r.stars),
        str(r.commit_count) if r.commit_count is not None else "N/A",
        r.status.value,
        str(r.path),
    ]
    return [escape(truncate(cell, width - 2)) for cell, (_, width) in zip(cells, COLUMNS)]


def build_table(results: Sequence[AcquisitionResult]) -> Table:
    table = Table(box=box.SQUARE, header_style="bold cyan")
    for header, width in COLUMNS:
        table.add_column(header, width=width - 2, no_wrap=True, overflow="ellipsis")
    for r in results:
        cells = _row(r)
        cells[0] = f"[cyan]{cells[0]}[/cyan]"
        cells[5] = f"[{STATUS_STYLE[r.status]}]{cells[5]}[/{STATUS_STYLE[r.status]}]"
        table.add_row(*cells)
    return table


def render_dashboard(results: Sequence[AcquisitionResult], console: Console | None = None) -> None:
    out = console or default_console
    counts = summarize(results)

    out.print()
    out.print("[bold green]📊 GitHub Repositories Dashboard 📊[/bold green]")
    out.print()
    out.print("[bold]Summary:[/bold]")
    out.print(f"Total repositories: [cyan]{counts.total}[/cyan]")
    out.print(f"Successfully cloned: [green]{counts.cloned}[/green]")
    out.print(f"Already existing: [yellow]{counts.existing}[/yellow]")
    out.print(f"Failed: [red]{counts.failed}[/red]")
    out.print()

    out.print(build_table(results))
    out.print()

    if counts.failed:
        out.print("[bold red]Failed Repositories:[/bold red]")
        for r in results:
            if r.status == AcquisitionStatus.failed:
                out.print(f"[cyan]{escape(r.name)}[/cyan]: [red]{escape(r.error or '')}[/red]")
        out.print()

    if counts.cloned:
        out.print("[bold green]✓ Successfully Cloned Repositories:[/bold green]")
        for r in results:
            if r.status == AcquisitionStatus.cloned:
                out.print(f"  [cyan]{escape(r.name)}[/cyan] → [green]{escape(str(r.path))}[/green]")
        out.print()

    if counts.existing:
        out.print("[bold yellow]⚠ Already Existing Repositories:[/bold yellow]")
        for r in results:
            if r.status == AcquisitionStatus.existing:
                out.print(f"  [cyan]{escape(r.name)}[/cyan] → [yellow]{escape(str(r.path))}[/yellow]")
        out.print()
