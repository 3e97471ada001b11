"""CLI entrypoint that wires the grab command into a Typer app."""

import typer

from .commands.grab import grab

app = typer.Typer(add_completion=False, help="CLI tool to list, select, and clone GitHub repositories.")

app.command()(grab)


if __name__ == "__main__":
    app()
