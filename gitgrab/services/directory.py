"""Service: settle on the local folder repositories are cloned into."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..core.console import console as default_console
from ..core.errors import FilesystemFailure
from ..core.prompts import Prompter
from ..core.utils import empty_directory, is_empty_dir
from ..core.validation import require_folder_name, validate_folder_name

logger = logging.getLogger(__name__)


def resolve_directory(
    initial: str | Path,
    prompter: Prompter,
    project_root: str | Path,
    console: Console | None = None,
) -> Path:
    """Return a directory that exists and is safe to clone into.

    A missing directory is created, an empty one is used as is. For a non-empty
    one the operator either clears it or names a fresh folder under
    ``project_root``.
    """
    out = console or default_console
    initial = Path(initial)
    shown = escape(str(initial))
    try:
        if not initial.exists():
            out.print(f"[blue]Creating repository directory: {shown}[/blue]")
            initial.mkdir(parents=True, exist_ok=True)
            return initial

        if not initial.is_dir():
            raise FilesystemFailure(f"{initial} exists and is not a directory")

        if is_empty_dir(initial):
            out.print(f"[blue]Using empty repository directory: {shown}[/blue]")
            return initial

        if prompter.confirm(
            f"The directory {initial} is not empty. Do you want to delete its contents?", default=True
        ):
            with out.status(f"Cleaning repository directory: {shown}"):
                empty_directory(initial)
            out.print(f"[green]✓[/green] Repository directory cleaned: {shown}")
            return initial

        name = require_folder_name(
            prompter.ask("Enter a new folder name to create at the project root", validate=validate_folder_name)
        )
        new_dir = Path(project_root) / name
        if new_dir.exists():
            raise FilesystemFailure(
                f"A directory named '{name}' already exists. "
                "Please run the application again with a different directory name."
            )
        out.print(f"[blue]Creating new repository directory: {escape(str(new_dir))}[/blue]")
        new_dir.mkdir(parents=True)
        return new_dir
    except OSError as e:
        logger.debug("directory preparation failed", exc_info=True)
        raise FilesystemFailure(f"Error preparing repository directory: {e}") from e


def _non_empty_path(raw: str) -> str | None:
    return None if raw and raw.strip() else "Directory path cannot be empty"


def confirm_directory(default_dir: str | Path, prompter: Prompter, console: Console | None = None) -> Path:
    """Let the operator keep ``default_dir`` or switch to any other path.

    A custom path is resolved against the working directory and created with
    its parents if missing.
    """
    out = console or default_console
    final = Path(default_dir)
    if not prompter.confirm(f"Clone to default directory? ({final})", default=True):
        custom = prompter.ask("Enter custom directory path", validate=_non_empty_path)
        if _non_empty_path(custom):
            raise FilesystemFailure("Directory path cannot be empty")
        final = Path(custom.strip()).expanduser().resolve()
    try:
        final.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("could not create %s", final, exc_info=True)
        raise FilesystemFailure(f"Error creating directory: {e}") from e
    out.print(f"[green]✓[/green] Directory is ready: {escape(str(final))}")
    return final
