"""CLI: list a user's or organisation's recent repositories, pick some, clone them."""

from __future__ import annotations

import typer
from rich.markup import escape

from ...config.settings import get_settings
from ...core.console import console, err_console, setup_logging
from ...core.constants import DEFAULT_LIMIT, PROJECT_ROOT, VERSION
from ...core.errors import FilesystemFailure, InvalidFolderName, InvalidLimit, InvalidToken, RemoteLookupFailure
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.prompts import TerminalPrompter
from ...core.types import TargetKind
from ...core.validation import parse_int, require_valid_token, validate_limit
from ...services.acquire import acquire
from ...services.directory import confirm_directory, resolve_directory
from ...services.report import render_dashboard
from ...services.select import select_repositories

TOKEN_MISSING_HELP = """
To use GitGrab, you need a GitHub Personal Access Token. This is required for:
  - Accessing private repositories
  - Avoiding rate limits with the GitHub API
  - Ensuring proper authentication

You can create a token by following these steps:
  1. Visit: https://github.com/settings/tokens
  2. Click "Generate new token" and confirm your password
  3. Give your token a name (e.g., "GitGrab CLI")
  4. Select at least the "repo" scope
  5. Click "Generate token" and copy your new token

Then, you can use your token in one of two ways:
  - Pass it as a command-line option: gitgrab <username> --token YOUR_TOKEN
  - Store it in a .env file in your project directory:
    GITHUB_TOKEN=your_token_here"""

TOKEN_FORMAT_HELP = """
Your GitHub token appears to be incorrectly formatted.
GitHub tokens should follow one of these formats:
  - Fine-grained personal access tokens: github_pat_*
  - Classic personal access tokens: ghp_*

Please double-check your token and try again."""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitgrab {VERSION}")
        raise typer.Exit()


def _banner() -> None:
    console.print("\n[bold green]=== GitGrab - GitHub Repository Cloning Tool ===[/bold green]")
    console.print("[cyan]A CLI utility to easily browse and clone GitHub repositories[/cyan]")
    console.print("Run with `gitgrab [username/organization]` to get started\n", style="cyan", markup=False)


def grab(
    target: str | None = typer.Argument(None, help="GitHub username or organization name (default: ICJIA)"),
    token: str | None = typer.Option(None, "--token", "-t", help="GitHub personal access token (env GITHUB_TOKEN)"),
    directory: str | None = typer.Option(None, "--directory", "-d", help="Directory to clone repositories to"),
    limit: str = typer.Option(
        str(DEFAULT_LIMIT), "--limit", "-l", help="Number of recent repositories to list (capped by MAX_REPOS)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """List, select, and clone the most recent repositories of a GitHub user or organization."""
    setup_logging(verbose)
    _banner()
    s = get_settings()
    _target = target or s.default_target
    _token = token or s.github_token

    # ---------- validate input ----------
    try:
        _token = require_valid_token(_token)
    except InvalidToken as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        err_console.print(TOKEN_FORMAT_HELP if _token else TOKEN_MISSING_HELP, markup=False, highlight=False)
        raise typer.Exit(code=1)

    try:
        _limit = validate_limit(limit, ceiling=s.max_repos)
    except InvalidLimit as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        err_console.print("[yellow]Please provide a valid number for the --limit option[/yellow]")
        raise typer.Exit(code=1)
    requested = parse_int(limit)
    if requested is not None and requested > _limit:
        console.print(
            f"[yellow]Limiting to maximum of {_limit} repositories (you requested {requested})[/yellow]"
        )

    marker = " [yellow](default)[/yellow]" if target is None else ""
    console.print(f"[blue]Target: {escape(_target)}{marker}[/blue]")
    console.print("[blue]To specify a different user or organization, run:[/blue]")
    console.print("  gitgrab <username/organization>", style="cyan", markup=False)
    console.print()

    # ---------- list ----------
    gh = GitHubClient(token=_token)
    shown = escape(_target)
    try:
        with console.status(f"Checking whether {shown} is an organization or a user..."):
            kind = gh.classify_target(_target)
        console.print(f"[green]✓[/green] {shown} is {'an organization' if kind == TargetKind.organization else 'a user'}")
        with console.status(f"Fetching the {_limit} most recent repositories for {shown}..."):
            candidates = gh.list_repositories(_target, _limit, kind=kind)
    except RemoteLookupFailure as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] Found {len(candidates)} recent repositories for {kind.value}: {shown}")

    if not candidates:
        console.print("[yellow]No repositories found.[/yellow]")
        raise typer.Exit(code=0)

    # ---------- select ----------
    prompter = TerminalPrompter(console=console)
    selected = select_repositories(candidates, prompter)
    if not selected:
        console.print("[yellow]No repositories selected. Exiting.[/yellow]")
        raise typer.Exit(code=0)

    # ---------- destination ----------
    try:
        root = resolve_directory(directory or s.default_dest, prompter, PROJECT_ROOT, console=console)
        root = confirm_directory(root, prompter, console=console)
    except (FilesystemFailure, InvalidFolderName) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[blue]Repositories will be saved to: [cyan]{escape(str(root))}[/cyan][/blue]")

    # ---------- clone & report ----------
    results = acquire(selected, root, git=GitClient(), token=_token, console=console)
    render_dashboard(results, console=console)
