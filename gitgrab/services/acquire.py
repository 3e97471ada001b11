"""Service: clone (or recognise) each selected repository and measure it."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..core.console import console as default_console
from ..core.errors import GitGrabError
from ..core.git_client import GitClient
from ..core.github_client import GitHubClient
from ..core.types import AcquisitionResult, AcquisitionStatus, RepositoryCandidate
from ..core.utils import dir_size, to_kilobytes

logger = logging.getLogger(__name__)


def _redact(message: str, token: str | None) -> str:
    return message.replace(token, "***") if token else message


def _measured(
    candidate: RepositoryCandidate, target: Path, status: AcquisitionStatus, git: GitClient
) -> AcquisitionResult:
    return AcquisitionResult.from_candidate(
        candidate,
        path=target,
        status=status,
        commit_count=git.commit_count(target),
        size_on_disk=to_kilobytes(dir_size(target)),
    )


def _failed(candidate: RepositoryCandidate, target: Path, error: str) -> AcquisitionResult:
    return AcquisitionResult.from_candidate(
        candidate, path=target, status=AcquisitionStatus.failed, error=error or "unknown error"
    )


def acquire_one(
    candidate: RepositoryCandidate,
    root: str | Path,
    git: GitClient,
    token: str | None = None,
    console: Console | None = None,
) -> AcquisitionResult:
    """Bring one repository to ``root/<name>``; never raises for per-repository problems."""
    out = console or default_console
    target = Path(root) / candidate.name
    try:
        if target.exists() or target.is_symlink():
            if git.is_worktree(target):
                return _measured(candidate, target, AcquisitionStatus.existing, git)
            out.print(f"[yellow]⚠ Directory {escape(str(target))} exists but is not a git repository. Removing...[/yellow]")
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()

        url = candidate.clone_url
        if token and url.startswith("https://"):
            url = GitHubClient.inject_token_into_https(url, token)
        ok, err = git.clone(url, target)
        if not ok:
            return _failed(candidate, target, _redact(err or "git clone failed", token))
        return _measured(candidate, target, AcquisitionStatus.cloned, git)
    except (GitGrabError, OSError) as e:
        logger.debug("acquisition of %s failed", candidate.full_name, exc_info=True)
        return _failed(candidate, target, _redact(str(e), token))


def acquire(
    selected: Sequence[RepositoryCandidate],
    root: str | Path,
    *,
    git: GitClient | None = None,
    token: str | None = None,
    console: Console | None = None,
) -> list[AcquisitionResult]:
    """Acquire every selected repository in order; one failure does not stop the rest."""
    if not selected:
        return []
    out = console or default_console
    git = git or GitClient()
    root = Path(root)

    out.print(f"\n[bold blue]Cloning {len(selected)} repositories to {escape(str(root))}...[/bold blue]\n")
    results: list[AcquisitionResult] = []
    seen: set[str] = set()
    for c in selected:
        if c.name in seen:
            result = _failed(c, root / c.name, f"duplicate repository name '{c.name}'")
        else:
            seen.add(c.name)
            with out.status(f"Cloning {escape(c.name)}..."):
                result = acquire_one(c, root, git, token=token, console=out)
        results.append(result)

        if result.status == AcquisitionStatus.cloned:
            out.print(f"[green]✓[/green] Cloned {escape(c.name)} successfully")
        elif result.status == AcquisitionStatus.existing:
            out.print(f"[yellow]⚠ Repository {escape(c.name)} already exists at {escape(str(result.path))}[/yellow]")
        else:
            out.print(f"[red]✗ Failed to clone {escape(c.name)}: {escape(result.error or '')}[/red]")
    return results
