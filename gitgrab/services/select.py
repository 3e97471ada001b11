"""Service: let the operator pick which listed repositories to clone."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.prompts import Prompter
from ..core.types import RepositoryCandidate


def select_repositories(
    candidates: Sequence[RepositoryCandidate], prompter: Prompter
) -> list[RepositoryCandidate]:
    if not candidates:
        return []
    choices = [(f"{c.name} - {c.description}" if c.description else c.name, c) for c in candidates]
    picked = prompter.select_many("Select repositories to clone", choices)
    # keep listing order whatever order the prompter answers in
    return [c for c in candidates if c in picked]
