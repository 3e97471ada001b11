"""Shared fixtures: scripted prompts, a fake git, a recording console."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pytest
from rich.console import Console

from gitgrab.core.errors import GitError
from gitgrab.core.git_client import GitClient
from gitgrab.core.types import RepositoryCandidate

CLASSIC_TOKEN = "ghp_" + "a1B2c3D4e5" * 3 + "xyz_09"
FINE_GRAINED_TOKEN = "github_pat_" + "A" * 22 + "_" + "b" * 59


class ScriptedPrompter:
    """Answers prompts from pre-recorded lists, in order."""

    def __init__(self, confirms=(), answers=(), selections=()):
        self.confirms = list(confirms)
        self.answers = list(answers)
        self.selections = list(selections)
        self.asked: list[str] = []

    def confirm(self, message: str, default: bool = True) -> bool:
        self.asked.append(message)
        return self.confirms.pop(0)

    def ask(self, message: str, validate=None) -> str:
        self.asked.append(message)
        # mimic the terminal prompter: skip answers the validator rejects
        while True:
            answer = self.answers.pop(0)
            if validate is None or validate(answer) is None:
                return answer

    def select_many(self, message: str, choices: Sequence[tuple]) -> list:
        self.asked.append(message)
        wanted = self.selections.pop(0)
        return [value for label, value in choices if value.name in wanted]


class FakeGit(GitClient):
    """GitClient whose clone writes a tiny working copy instead of hitting the network."""

    def __init__(self, failures: dict[str, str] | None = None, commits: int = 3, payload: int = 10 * 1024):
        self.failures = failures or {}
        self.commits = commits
        self.payload = payload
        self.cloned: list[tuple[str, str]] = []

    def clone(self, url, target):
        self.cloned.append((url, os.fspath(target)))
        for name, message in self.failures.items():
            if url.endswith(name):
                return False, message
        target = Path(target)
        (target / ".git" / "objects").mkdir(parents=True)
        (target / ".git" / "objects" / "pack").write_bytes(b"x" * 4096)
        (target / "README.md").write_bytes(b"r" * self.payload)
        return True, None

    def commit_count(self, repo_dir):
        if not (Path(repo_dir) / ".git").exists():
            raise GitError("could not count commits: not a git repository")
        return self.commits


def make_candidate(name: str, clone_url: str | None = None, **kw) -> RepositoryCandidate:
    fields = dict(
        id=abs(hash(name)) % 10_000,
        name=name,
        full_name=f"octo/{name}",
        clone_url=clone_url or f"https://github.com/octo/{name}.git",
    )
    fields.update(kw)
    return RepositoryCandidate(**fields)


@pytest.fixture
def rec_console() -> Console:
    return Console(record=True, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("GITHUB_TOKEN", "MAX_REPOS", "DEFAULT_DEST", "DEFAULT_TARGET"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
