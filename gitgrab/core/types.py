"""Small types, Enums and records used by gitgrab."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import NO_DESCRIPTION, NO_LANGUAGE


class TargetKind(str, Enum):
    """What a target login resolved to on GitHub."""

    organization = "organization"
    user = "user"


class AcquisitionStatus(str, Enum):
    """Outcome of one clone-or-skip attempt."""

    cloned = "cloned"
    existing = "existing"
    failed = "failed"


class RepositoryCandidate(BaseModel):
    """A repository listed on GitHub but not yet acted upon locally."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    full_name: str
    description: str = NO_DESCRIPTION
    url: str = ""
    clone_url: str
    size: int = 0  # KB, as reported by GitHub
    language: str = NO_LANGUAGE
    stars: int = Field(default=0, ge=0)
    forks: int = Field(default=0, ge=0)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_api(cls, r: dict[str, Any]) -> RepositoryCandidate:
        """Normalise a raw GitHub REST repository record."""
        return cls(
            id=r["id"],
            name=r["name"],
            full_name=r["full_name"],
            description=r.get("description") or NO_DESCRIPTION,
            url=r.get("html_url") or "",
            clone_url=r["clone_url"],
            size=r.get("size") or 0,
            language=r.get("language") or NO_LANGUAGE,
            stars=r.get("stargazers_count") or 0,
            forks=r.get("forks_count") or 0,
            created_at=r.get("created_at"),
            updated_at=r.get("updated_at"),
        )


class AcquisitionResult(RepositoryCandidate):
    """A candidate plus what happened when we tried to put it on disk."""

    path: Path
    status: AcquisitionStatus
    commit_count: int | None = Field(default=None, ge=0)
    size_on_disk: int | None = Field(default=None, ge=0)  # KB
    error: str | None = None

    @model_validator(mode="after")
    def check_status_fields(self) -> AcquisitionResult:
        if self.status == AcquisitionStatus.failed:
            if not self.error:
                raise ValueError("failed results need an error message")
            if self.commit_count is not None or self.size_on_disk is not None:
                raise ValueError("failed results carry no metrics")
        else:
            if self.commit_count is None or self.size_on_disk is None:
                raise ValueError(f"{self.status.value} results need commit_count and size_on_disk")
            if self.error is not None:
                raise ValueError(f"{self.status.value} results carry no error")
        return self

    @classmethod
    def from_candidate(cls, candidate: RepositoryCandidate, **extra: Any) -> AcquisitionResult:
        return cls(**candidate.model_dump(), **extra)
