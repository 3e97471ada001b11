from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_DEST, DEFAULT_MAX_REPOS, DEFAULT_TARGET
from ..core.validation import max_repos_limit

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    github_token: str | None = Field(default_factory=lambda: os.getenv("GITHUB_TOKEN"))
    max_repos: int = Field(default=DEFAULT_MAX_REPOS)
    default_dest: str = Field(default=DEFAULT_DEST)
    default_target: str = Field(default=DEFAULT_TARGET)

    @field_validator("max_repos", mode="before")
    @classmethod
    def positive_or_default(cls, v: object) -> int:
        return max_repos_limit(v)


def get_settings() -> Settings:
    # built fresh each time so env changes (MAX_REPOS etc.) are seen immediately
    return Settings()
