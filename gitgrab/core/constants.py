"""Module holding constants used across gitgrab."""

from pathlib import Path

VERSION = "1.0.0"

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = f"gitgrab/{VERSION}"
HTTP_TIMEOUT_SEC = 30
GIT_TIMEOUT_SEC = 600

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_DEST = str(PROJECT_ROOT / "repos")
DEFAULT_TARGET = "ICJIA"

DEFAULT_LIMIT = 15  # shown in --help; the enforced ceiling is MAX_REPOS
DEFAULT_MAX_REPOS = 25

GIT_METADATA_DIR = ".git"
NO_DESCRIPTION = "No description"
NO_LANGUAGE = "Not specified"
