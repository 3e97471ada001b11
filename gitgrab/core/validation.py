"""Input checks that run before any network or filesystem work."""

from __future__ import annotations

import re

from .constants import DEFAULT_MAX_REPOS
from .errors import InvalidFolderName, InvalidLimit, InvalidToken

_TOKEN_RE = re.compile(r"^ghp_[A-Za-z0-9_]{36}$|^github_pat_[A-Za-z0-9_]{22}_[A-Za-z0-9]{59}$")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_valid_token(token: str | None) -> bool:
    """True for a classic (ghp_...) or fine-grained (github_pat_...) personal access token."""
    return bool(token) and _TOKEN_RE.fullmatch(token) is not None


def require_valid_token(token: str | None) -> str:
    """Return ``token`` unchanged, or raise InvalidToken when it is missing or malformed."""
    if not token:
        raise InvalidToken("GitHub token not found")
    if not is_valid_token(token):
        raise InvalidToken("Invalid GitHub token format")
    return token


def parse_int(raw: object) -> int | None:
    """Plain ASCII base-10 integers only; an optional sign and surrounding blanks are allowed."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if _INT_RE.fullmatch(text) is None:
        return None
    return int(text, 10)


def max_repos_limit(raw: object) -> int:
    """Parse a MAX_REPOS override; anything not a positive integer yields the default."""
    value = parse_int(raw)
    if value is None or value <= 0:
        return DEFAULT_MAX_REPOS
    return value


def validate_limit(raw: object, ceiling: int | None = None) -> int:
    """Return ``min(raw, ceiling)`` or raise InvalidLimit.

    ``ceiling`` defaults to MAX_REPOS as currently set in the environment.
    """
    value = parse_int(raw)
    if value is None or value <= 0:
        raise InvalidLimit("Limit must be a positive number")
    if ceiling is None:
        from ..config.settings import get_settings

        ceiling = get_settings().max_repos
    return min(value, ceiling)


def validate_folder_name(name: str) -> str | None:
    """Return an error message for an unusable folder name, else None."""
    if not name or not name.strip():
        return "Folder name cannot be empty"
    if "/" in name or "\\" in name:
        return "Folder name should not contain path separators"
    return None


def require_folder_name(name: str) -> str:
    """Return the stripped folder name, or raise InvalidFolderName."""
    problem = validate_folder_name(name)
    if problem:
        raise InvalidFolderName(problem)
    return name.strip()
