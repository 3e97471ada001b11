"""GitHub API operations: target classification and recent-repository listing."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote, urlencode, urlparse, urlunparse

from pydantic import ValidationError

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, USER_AGENT
from .errors import NetworkFailure, NotFound, RateLimited, RemoteLookupFailure, Unauthenticated
from .types import RepositoryCandidate, TargetKind

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, token: str | None = None) -> None:
        self.token = token

    # ---------- low-level HTTP ----------
    def _request_json(self, url: str) -> Any:
        req = urllib.request.Request(url)
        req.add_header("Accept", GITHUB_API_ACCEPT)
        req.add_header("User-Agent", USER_AGENT)
        if self.token:
            req.add_header("Authorization", f"Bearer {self.token}")
        logger.debug("GET %s", url)
        try:
            with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SEC) as resp:
                return json.loads(resp.read().decode("utf-8"))
        except urllib.error.HTTPError as e:
            raise self._map_http_error(e) from e
        except OSError as e:  # URLError, timeouts, connection resets
            reason = getattr(e, "reason", e)
            raise NetworkFailure(f"Failed to fetch repositories: {reason}") from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise NetworkFailure(f"Failed to fetch repositories: invalid response from {url}: {e}") from e

    @staticmethod
    def _map_http_error(e: urllib.error.HTTPError) -> RemoteLookupFailure:
        logger.debug("HTTP %s for %s", e.code, e.url)
        if e.code == 404:
            return NotFound(f"Not found: {e.url}")
        if e.code == 401:
            return Unauthenticated("Authentication failed. Check your GitHub token")
        if e.code == 403 and e.headers is not None and e.headers.get("X-RateLimit-Remaining") == "0":
            return RateLimited(
                "GitHub API rate limit exceeded. Please use a valid token or wait before trying again"
            )
        return NetworkFailure(f"Failed to fetch repositories: HTTP {e.code} {e.reason}")

    # ---------- public API ----------
    @staticmethod
    def inject_token_into_https(clone_url: str, token: str) -> str:
        """https://github.com/owner/repo.git -> https://x-access-token:<token>@github.com/owner/repo.git"""
        u = urlparse(clone_url)
        netloc = f"x-access-token:{token}@{u.netloc}"
        return urlunparse((u.scheme, netloc, u.path, u.params, u.query, u.fragment))

    def classify_target(self, target: str) -> TargetKind:
        """Organisation first; anything that fails there is retried as a user lookup."""
        login = quote(target, safe="")
        try:
            self._request_json(f"{API_BASE}/orgs/{login}")
            return TargetKind.organization
        except RemoteLookupFailure as e:
            logger.debug("%s is not an organization (%s); trying as user", target, e)
        try:
            self._request_json(f"{API_BASE}/users/{login}")
        except NotFound as e:
            raise NotFound(f"User or organization '{target}' not found") from e
        return TargetKind.user

    def list_repositories(
        self,
        target: str,
        limit: int,
        kind: TargetKind | None = None,
    ) -> list[RepositoryCandidate]:
        """Return up to ``limit`` repositories of ``target``, most recently updated first."""
        kind = kind or self.classify_target(target)
        login = quote(target, safe="")
        base = f"{API_BASE}/orgs/{login}/repos" if kind == TargetKind.organization else f"{API_BASE}/users/{login}/repos"
        query = urlencode({"per_page": limit, "sort": "updated", "direction": "desc"})
        try:
            data = self._request_json(f"{base}?{query}")
        except NotFound as e:
            raise NotFound(f"User or organization '{target}' not found") from e
        if not isinstance(data, list):
            raise NetworkFailure(f"Failed to fetch repositories: unexpected response for {target}")
        try:
            return [RepositoryCandidate.from_api(r) for r in data]
        except (KeyError, TypeError, ValidationError) as e:
            raise NetworkFailure(f"Failed to fetch repositories: malformed repository record: {e}") from e


def list_repositories(target: str, token: str | None, limit: int) -> list[RepositoryCandidate]:
    return GitHubClient(token=token).list_repositories(target, limit)
