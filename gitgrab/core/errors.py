"""Exception hierarchy for gitgrab.

Everything raised on purpose derives from ``GitGrabError`` so the CLI can turn
it into a one-line message and exit status 1.
"""

from __future__ import annotations


class GitGrabError(RuntimeError):
    pass


# ---------- bad operator input ----------
class InvalidInput(GitGrabError):
    pass


class InvalidLimit(InvalidInput):
    pass


class InvalidToken(InvalidInput):
    pass


class InvalidFolderName(InvalidInput):
    pass


# ---------- GitHub API ----------
class RemoteLookupFailure(GitGrabError):
    pass


class NotFound(RemoteLookupFailure):
    pass


class Unauthenticated(RemoteLookupFailure):
    pass


class RateLimited(RemoteLookupFailure):
    pass


class NetworkFailure(RemoteLookupFailure):
    pass


# ---------- per-repository work ----------
class AcquisitionFailure(GitGrabError):
    pass


class GitError(AcquisitionFailure):
    pass


# ---------- local filesystem ----------
class FilesystemFailure(GitGrabError):
    pass
