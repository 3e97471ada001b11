"""Lightweight filesystem helpers (sizing, emptying)."""
from __future__ import annotations

import os
import shutil

from .constants import GIT_METADATA_DIR


def dir_size(path: str | os.PathLike[str], skip: str = GIT_METADATA_DIR) -> int:
    """Total bytes of regular files under ``path``, ignoring any ``skip`` directory at every depth.

    Best effort: an entry that cannot be read counts as zero.
    """
    total = 0
    try:
        entries = list(os.scandir(path))
    except OSError:
        return 0
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                if entry.name != skip:
                    total += dir_size(entry.path, skip=skip)
            elif entry.is_file(follow_symlinks=False):
                total += entry.stat(follow_symlinks=False).st_size
        except OSError:
            continue
    return total


def to_kilobytes(nbytes: int) -> int:
    return (nbytes + 512) // 1024  # round half up


def is_empty_dir(path: str | os.PathLike[str]) -> bool:
    with os.scandir(path) as it:
        return next(it, None) is None


def empty_directory(path: str | os.PathLike[str]) -> None:
    """Delete everything inside ``path`` but keep ``path`` itself."""
    with os.scandir(path) as it:
        entries = list(it)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.unlink(entry.path)
