"""Small helpers for running Git commands against one working copy."""

from __future__ import annotations

import logging
import os
import subprocess

from .constants import GIT_METADATA_DIR, GIT_TIMEOUT_SEC
from .errors import GitError

logger = logging.getLogger(__name__)


class GitClient:
    # ---------- process helpers ----------
    @staticmethod
    def _run_out(cmd: list[str], cwd: str | None = None, timeout: float | None = None) -> tuple[bool, str]:
        logger.debug("run: %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            out = subprocess.check_output(cmd, cwd=cwd, stderr=subprocess.STDOUT, timeout=timeout)
            return True, out.decode("utf-8", "ignore").strip()
        except subprocess.CalledProcessError as e:
            return False, (e.output or b"").decode("utf-8", "ignore").strip() or f"{cmd[0]} exited with status {e.returncode}"
        except subprocess.TimeoutExpired:
            return False, f"{cmd[0]} timed out after {timeout}s"
        except FileNotFoundError:
            return False, f"{cmd[0]} executable not found"

    # ---------- working copies ----------
    @staticmethod
    def is_worktree(path: str | os.PathLike[str]) -> bool:
        return os.path.exists(os.path.join(path, GIT_METADATA_DIR))

    def clone(self, url: str, target: str | os.PathLike[str]) -> tuple[bool, str | None]:
        # disable interactive credential prompts so we fail fast if anything's wrong
        cmd = ["git", "-c", "credential.helper=", "clone", url, os.fspath(target)]
        ok, out = self._run_out(cmd, timeout=GIT_TIMEOUT_SEC)
        if ok:
            return True, None
        # git prints progress before the fatal line; the last line is the useful one
        return False, out.splitlines()[-1] if out else "git clone failed"

    def commit_count(self, repo_dir: str | os.PathLike[str]) -> int:
        ok, out = self._run_out(["git", "rev-list", "--count", "HEAD"], cwd=os.fspath(repo_dir))
        if not ok or not out.isdigit():
            raise GitError(f"could not count commits: {out or 'no output'}")
        return int(out)
