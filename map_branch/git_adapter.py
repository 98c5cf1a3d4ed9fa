"""
Git integration for map_branch.

The recipe steps run with git's output going straight to the terminal so
git reports its own failures. A non-zero exit is returned to the caller,
not raised; only a failure to start git at all raises GitError.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

from .errors import GitError

LOG = logging.getLogger(__name__)


def _run_git(
    args: Sequence[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.

    stdout and stderr are inherited from this process.
    """

    cmd = ["git", *args]
    LOG.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
        )
    except OSError as exc:  # noqa: BLE001
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        LOG.info("git exited with %d: %s", completed.returncode, cmd[1])

    return completed


def create_and_checkout_branch(name: str, cwd: Optional[str] = None) -> int:
    """
    Create a new branch at HEAD and switch to it, returning git's exit code.
    """

    return _run_git(["checkout", "-b", name], cwd=cwd).returncode


def stage_path(path: str, cwd: Optional[str] = None) -> int:
    """
    Stage the current contents of path.
    """

    return _run_git(["add", path], cwd=cwd).returncode


def create_commit(message: str, cwd: Optional[str] = None) -> int:
    """
    Create a git commit with the given commit message.
    """

    return _run_git(["commit", "-m", message], cwd=cwd).returncode
