"""
Custom exception types used across map_branch.

Non-zero exits from the fixed git steps are recorded, not raised, unless
the runner is in fail-fast mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .runner import StepResult


class MapBranchError(Exception):
    """Base class for all map_branch specific errors."""


class GitError(MapBranchError):
    """Raised when git cannot be executed or a query command fails."""


class StepFailedError(MapBranchError):
    """Raised in fail-fast mode when a step returns a non-zero code."""

    def __init__(self, result: "StepResult") -> None:
        super().__init__(
            f"step failed with exit code {result.returncode}: {result.step.command}"
        )
        self.result = result

    @property
    def returncode(self) -> int:
        return self.result.returncode
