"""
Configuration model for map_branch.

The CLI constructs a Config instance and passes it down into the runner
so behavior can be adjusted without relying on global state. The branch
name, file list and commit message are not configurable; they live in
the recipe module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """
    Top-level configuration for a map_branch run.

    repo is the directory git runs in (None means the current directory).
    """

    repo: Optional[str] = None
    dry_run: bool = False
    fail_fast: bool = False
    verbosity: int = 0
