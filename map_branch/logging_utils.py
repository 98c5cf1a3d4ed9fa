"""
Logging helpers for map_branch.

Log records go to stderr so they never interleave with the status lines
the console module writes to stdout.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """
    Map a -v count to a logging level.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG
    """

    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int) -> None:
    """Configure the root logger once per process from the CLI."""

    logging.basicConfig(
        level=level_for_verbosity(verbosity),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
