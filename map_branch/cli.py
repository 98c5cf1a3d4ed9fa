"""
Command-line interface for map_branch.

Run with no arguments to create feature/interactive-map, stage the map
component files and commit them. The exit code is that of the last git
command executed.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import Config
from .errors import MapBranchError, StepFailedError
from .logging_utils import configure_logging
from .runner import run_recipe


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-map-branch",
        description=(
            "Create the feature/interactive-map branch, stage the map "
            "component files and commit them with a prewritten message."
        ),
    )

    parser.add_argument(
        "-C",
        "--repo",
        metavar="PATH",
        help="Run git in PATH instead of the current directory.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the git commands without running them.",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first git command that fails.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config(
        repo=args.repo,
        dry_run=args.dry_run,
        fail_fast=args.fail_fast,
        verbosity=args.verbose,
    )

    configure_logging(verbosity=config.verbosity)

    try:
        report = run_recipe(config)
    except KeyboardInterrupt:
        return 130
    except StepFailedError as exc:
        return exc.returncode
    except MapBranchError as exc:
        print(f"create-map-branch: error: {exc}", file=sys.stderr)
        return 1

    return report.exit_code


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
