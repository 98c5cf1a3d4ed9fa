"""
The command runner for map_branch.

run_recipe walks the fixed steps in order:
  - create and switch to the feature branch,
  - stage each listed path,
  - commit with the prewritten message, and
  - print how to push the branch.

By default a failing step is left for git to report and the run moves
on. With fail_fast the first failing step stops the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .config import Config
from .console import StatusConsole
from .errors import StepFailedError
from .git_adapter import create_and_checkout_branch, create_commit, stage_path
from .recipe import BRANCH_NAME, PUSH_HINT, Step, StepKind, build_steps

LOG = logging.getLogger(__name__)

# Status line printed before the first step of each kind.
_SECTION_MESSAGES: Dict[StepKind, str] = {
    "branch": f"Creating and switching to branch '{BRANCH_NAME}'...",
    "stage": "Adding map component files...",
    "commit": "Creating commit...",
}


@dataclass
class StepResult:
    step: Step
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class RunReport:
    """
    Outcome of a run: one result per step that was executed, in order.
    """

    results: List[StepResult] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        # Mirrors a shell script: the last command's status wins.
        if not self.results:
            return 0
        return self.results[-1].returncode

    @property
    def failed(self) -> List[StepResult]:
        return [result for result in self.results if not result.ok]


def _execute(step: Step, cwd: Optional[str]) -> int:
    runners: Dict[StepKind, Callable[..., int]] = {
        "branch": create_and_checkout_branch,
        "stage": stage_path,
        "commit": create_commit,
    }
    return runners[step.kind](step.target, cwd=cwd)


def run_recipe(config: Config, console: Optional[StatusConsole] = None) -> RunReport:
    """
    Run the recipe according to the configuration and return a report.

    Raises StepFailedError in fail-fast mode when a step returns non-zero.
    """

    console = console or StatusConsole()
    steps = build_steps()
    report = RunReport()

    if config.dry_run:
        console.status("Dry run: the following commands would be executed:")
        for step in steps:
            console.plain(f"  {step.command}")
        return report

    current_kind: Optional[StepKind] = None
    for step in steps:
        if step.kind != current_kind:
            console.status(_SECTION_MESSAGES[step.kind])
            current_kind = step.kind

        result = StepResult(step=step, returncode=_execute(step, config.repo))
        report.results.append(result)

        if not result.ok:
            LOG.info("Step '%s' returned %d", step.command, result.returncode)
            if config.fail_fast:
                console.error(
                    f"Stopping: '{step.command}' failed with exit code {result.returncode}"
                )
                raise StepFailedError(result)

    if report.failed:
        LOG.warning("%d of %d steps failed", len(report.failed), len(report.results))

    console.success("Successfully created branch and committed changes!")
    console.status("You can now push the branch to remote with:")
    console.plain(f"  {PUSH_HINT}")
    return report
