"""
The fixed recipe for the interactive map branch.

Everything a run does is decided here: the branch to create, the paths
to stage (in order) and the commit message. None of it is configurable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Tuple

BRANCH_NAME = "feature/interactive-map"

MAP_COMPONENT_PATHS: Tuple[str, ...] = (
    "client/src/components/maps/MapComponent.tsx",
    "client/src/components/maps/MapComponent.css",
    "client/src/components/maps/leaflet-types.ts",
    "client/src/components/maps/index.ts",
    "client/src/components/maps/README.md",
    "client/src/components/maps/DOCUMENTATION.md",
    "client/src/components/maps/UPGRADE.md",
    "client/src/components/maps/backup-info.txt",
)

# Detail views updated to use the map.
DETAIL_VIEW_PATHS: Tuple[str, ...] = (
    "client/src/components/inventory/details/StateDetails.tsx",
    "client/src/components/inventory/details/CountyDetails.tsx",
    "client/src/components/inventory/details/PropertyDetails.tsx",
)

FILES_TO_STAGE: Tuple[str, ...] = MAP_COMPONENT_PATHS + DETAIL_VIEW_PATHS

COMMIT_MESSAGE = """Implement interactive map component with enhanced visualizations

- Added vibrant color themes with semantic meaning (orange, yellow, blue, red, gray)
- Implemented glow/pulse animations for active items
- Added rich interactive popups with action buttons
- Created zoom/focus animations when selecting locations
- Added overlay metrics dashboard and stats panel
- Implemented timeline slider for historical data view
- Added legend panel and filter chips
- Added dark/light mode toggle
- Enhanced tooltips and markers
- Added comprehensive documentation and upgrade guide"""

PUSH_HINT = f"git push -u origin {BRANCH_NAME}"

StepKind = Literal["branch", "stage", "commit"]


@dataclass(frozen=True)
class Step:
    """
    A single git invocation in the recipe.

    target is the branch name, the path or the commit message, depending
    on kind.
    """

    kind: StepKind
    target: str

    @property
    def args(self) -> Tuple[str, ...]:
        if self.kind == "branch":
            return ("checkout", "-b", self.target)
        if self.kind == "stage":
            return ("add", self.target)
        return ("commit", "-m", self.target)

    @property
    def command(self) -> str:
        if self.kind == "commit":
            # The message spans lines; show only its subject.
            subject = self.target.splitlines()[0] if self.target else ""
            return f'git commit -m "{subject} ..."'
        return " ".join(("git", *self.args))


def build_steps() -> List[Step]:
    """
    Return the ordered steps: create the branch, stage each path, commit.
    """

    steps = [Step(kind="branch", target=BRANCH_NAME)]
    steps.extend(Step(kind="stage", target=path) for path in FILES_TO_STAGE)
    steps.append(Step(kind="commit", target=COMMIT_MESSAGE))
    return steps
