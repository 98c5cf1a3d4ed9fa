"""Colorized status output for map_branch runs."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

STATUS_STYLE = "blue"
SUCCESS_STYLE = "green"
ERROR_STYLE = "red"


class StatusConsole:
    """Prints progress, success and error lines in fixed colors.

    Messages are wrapped in Text so paths and brackets are never parsed as
    rich markup.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def _emit(self, message: str, style: Optional[str] = None) -> None:
        self.console.print(
            Text(message, style=style or ""), highlight=False, soft_wrap=True
        )

    def status(self, message: str) -> None:
        self._emit(message, STATUS_STYLE)

    def success(self, message: str) -> None:
        self._emit(message, SUCCESS_STYLE)

    def error(self, message: str) -> None:
        self._emit(message, ERROR_STYLE)

    def plain(self, message: str) -> None:
        self._emit(message)
