"""Terminal display of the current completion percentage."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.text import Text


class Display(Protocol):
    """Anything that can show a percentage."""

    def show(self, percentage: float) -> None: ...


def format_percentage(percentage: float) -> str:
    return f"progress: {percentage:.2f}"


class ProgressDisplay:
    """Writes the percentage to the console, replacing the previous value."""

    def __init__(self, console: Console | None = None, *, clear: bool = True) -> None:
        self.console = console or Console()
        self.clear = clear

    def show(self, percentage: float) -> None:
        if self.clear:
            self.console.clear()
        style = "bold green" if percentage >= 100 else "yellow"
        self.console.print(Text(format_percentage(percentage), style=style))
