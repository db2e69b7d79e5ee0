"""
Output Rendering

Sinks consume CommandResult values. The shell never formats for a terminal
itself.

Sinks:
    ListSink: Keeps lines in memory (tests, embedding)
    RichRenderer: Prints to a rich Console with per-category styles
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.text import Text

from jsonfs.types.results import CommandResult, LineCategory, OutputLine


class OutputSink(Protocol):
    """Anything that can display command results."""

    def write(self, result: CommandResult) -> None: ...


class ListSink:
    """In-memory sink; ``clear`` empties it."""

    def __init__(self) -> None:
        self.lines: list[OutputLine] = []

    def write(self, result: CommandResult) -> None:
        if result.clear:
            self.lines.clear()
        self.lines.extend(result.lines)

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self.lines]


CATEGORY_STYLES: dict[LineCategory, str] = {
    LineCategory.COMMAND_ECHO: "bold cyan",
    LineCategory.PLAIN: "",
    LineCategory.SUCCESS: "green",
    LineCategory.ERROR: "red",
}


class RichRenderer:
    """Renders results to a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def write(self, result: CommandResult) -> None:
        if result.clear:
            self.console.clear()
        for line in result.lines:
            # Text avoids rich markup parsing of JSON brackets
            self.console.print(Text(line.text, style=CATEGORY_STYLES[line.category]))

    def print_hint(self, matches: list[str]) -> None:
        """Show completion candidates below the prompt."""
        self.console.print(Text("  ".join(matches), style=CATEGORY_STYLES[LineCategory.PLAIN]))
