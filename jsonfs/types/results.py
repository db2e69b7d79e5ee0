"""
Result Types

Structured values returned by command handlers and the completion engine.
Renderers consume these; nothing in here touches a terminal.

Models:
    - LineCategory: Display category for an output line
    - OutputLine: One rendered line of output
    - CommandResult: Everything a submitted command produced
    - CompletionResult: The outcome of one Tab / Shift-Tab press
    - AmbiguousMatch: Several candidates matched a fuzzy argument
"""

from enum import Enum

from pydantic import BaseModel, Field


class LineCategory(str, Enum):
    """Display category of an output line. Purely cosmetic."""

    COMMAND_ECHO = "command-echo"
    PLAIN = "plain-output"
    SUCCESS = "success"
    ERROR = "error"


class OutputLine(BaseModel):
    """
    A single line (or preformatted block) of shell output.

    Attributes:
        text: Text to display; may contain newlines for pretty-printed JSON
        category: Display category
    """

    text: str
    category: LineCategory = LineCategory.PLAIN


class CommandResult(BaseModel):
    """
    Result of executing one submitted line.

    Attributes:
        command: The raw line as submitted
        lines: Output lines in display order
        clear: Whether prior output should be cleared before rendering
    """

    command: str = ""
    lines: list[OutputLine] = Field(default_factory=list)
    clear: bool = False

    def add(self, text: str, category: LineCategory = LineCategory.PLAIN) -> None:
        """Append one output line."""
        self.lines.append(OutputLine(text=text, category=category))

    @property
    def has_error(self) -> bool:
        """True if any line is in the error category."""
        return any(line.category == LineCategory.ERROR for line in self.lines)

    @property
    def text(self) -> str:
        """All output joined with newlines."""
        return "\n".join(line.text for line in self.lines)


class CompletionResult(BaseModel):
    """
    Outcome of a Tab / Shift-Tab press.

    Attributes:
        line: Input line after completion (unchanged on no-op)
        changed: Whether ``line`` differs from the input
        hint: Matches to print below the prompt, if any
    """

    line: str
    changed: bool = False
    hint: list[str] | None = None

    @property
    def cursor_position(self) -> int:
        """Caret always lands at the end of the line."""
        return len(self.line)


class AmbiguousMatch(BaseModel):
    """
    More than one candidate matched a fuzzy argument.

    Not an error: the caller shows the choices and leaves state unchanged.

    Attributes:
        candidates: Names to choose from
        label: Set when several elements share one derived name; the
            candidates are then their positional names ("1.txt", "3.txt")
    """

    candidates: list[str]
    label: str | None = None
