"""
Tab Completion

A small state machine scoped to one prompt line. Each Tab (or Shift-Tab)
press either:

    - completes a unique match outright,
    - extends the argument to the matches' common prefix,
    - shows the match list as a hint, or
    - cycles through the remembered matches.

Cycling starts once a press finds the same match list as the previous press,
or when the line is still exactly what the previous press produced. The
state is reset when a command is submitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from jsonfs.tree.naming import candidate_names
from jsonfs.types.results import CompletionResult
from jsonfs.utils.fuzzy import common_prefix, fuzzy_filter

if TYPE_CHECKING:
    from jsonfs.api.shell import JsonShell

logger = logging.getLogger(__name__)

VERB_MARKER = "/"


@dataclass(frozen=True)
class ParsedLine:
    """
    An input line split into verb and argument.

    ``"/cd pro"`` parses to marker "/", verb_token "cd", argument "pro".
    """

    marker: str
    verb_token: str
    argument: str

    @property
    def verb(self) -> str:
        return self.verb_token.lower()

    def with_argument(self, argument: str) -> str:
        """Rebuild the line with a new argument region."""
        return f"{self.marker}{self.verb_token} {argument}"


def parse_line(raw: str) -> ParsedLine:
    """Split a raw input line; a leading verb marker is kept aside."""
    text = raw.strip()
    marker = VERB_MARKER if text.startswith(VERB_MARKER) else ""
    body = text[len(marker):].lstrip()
    parts = body.split(maxsplit=1)
    verb_token = parts[0] if parts else ""
    argument = parts[1].strip() if len(parts) > 1 else ""
    return ParsedLine(marker=marker, verb_token=verb_token, argument=argument)


class CompletionEngine:
    """Tab / Shift-Tab completion for one shell instance."""

    def __init__(self, shell: "JsonShell") -> None:
        self._shell = shell
        self._matches: list[str] = []
        self._index = -1
        self._last_line: str | None = None

    @property
    def matches(self) -> list[str]:
        return list(self._matches)

    @property
    def index(self) -> int:
        return self._index

    def reset(self) -> None:
        """Forget the current session (called on submit)."""
        self._matches = []
        self._index = -1
        self._last_line = None

    def candidates(self, verb: str) -> list[str]:
        """Child names offered for ``verb``; cd only offers directories."""
        node = self._shell.current_node()
        return candidate_names(node, containers_only=verb == "cd")

    def find_matches(self, parsed: ParsedLine) -> list[str]:
        candidates = self.candidates(parsed.verb)
        if not parsed.argument:
            return candidates
        return fuzzy_filter(candidates, parsed.argument)

    def complete(self, line: str, *, backward: bool = False) -> CompletionResult:
        """
        Handle one Tab (or Shift-Tab when ``backward``) press.

        Args:
            line: Current input line
            backward: Cycle toward earlier matches

        Returns:
            The new line and an optional hint list
        """
        parsed = parse_line(line)
        if not parsed.verb_token:
            return CompletionResult(line=line)

        cycling = bool(self._matches) and line == self._last_line
        if not cycling:
            matches = self.find_matches(parsed)
            if not matches:
                return CompletionResult(line=line)
            cycling = matches == self._matches

        if cycling:
            return self._cycle(parsed, line, backward=backward)

        self._matches = matches
        self._index = -1

        if len(matches) == 1:
            new_line = parsed.with_argument(matches[0])
        else:
            prefix = common_prefix(matches)
            if len(prefix) <= len(parsed.argument):
                # Nothing to extend; the next press starts cycling at 0
                self._last_line = line
                logger.debug(f"Completion hint with {len(matches)} matches")
                return CompletionResult(line=line, hint=list(matches))
            new_line = parsed.with_argument(prefix)

        self._last_line = new_line
        return CompletionResult(line=new_line, changed=new_line != line)

    def _cycle(self, parsed: ParsedLine, line: str, *, backward: bool) -> CompletionResult:
        count = len(self._matches)
        step = -1 if backward else 1
        self._index = (self._index + step) % count
        new_line = parsed.with_argument(self._matches[self._index])
        self._last_line = new_line
        return CompletionResult(line=new_line, changed=new_line != line)
