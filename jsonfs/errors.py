"""Shell exception hierarchy.

Every command failure the user can cause is a ShellError subclass. The
dispatcher catches ShellError at the command boundary and renders it as a
single error line; nothing here ever terminates the shell.
"""

from __future__ import annotations


class ShellError(Exception):
    """Base class for expected, user-facing shell failures."""


class UsageError(ShellError):
    """A required argument is missing."""


class NotFoundError(ShellError):
    """No child of the current node matches the argument."""


class NotAContainerError(ShellError):
    """Attempted to enter a leaf value."""


class LoadError(ShellError):
    """The document could not be fetched or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load {source}: {reason}")
        self.source = source
        self.reason = reason
