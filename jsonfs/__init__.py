"""
jsonfs - Navigate JSON Documents Like a Filesystem

An interactive shell that presents any JSON value as a tree of directories
(objects and arrays) and files (scalars and strings), with fuzzy name
matching and cycling Tab-completion.

Example:
    >>> from jsonfs import JsonShell
    >>> shell = JsonShell({"projects": [{"title": "Atlas"}, {"title": "Orbit"}]})
    >>> shell.execute("cd projects")
    >>> shell.pwd()
    '~/projects'
    >>> [line.text for line in shell.execute("ls").lines]
    ['Atlas', 'Orbit']

Main Classes:
    JsonShell: Shell instance owning document, path, and history
    ShellConfig: Configuration management
    CompletionEngine: Tab / Shift-Tab completion state machine
"""

__version__ = "0.1.0"

# Public API - lazy imports keep CLI-only dependencies out of library use
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "JsonShell":
        from jsonfs.api.shell import JsonShell
        return JsonShell

    if name == "ShellConfig":
        from jsonfs.config.settings import ShellConfig
        return ShellConfig

    if name == "CompletionEngine":
        from jsonfs.shell.completion import CompletionEngine
        return CompletionEngine

    if name == "load_document":
        from jsonfs.io.loader import load_document
        return load_document

    # Types
    if name in ("CommandResult", "CompletionResult", "LineCategory", "OutputLine",
                "KeySegment", "IndexSegment"):
        from jsonfs import types
        return getattr(types, name)

    raise AttributeError(f"module 'jsonfs' has no attribute {name!r}")


__all__ = [
    # Main classes
    "JsonShell",
    "ShellConfig",
    "CompletionEngine",

    # Loading
    "load_document",

    # Types
    "CommandResult",
    "CompletionResult",
    "LineCategory",
    "OutputLine",
    "KeySegment",
    "IndexSegment",

    # Version
    "__version__",
]
