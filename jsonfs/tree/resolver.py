"""
Path Resolution

Walks a path of segments from the document root. Resolution never raises:
any mismatch yields the ABSENT sentinel, which callers treat as a stale
path. ABSENT is distinct from JSON null.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from jsonfs.types.paths import IndexSegment, KeySegment, PathSegment

ROOT_MARKER = "~"
SEPARATOR = "/"


class _Absent:
    """Sentinel for a path that does not resolve."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Any = _Absent()


class NodeKind(str, Enum):
    """Closed set of JSON shapes the shell distinguishes."""

    OBJECT = "object"
    ARRAY_OF_PRIMITIVES = "array-of-primitives"
    ARRAY_OF_OBJECTS = "array-of-objects"
    SCALAR = "scalar"


def is_container(value: Any) -> bool:
    """Objects and arrays are directories; everything else is a file."""
    return isinstance(value, (dict, list))


def node_kind(value: Any) -> NodeKind:
    """
    Classify a JSON value.

    An array counts as array-of-primitives only when it is non-empty and
    every element is a string. Mixed and empty arrays are arrays of objects.
    """
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        if value and all(isinstance(item, str) for item in value):
            return NodeKind.ARRAY_OF_PRIMITIVES
        return NodeKind.ARRAY_OF_OBJECTS
    return NodeKind.SCALAR


def resolve(document: Any, path: Sequence[PathSegment]) -> Any:
    """
    Resolve a path against a document.

    Args:
        document: Root JSON value
        path: Segments from the root

    Returns:
        The node at the path, or ABSENT on any mismatch
    """
    node = document
    for segment in path:
        if isinstance(segment, KeySegment):
            if not isinstance(node, dict) or segment.key not in node:
                return ABSENT
            node = node[segment.key]
        elif isinstance(segment, IndexSegment):
            if not isinstance(node, list) or not 0 <= segment.index < len(node):
                return ABSENT
            node = node[segment.index]
        else:
            return ABSENT
    return node


def render_path(path: Sequence[PathSegment]) -> str:
    """Display form of a path: ``~`` at the root, ``~/a/b`` below it."""
    if not path:
        return ROOT_MARKER
    return ROOT_MARKER + SEPARATOR + SEPARATOR.join(segment.label for segment in path)
