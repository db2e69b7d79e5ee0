"""
Document Tree

Filesystem view over a JSON value.

Modules:
    resolver: Path resolution, path rendering, shape classification
    naming: Display names for object keys and array elements

Virtual Filesystem Mapping:
    object            -> directory, one entry per key
    array             -> directory, one entry per element
    string element    -> file named after its trimmed text
    object element    -> directory named after its identity-like field
    other scalar      -> file named by position (1.txt, 2.txt, ...)
"""

from jsonfs.tree.naming import Child, candidate_names, child_names, display_name, positional_name
from jsonfs.tree.resolver import (
    ABSENT,
    NodeKind,
    is_container,
    node_kind,
    render_path,
    resolve,
)

__all__ = [
    "ABSENT",
    "Child",
    "NodeKind",
    "candidate_names",
    "child_names",
    "display_name",
    "is_container",
    "node_kind",
    "positional_name",
    "render_path",
    "resolve",
]
