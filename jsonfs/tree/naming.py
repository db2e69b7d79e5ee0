"""
Display Names

Derives a stable, human-readable "filename" for every child of a node.
Object children are named by their key. Array elements are named by the
most identity-like string they carry, or by position.

All functions here are pure: the same value and index always produce the
same name, and object keys are scanned in insertion order.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from jsonfs.tree.resolver import is_container

FILE_SUFFIX = ".txt"

PREFERRED_KEYS = (
    "name",
    "title",
    "institution",
    "company",
    "organization",
    "org",
    "school",
    "degree",
    "role",
    "position",
    "project",
    "label",
    "filename",
    "file",
)

IDENTITY_KEY_PATTERN = re.compile(
    r"(name|title|company|institution|school|org|project|position|role)",
    re.IGNORECASE,
)

ID_KEYS = ("id", "slug", "key")

_PATH_SEPARATORS = re.compile(r"[/\\]")


@dataclass(frozen=True)
class Child:
    """One child of a container, as the shell presents it."""

    name: str
    selector: str | int  # object key or array index
    value: Any
    is_container: bool


def positional_name(index: int) -> str:
    """Fallback name for element ``index``: ``1.txt``, ``2.txt``, ..."""
    return f"{index + 1}{FILE_SUFFIX}"


def _is_nonempty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def best_display_key(obj: dict[str, Any]) -> str | None:
    """
    Pick the key whose value best identifies an object.

    Order:
        1. First of PREFERRED_KEYS holding a non-empty string
        2. First key matching IDENTITY_KEY_PATTERN holding a non-empty string
        3. First key holding a non-empty string
        4. First of ID_KEYS present with a non-null value
    """
    for key in PREFERRED_KEYS:
        if key in obj and _is_nonempty_string(obj[key]):
            return key
    for key, value in obj.items():
        if IDENTITY_KEY_PATTERN.search(key) and _is_nonempty_string(value):
            return key
    for key, value in obj.items():
        if _is_nonempty_string(value):
            return key
    for key in ID_KEYS:
        if key in obj and obj[key] is not None:
            return key
    return None


def filename_from_string(text: str, index: int) -> str:
    """Trimmed string with path separators replaced by dashes."""
    base = text.strip()
    if not base:
        return positional_name(index)
    return _PATH_SEPARATORS.sub("-", base)


def display_name(value: Any, index: int) -> str:
    """
    Display name for an array element.

    Args:
        value: The element
        index: Zero-based position in its array

    Returns:
        A non-empty name
    """
    if isinstance(value, dict):
        key = best_display_key(value)
        if key is not None:
            name = _stringify(value[key])
            if name.strip():
                return name
        return positional_name(index)
    if isinstance(value, str):
        return filename_from_string(value, index)
    return positional_name(index)


def child_names(node: Any, *, containers_only: bool = False) -> list[Child]:
    """
    Every child of ``node`` in document order.

    Scalars have no children. With ``containers_only`` leaves are skipped.
    """
    children: list[Child] = []
    if isinstance(node, dict):
        for key, value in node.items():
            children.append(Child(key, key, value, is_container(value)))
    elif isinstance(node, list):
        for index, value in enumerate(node):
            children.append(Child(display_name(value, index), index, value, is_container(value)))
    if containers_only:
        return [child for child in children if child.is_container]
    return children


def candidate_names(node: Any, *, containers_only: bool = False) -> list[str]:
    """Deduplicated, sorted child names for completion and listing."""
    return sorted({child.name for child in child_names(node, containers_only=containers_only)})
