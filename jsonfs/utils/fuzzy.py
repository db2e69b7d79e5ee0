"""
Fuzzy Name Matching

Scores candidate names against free text. Tiers never add up: an exact
match always beats a prefix match, which beats a substring match, which
beats any subsequence match.
"""

from __future__ import annotations

from typing import Iterable

EXACT_SCORE = 1000
PREFIX_SCORE = 800
SUBSTRING_SCORE = 600
SUBSEQUENCE_BASE = 400

CONTAINER_MARKER = "/"


def normalize_name(text: str) -> str:
    """Trimmed, lower-cased form used for comparisons."""
    return str(text).strip().lower()


def score(candidate: str, query: str) -> int:
    """
    Score how well ``candidate`` matches ``query``.

    Returns:
        0 for no match (including an empty query), otherwise a positive score
    """
    c = normalize_name(candidate)
    q = normalize_name(query)
    if not q:
        return 0
    if c == q:
        return EXACT_SCORE
    if c.startswith(q):
        return PREFIX_SCORE
    if q in c:
        return SUBSTRING_SCORE

    hits = 0
    for ch in c:
        if hits == len(q):
            break
        if ch == q[hits]:
            hits += 1
    if hits == 0:
        return 0
    # Capped so very long queries stay below the substring tier
    return min(SUBSEQUENCE_BASE + hits, SUBSTRING_SCORE - 1)


def fuzzy_filter(candidates: Iterable[str], query: str) -> list[str]:
    """
    Matching candidates, best first.

    A single trailing container marker is ignored while scoring but kept in
    the returned names. Ties are broken by name.
    """
    scored = []
    for name in candidates:
        bare = name[:-1] if name.endswith(CONTAINER_MARKER) else name
        value = score(bare, query)
        if value > 0:
            scored.append((value, name))
    scored.sort(key=lambda item: (-item[0], item[1]))
    return [name for _, name in scored]


def common_prefix(strings: list[str]) -> str:
    """
    Longest case-insensitive common prefix, cased like the first string.
    """
    if not strings:
        return ""
    prefix = strings[0]
    for other in strings[1:]:
        while not other.lower().startswith(prefix.lower()):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix
