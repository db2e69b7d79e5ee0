"""
Type Definitions

Pydantic models for paths and results.

Path Models:
    - KeySegment, IndexSegment - Hops from the root to the current node

Result Models:
    - OutputLine, LineCategory - Rendered output
    - CommandResult - Everything one command produced
    - CompletionResult - Outcome of one Tab press
    - AmbiguousMatch - Fuzzy resolution with several candidates
"""

from jsonfs.types.paths import IndexSegment, KeySegment, PathSegment
from jsonfs.types.results import (
    AmbiguousMatch,
    CommandResult,
    CompletionResult,
    LineCategory,
    OutputLine,
)

__all__ = [
    # Path Models
    "KeySegment",
    "IndexSegment",
    "PathSegment",
    # Result Models
    "AmbiguousMatch",
    "CommandResult",
    "CompletionResult",
    "LineCategory",
    "OutputLine",
]
