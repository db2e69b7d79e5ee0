"""
Tests for path resolution and path types.
"""

import pytest
from pydantic import ValidationError

from jsonfs.tree.resolver import (
    ABSENT,
    NodeKind,
    is_container,
    node_kind,
    render_path,
    resolve,
)
from jsonfs.types.paths import IndexSegment, KeySegment

DOCUMENT = {
    "projects": [
        {"title": "Atlas", "notes": None},
        {"title": "Orbit"},
    ],
    "skills": ["Go", "Rust"],
}


class TestResolve:
    """Test resolving segments against a document."""

    def test_empty_path_is_root(self):
        assert resolve(DOCUMENT, []) is DOCUMENT

    def test_key_then_index(self):
        path = [KeySegment(key="projects"), IndexSegment(index=1, derived_name="Orbit")]
        assert resolve(DOCUMENT, path) == {"title": "Orbit"}

    def test_missing_key_is_absent(self):
        assert resolve(DOCUMENT, [KeySegment(key="missing")]) is ABSENT

    def test_index_out_of_range_is_absent(self):
        path = [KeySegment(key="skills"), IndexSegment(index=2)]
        assert resolve(DOCUMENT, path) is ABSENT

    def test_kind_mismatch_is_absent(self):
        assert resolve(DOCUMENT, [IndexSegment(index=0)]) is ABSENT
        path = [KeySegment(key="skills"), KeySegment(key="Go")]
        assert resolve(DOCUMENT, path) is ABSENT

    def test_null_is_not_absent(self):
        path = [
            KeySegment(key="projects"),
            IndexSegment(index=0),
            KeySegment(key="notes"),
        ]
        assert resolve(DOCUMENT, path) is None

    def test_absent_is_falsy_singleton(self):
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
        assert type(ABSENT)() is ABSENT


class TestRenderPath:
    """Test prompt path rendering."""

    def test_root(self):
        assert render_path([]) == "~"

    def test_nested_uses_derived_names(self):
        path = [KeySegment(key="projects"), IndexSegment(index=0, derived_name="Atlas")]
        assert render_path(path) == "~/projects/Atlas"

    def test_index_without_name_is_positional(self):
        assert render_path([IndexSegment(index=2)]) == "~/3.txt"


class TestNodeKind:
    """Test node classification."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ({}, NodeKind.OBJECT),
            (["a", "b"], NodeKind.ARRAY_OF_PRIMITIVES),
            ([], NodeKind.ARRAY_OF_OBJECTS),
            ([1, "a"], NodeKind.ARRAY_OF_OBJECTS),
            ([{"a": 1}], NodeKind.ARRAY_OF_OBJECTS),
            (True, NodeKind.SCALAR),
            (None, NodeKind.SCALAR),
            ("text", NodeKind.SCALAR),
        ],
    )
    def test_node_kind(self, value, expected):
        assert node_kind(value) == expected

    def test_is_container(self):
        assert is_container({})
        assert is_container([])
        assert not is_container("x")
        assert not is_container(0)


class TestSegments:
    """Test segment models."""

    def test_segments_are_frozen(self):
        segment = KeySegment(key="a")
        with pytest.raises(ValidationError):
            segment.key = "b"

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            IndexSegment(index=-1)

    def test_kind_tags(self):
        assert KeySegment(key="a").kind == "object-key"
        assert IndexSegment(index=0).kind == "array-index"
