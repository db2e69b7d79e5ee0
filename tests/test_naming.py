"""
Tests for display-name derivation.
"""

import pytest

from jsonfs.tree.naming import (
    best_display_key,
    candidate_names,
    child_names,
    display_name,
    filename_from_string,
    positional_name,
)


class TestDisplayNameObjects:
    """Test naming of object elements."""

    def test_preferred_key_order(self):
        # "name" outranks "title" regardless of key order
        assert display_name({"title": "Atlas", "name": "Ada"}, 0) == "Ada"

    def test_skips_blank_preferred_values(self):
        assert display_name({"name": "  ", "title": "Orbit"}, 0) == "Orbit"

    def test_identity_pattern_key(self):
        value = {"foo": "", "projectName": "Zed", "a": "b"}
        assert best_display_key(value) == "projectName"
        assert display_name(value, 0) == "Zed"

    def test_first_string_value(self):
        assert display_name({"count": 3, "summary": "Hello"}, 0) == "Hello"

    def test_id_fallback_stringified(self):
        assert display_name({"id": 42}, 0) == "42"
        assert display_name({"slug": True}, 0) == "true"

    def test_blank_id_falls_back_to_position(self):
        assert display_name({"id": ""}, 2) == "3.txt"

    def test_null_id_ignored(self):
        assert best_display_key({"id": None}) is None
        assert display_name({"id": None}, 0) == "1.txt"

    def test_positional_fallback(self):
        assert display_name({"a": 1}, 0) == "1.txt"
        assert display_name({}, 4) == "5.txt"

    def test_deterministic(self):
        value = {"role": "Engineer", "company": "Acme"}
        assert display_name(value, 1) == display_name(value, 1) == "Acme"


class TestDisplayNameOther:
    """Test naming of string and scalar elements."""

    def test_string_trimmed_and_separators_replaced(self):
        assert display_name("  a/b\\c ", 0) == "a-b-c"

    def test_blank_string_positional(self):
        assert display_name("   ", 1) == "2.txt"

    @pytest.mark.parametrize("value", [3.5, None, True, [1, 2]])
    def test_non_string_scalars_positional(self, value):
        assert display_name(value, 0) == "1.txt"

    def test_filename_from_string(self):
        assert filename_from_string("Go", 0) == "Go"
        assert filename_from_string("", 6) == "7.txt"

    def test_positional_name(self):
        assert positional_name(0) == "1.txt"
        assert positional_name(9) == "10.txt"


class TestChildNames:
    """Test child enumeration."""

    def test_object_children_in_key_order(self):
        node = {"b": 1, "a": {"x": 1}, "c": []}
        children = child_names(node)
        assert [c.name for c in children] == ["b", "a", "c"]
        assert [c.is_container for c in children] == [False, True, True]
        assert children[1].selector == "a"

    def test_array_children_use_display_names(self):
        node = [{"title": "Atlas"}, "Go", 7]
        children = child_names(node)
        assert [c.name for c in children] == ["Atlas", "Go", "3.txt"]
        assert [c.selector for c in children] == [0, 1, 2]

    def test_containers_only(self):
        node = {"leaf": 1, "dir": {}, "list": [1]}
        assert [c.name for c in child_names(node, containers_only=True)] == ["dir", "list"]

    def test_scalar_has_no_children(self):
        assert child_names("text") == []
        assert child_names(None) == []

    def test_candidate_names_sorted_and_unique(self):
        node = [{"name": "b"}, {"name": "a"}, {"name": "b"}]
        assert candidate_names(node) == ["a", "b"]
