"""
Tests for jsonfs type models.
"""

import pytest
from pydantic import ValidationError

import jsonfs
from jsonfs.types import (
    AmbiguousMatch,
    CommandResult,
    CompletionResult,
    LineCategory,
    OutputLine,
)


class TestOutputLine:
    """Test OutputLine model."""

    def test_default_category(self):
        assert OutputLine(text="x").category == LineCategory.PLAIN

    def test_category_values(self):
        assert LineCategory.COMMAND_ECHO.value == "command-echo"
        assert LineCategory.PLAIN.value == "plain-output"
        assert LineCategory("error") is LineCategory.ERROR

    def test_text_required(self):
        with pytest.raises(ValidationError):
            OutputLine()


class TestCommandResult:
    """Test CommandResult model."""

    def test_add_and_text(self):
        result = CommandResult(command="ls")
        result.add("a/", LineCategory.SUCCESS)
        result.add("b")
        assert result.text == "a/\nb"
        assert not result.has_error
        assert not result.clear

    def test_has_error(self):
        result = CommandResult()
        result.add("Not found.", LineCategory.ERROR)
        assert result.has_error

    def test_lines_not_shared(self):
        first = CommandResult()
        first.add("x")
        assert CommandResult().lines == []


class TestCompletionResult:
    """Test CompletionResult model."""

    def test_cursor_at_end(self):
        result = CompletionResult(line="cd projects", changed=True)
        assert result.cursor_position == 11
        assert result.hint is None


class TestAmbiguousMatch:
    """Test AmbiguousMatch model."""

    def test_defaults(self):
        match = AmbiguousMatch(candidates=["a", "b"])
        assert match.label is None


class TestPackageExports:
    """Test lazy top-level exports."""

    def test_lazy_attributes(self):
        from jsonfs.api.shell import JsonShell

        assert jsonfs.JsonShell is JsonShell
        assert jsonfs.LineCategory is LineCategory

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            jsonfs.not_a_thing
