"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from jsonfs.cli import app

runner = CliRunner()

DOCUMENT = {"projects": [{"title": "Atlas"}, {"title": "Orbit"}], "skills": ["Go"], "count": 3}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("JSONFS_PROMPT_LABEL", "JSONFS_DATA_SOURCE", "JSONFS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return path


class TestRunCommand:
    """Test non-interactive execution."""

    def test_run_commands(self, data_file):
        result = runner.invoke(app, ["run", str(data_file), "cd projects", "ls"])
        assert result.exit_code == 0
        assert "user@jsonfs:~$ cd projects" in result.output
        assert "user@jsonfs:~/projects$ ls" in result.output
        assert "Atlas" in result.output
        assert "Orbit" in result.output

    def test_run_failing_command(self, data_file):
        result = runner.invoke(app, ["run", str(data_file), "cd nope"])
        assert result.exit_code == 1
        assert "No such directory: nope" in result.output

    def test_run_missing_document(self, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path / "missing.json"), "ls"])
        assert result.exit_code == 1
        assert "Failed to load" in result.output

    def test_run_with_config(self, data_file, tmp_path):
        config_path = tmp_path / "jsonfs.toml"
        config_path.write_text('[shell]\nprompt_label = "me@test"\n')
        result = runner.invoke(app, ["run", str(data_file), "ls", "--config", str(config_path)])
        assert result.exit_code == 0
        assert "me@test:~$ ls" in result.output


class TestInfoCommand:
    """Test the document summary."""

    def test_info(self, data_file):
        result = runner.invoke(app, ["info", str(data_file)])
        assert result.exit_code == 0
        assert "Root: object" in result.output
        assert "Entries: 3 (2 directories, 1 files)" in result.output
        assert "projects/" in result.output
        assert "array" in result.output

    def test_info_missing_document(self, tmp_path):
        result = runner.invoke(app, ["info", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Failed to load" in result.output
