"""
Tests for ShellConfig.
"""

import pytest

from jsonfs.config.settings import ShellConfig

ENV_VARS = (
    "JSONFS_PROMPT_LABEL",
    "JSONFS_DATA_SOURCE",
    "JSONFS_WELCOME_MESSAGE",
    "JSONFS_INDENT",
    "JSONFS_LOG_LEVEL",
    "JSONFS_FETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestShellConfig:
    """Test configuration sources and precedence."""

    def test_defaults(self):
        config = ShellConfig()
        assert config.prompt_label == "user@jsonfs"
        assert config.data_source == "./data.json"
        assert config.welcome_message == "Type help. Press <Tab> for autocomplete."
        assert config.indent == 2
        assert config.log_level == "WARNING"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("JSONFS_PROMPT_LABEL", "me@host")
        monkeypatch.setenv("JSONFS_INDENT", "4")
        monkeypatch.setenv("JSONFS_FETCH_TIMEOUT", "2.5")
        monkeypatch.setenv("JSONFS_LOG_LEVEL", "debug")
        config = ShellConfig.from_env()
        assert config.prompt_label == "me@host"
        assert config.indent == 4
        assert config.fetch_timeout == 2.5
        assert config.log_level == "DEBUG"

    def test_kwargs_override_environment(self, monkeypatch):
        monkeypatch.setenv("JSONFS_PROMPT_LABEL", "me@host")
        assert ShellConfig(prompt_label="other").prompt_label == "other"

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            ShellConfig(colour="blue")

    def test_from_file(self, tmp_path):
        path = tmp_path / "jsonfs.toml"
        path.write_text(
            '[shell]\n'
            'prompt_label = "me@portfolio"\n'
            'data_source = "https://example.com/data.json"\n'
            'indent = 4\n'
            '\n'
            '[logging]\n'
            'level = "DEBUG"\n'
        )
        config = ShellConfig.from_file(path)
        assert config.prompt_label == "me@portfolio"
        assert config.data_source == "https://example.com/data.json"
        assert config.indent == 4
        assert config.log_level == "DEBUG"

    def test_from_file_flat_keys(self, tmp_path):
        path = tmp_path / "jsonfs.toml"
        path.write_text('welcome_message = "hi"\n')
        assert ShellConfig.from_file(path).welcome_message == "hi"

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ShellConfig.from_file(tmp_path / "missing.toml")

    def test_to_file(self, tmp_path):
        path = tmp_path / "out" / "jsonfs.toml"
        ShellConfig(prompt_label='say "hi"', indent=3).to_file(path)
        loaded = ShellConfig.from_file(path)
        assert loaded.prompt_label == 'say "hi"'
        assert loaded.indent == 3

    def test_with_overrides(self):
        config = ShellConfig(prompt_label="a")
        updated = config.with_overrides(prompt_label="b", data_source=None)
        assert updated.prompt_label == "b"
        assert updated.data_source == config.data_source
        assert config.prompt_label == "a"

    def test_with_overrides_unknown_option(self):
        config = ShellConfig()
        with pytest.raises(ValueError, match="Unknown configuration option: promt_label"):
            config.with_overrides(promt_label="typo")
        with pytest.raises(ValueError, match="Unknown configuration option"):
            config.with_overrides(to_file="x")
