"""
ShellConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> shell = await JsonShell.create()

    >>> # Explicit configuration
    >>> config = ShellConfig(
    ...     prompt_label="me@portfolio",
    ...     data_source="./data.json",
    ... )
    >>> shell = await JsonShell.create(config)

    >>> # From config file
    >>> config = ShellConfig.from_file("./jsonfs.toml")

Environment Variables:
    JSONFS_PROMPT_LABEL - Label shown before the path in each prompt
    JSONFS_DATA_SOURCE - Path, URL, or "-" for the JSON document
    JSONFS_WELCOME_MESSAGE - Line printed once at startup
    JSONFS_INDENT - Indentation used by cat for structured values
    JSONFS_LOG_LEVEL - Logging level name for the CLI
    JSONFS_FETCH_TIMEOUT - Seconds to wait when fetching a URL
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

# TOML support: tomllib is built-in for Python 3.11+, use tomli for 3.10
try:
    import tomllib

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomllib.load(f))

except ImportError:
    try:
        import tomli

        def _load_toml(path: Path) -> dict[str, Any]:
            with open(path, "rb") as f:
                return cast(dict[str, Any], tomli.load(f))

    except ImportError:
        def _load_toml(path: Path) -> dict[str, Any]:
            raise ImportError(
                "TOML parsing requires 'tomli' on Python 3.10. "
                "Install with: pip install tomli"
            )


class ShellConfig:
    """Configuration for a jsonfs shell."""

    # === Shell Configuration ===

    prompt_label: str = "user@jsonfs"
    """Shown before the path in each prompt, e.g. "user@jsonfs:~/projects$ " """

    data_source: str = "./data.json"
    """Where to fetch the JSON document: file path, http(s) URL, or "-" for stdin"""

    welcome_message: str = "Type help. Press <Tab> for autocomplete."
    """Printed once after the document is loaded"""

    # === Output Configuration ===

    indent: int = 2
    """Indentation for structured values printed by cat"""

    # === Loading Configuration ===

    fetch_timeout: float = 10.0
    """Seconds to wait for a URL data source"""

    # === Logging Configuration ===

    log_level: str = "WARNING"
    """Logging level name used by the CLI"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if hasattr(self, key) and not key.startswith("_"):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        import os

        if label := os.getenv("JSONFS_PROMPT_LABEL"):
            self.prompt_label = label
        if source := os.getenv("JSONFS_DATA_SOURCE"):
            self.data_source = source
        if message := os.getenv("JSONFS_WELCOME_MESSAGE"):
            self.welcome_message = message
        if indent := os.getenv("JSONFS_INDENT"):
            self.indent = int(indent)
        if level := os.getenv("JSONFS_LOG_LEVEL"):
            self.log_level = level.upper()
        if timeout := os.getenv("JSONFS_FETCH_TIMEOUT"):
            self.fetch_timeout = float(timeout)

    @classmethod
    def from_file(cls, path: str | Path) -> "ShellConfig":
        """
        Load configuration from TOML file.

        Example TOML:
            [shell]
            prompt_label = "me@portfolio"
            data_source = "https://example.com/data.json"
            welcome_message = "Welcome!"
            indent = 4

            [logging]
            level = "DEBUG"

        Args:
            path: Path to TOML configuration file

        Returns:
            ShellConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
            ImportError: If tomli not installed on Python 3.10
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        flat_config: dict[str, Any] = {}

        section_mapping = {
            "shell": "",
            "logging": "log_",
        }

        for section, prefix in section_mapping.items():
            if section in data:
                for key, value in data[section].items():
                    flat_config[f"{prefix}{key}"] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if key not in section_mapping and not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "ShellConfig":
        """Load configuration from environment variables only."""
        return cls()

    def to_file(self, path: str | Path) -> None:
        """
        Save configuration to TOML file.

        Args:
            path: Path to write TOML configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        sections: dict[str, dict[str, str | int | float]] = {
            "shell": {
                "prompt_label": self.prompt_label,
                "data_source": self.data_source,
                "welcome_message": self.welcome_message,
                "indent": self.indent,
                "fetch_timeout": self.fetch_timeout,
            },
            "logging": {
                "level": self.log_level,
            },
        }

        # Build TOML string manually (avoids extra dependency)
        lines = ["# jsonfs Configuration", ""]

        for section_name, section_values in sections.items():
            lines.append(f"[{section_name}]")
            for key, value in section_values.items():
                if isinstance(value, str):
                    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
                    lines.append(f'{key} = "{escaped}"')
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
            lines.append("")

        path.write_text("\n".join(lines))

    def with_overrides(self, **kwargs: Any) -> "ShellConfig":
        """Return new config with specified overrides."""
        new_config = ShellConfig.__new__(ShellConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if not hasattr(self, key) or key.startswith("_") or callable(getattr(self, key)):
                raise ValueError(f"Unknown configuration option: {key}")
            if value is not None:
                setattr(new_config, key, value)
        return new_config
