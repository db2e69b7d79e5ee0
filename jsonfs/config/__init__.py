"""
Configuration System

Manages configuration for jsonfs with a layered approach.

Configuration Priority (highest to lowest):
    1. CLI options (applied with with_overrides)
    2. Programmatic or config file values (ShellConfig(...), --config path.toml)
    3. Environment variables (JSONFS_* prefix, .env honored by the CLI)
    4. Built-in defaults

Modules:
    settings: ShellConfig class
"""

from jsonfs.config.settings import ShellConfig

__all__ = ["ShellConfig"]
