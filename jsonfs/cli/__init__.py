"""
Command-Line Interface

CLI commands for jsonfs.

Commands:
    jsonfs shell  - Interactive navigation shell
    jsonfs run    - Run shell commands non-interactively
    jsonfs info   - Summarize a document's top level

Usage:
    # Explore a local file
    jsonfs shell data.json

    # Explore a remote document with a custom prompt
    jsonfs shell https://example.com/data.json --prompt-label me@portfolio

    # Scripted navigation
    jsonfs run data.json "cd projects" "ls" "cat atlas"

    # Pipe from another program
    curl -s https://example.com/data.json | jsonfs info -
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from jsonfs.config.settings import ShellConfig

__all__ = ["main", "app"]

app = typer.Typer(
    name="jsonfs",
    help="Navigate JSON documents like a filesystem",
    no_args_is_help=True,
)
console = Console(highlight=False)


def _build_config(config_path: Optional[Path], **overrides: Any) -> "ShellConfig":
    from jsonfs.config.settings import ShellConfig

    config = ShellConfig.from_file(config_path) if config_path else ShellConfig()
    return config.with_overrides(**overrides)


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _json_type(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    return "number"


@app.command()
def shell(
    source: Optional[str] = typer.Argument(
        None,
        help="JSON file, http(s) URL, or '-' for stdin (default: config data_source)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
    prompt_label: Optional[str] = typer.Option(
        None,
        "--prompt-label", "-p",
        help="Label shown before the path in each prompt",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Interactive navigation shell."""
    from jsonfs.api.shell import JsonShell
    from jsonfs.shell.render import RichRenderer
    from jsonfs.shell.repl import run_repl

    config = _build_config(config_path, data_source=source, prompt_label=prompt_label)
    _configure_logging(config.log_level, verbose)

    renderer = RichRenderer(console)
    json_shell = asyncio.run(JsonShell.create(config, sink=renderer))
    json_shell.welcome()
    run_repl(json_shell, renderer)


@app.command()
def run(
    source: str = typer.Argument(
        ...,
        help="JSON file, http(s) URL, or '-' for stdin",
    ),
    commands: list[str] = typer.Argument(
        ...,
        help="Shell commands to execute in order, e.g. \"cd projects\" ls",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="TOML configuration file",
        exists=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Run shell commands non-interactively."""
    from jsonfs.api.shell import JsonShell
    from jsonfs.shell.render import RichRenderer

    config = _build_config(config_path, data_source=source)
    _configure_logging(config.log_level, verbose)

    json_shell = asyncio.run(JsonShell.create(config, sink=RichRenderer(console)))
    if json_shell.load_error is not None:
        console.print(Text(str(json_shell.load_error), style="red"))
        raise typer.Exit(code=1)

    results = json_shell.execute_batch(commands, echo=True)
    if any(result.has_error for result in results):
        raise typer.Exit(code=1)


@app.command()
def info(
    source: str = typer.Argument(
        ...,
        help="JSON file, http(s) URL, or '-' for stdin",
    ),
) -> None:
    """Summarize a document's top level."""
    from jsonfs.errors import LoadError
    from jsonfs.io.loader import load_document
    from jsonfs.tree.naming import child_names
    from jsonfs.tree.resolver import node_kind

    try:
        document = asyncio.run(load_document(source))
    except LoadError as e:
        console.print(Text(str(e), style="red"))
        raise typer.Exit(code=1)

    children = child_names(document)
    directories = sum(1 for child in children if child.is_container)

    console.print(f"Root: {node_kind(document).value}")
    console.print(f"Entries: {len(children)} ({directories} directories, "
                  f"{len(children) - directories} files)")

    if children:
        table = Table(title=f"Document: {source}")
        table.add_column("Name", style="cyan")
        table.add_column("Type", style="dim")
        table.add_column("Size", justify="right", style="green")

        for child in children:
            size = str(len(child.value)) if child.is_container else "-"
            name = f"{child.name}/" if child.is_container else child.name
            table.add_row(Text(name), _json_type(child.value), size)

        console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    load_dotenv()
    app()
