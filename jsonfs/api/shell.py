"""
JsonShell - Filesystem-Style Navigation Interface

Presents a JSON document as a virtual filesystem navigable with familiar
CLI commands. Each instance owns its document, path, history, and
completion state, so several shells can run side by side.

Virtual Filesystem Structure:
    ~/
    ├── profile/              # object -> directory
    │   ├── name              # scalar -> file
    │   └── links/
    ├── projects/             # array of objects -> directory
    │   ├── Atlas/            # element named by its "title"
    │   └── Orbit/
    └── skills/               # array of strings -> directory
        ├── Go                # string element -> file
        └── Rust

Commands:
    help    - Show usage
    ls      - List directory contents
    cd      - Change directory
    cat     - Print a value
    clear   - Clear output

Example:
    >>> shell = JsonShell({"projects": [{"title": "Atlas"}]})
    >>> shell.cd("proj")
    >>> shell.pwd()
    '~/projects'
    >>> print(shell.cat("atl").text)
    {
      "title": "Atlas"
    }
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jsonfs.config.settings import ShellConfig
from jsonfs.errors import LoadError
from jsonfs.io.loader import load_document
from jsonfs.shell.commands import execute_command
from jsonfs.shell.completion import CompletionEngine
from jsonfs.shell.history import History
from jsonfs.tree.resolver import render_path, resolve
from jsonfs.types.paths import PathSegment
from jsonfs.types.results import CommandResult, CompletionResult, LineCategory, OutputLine

if TYPE_CHECKING:
    from jsonfs.io.loader import Fetcher
    from jsonfs.shell.render import OutputSink

logger = logging.getLogger(__name__)


class JsonShell:
    """
    Interactive shell for navigating a JSON document.

    The document is never modified. Command output is returned as a
    CommandResult and, if a sink is attached, written to it as well.
    """

    def __init__(
        self,
        document: Any,
        config: ShellConfig | None = None,
        *,
        sink: "OutputSink | None" = None,
    ) -> None:
        """Initialize shell for an already-loaded document."""
        self._document = document
        self._config = config or ShellConfig()
        self._sink = sink
        self._path: list[PathSegment] = []
        self._history = History()
        self._completion = CompletionEngine(self)
        self.load_error: LoadError | None = None

    @classmethod
    async def create(
        cls,
        config: ShellConfig | None = None,
        *,
        fetch: "Fetcher | None" = None,
        sink: "OutputSink | None" = None,
    ) -> "JsonShell":
        """
        Load ``config.data_source`` and build a shell for it.

        A load failure never propagates: the shell starts on an empty
        document and keeps the error in ``load_error``.
        """
        config = config or ShellConfig()
        error: LoadError | None = None
        try:
            document = await load_document(
                config.data_source,
                fetch=fetch,
                timeout=config.fetch_timeout,
            )
        except LoadError as e:
            logger.warning(f"{e}. Falling back to an empty document.")
            document = {}
            error = e

        shell = cls(document, config, sink=sink)
        shell.load_error = error
        return shell

    # === State ===

    @property
    def document(self) -> Any:
        return self._document

    @property
    def config(self) -> ShellConfig:
        return self._config

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return tuple(self._path)

    @property
    def completion(self) -> CompletionEngine:
        return self._completion

    def current_node(self) -> Any:
        """Node at the current path (ABSENT if the path went stale)."""
        return resolve(self._document, self._path)

    def _push_segment(self, segment: PathSegment) -> None:
        self._path.append(segment)
        logger.debug(f"cd -> {self.pwd()}")

    def _pop_segment(self) -> None:
        if self._path:
            self._path.pop()
        logger.debug(f"cd -> {self.pwd()}")

    def _reset_path(self) -> None:
        self._path.clear()
        logger.debug("cd -> root")

    # === Navigation ===

    def pwd(self) -> str:
        """Print working directory."""
        return render_path(self._path)

    def prompt(self) -> str:
        """Prompt text, e.g. ``user@jsonfs:~/projects$ ``."""
        return f"{self._config.prompt_label}:{self.pwd()}$ "

    def cd(self, path: str) -> CommandResult:
        """Change directory (``..``, ``/``, ``~``, a key, a name, or an index)."""
        return self._run(f"cd {path}")

    def ls(self, path: str | None = None) -> CommandResult:
        """List the current directory, or a child directory without entering it."""
        return self._run(f"ls {path}" if path else "ls")

    # === Content Access ===

    def cat(self, path: str) -> CommandResult:
        """Print a child value."""
        return self._run(f"cat {path}")

    # === Session Management ===

    def history(self, limit: int = 20) -> list[str]:
        """Get command history for this session."""
        return self._history.tail(limit)

    def recall_previous(self) -> str | None:
        """Up arrow: older history entry, or None if there is no history."""
        return self._history.previous()

    def recall_next(self) -> str | None:
        """Down arrow: newer entry, "" past the newest, None if not recalling."""
        return self._history.next()

    def complete(self, line: str, *, backward: bool = False) -> CompletionResult:
        """Tab (or Shift-Tab) completion for the pending input line."""
        return self._completion.complete(line, backward=backward)

    # === Execution ===

    def welcome(self) -> CommandResult:
        """Startup output: any load error, then the welcome message."""
        result = CommandResult()
        if self.load_error is not None:
            result.add(str(self.load_error), LineCategory.ERROR)
        if self._config.welcome_message:
            result.add(self._config.welcome_message, LineCategory.SUCCESS)
        self._emit(result)
        return result

    def execute(self, command: str, *, echo: bool = False) -> CommandResult:
        """
        Execute a shell command string.

        Args:
            command: Raw input line, e.g. "cd projects" or "/cat 2"
            echo: Prepend the prompt and command as a command-echo line

        Returns:
            Everything the command produced
        """
        prompt = self.prompt()
        stripped = command.strip()
        if stripped:
            self._history.append(stripped)
        else:
            self._history.reset_cursor()
        self._completion.reset()

        result = execute_command(self, stripped)
        if echo:
            result.lines.insert(0, _echo_line(prompt, stripped))
        self._emit(result)
        return result

    def execute_batch(self, commands: list[str], *, echo: bool = False) -> list[CommandResult]:
        """Execute multiple commands, returning all outputs."""
        return [self.execute(cmd, echo=echo) for cmd in commands]

    def _run(self, command: str) -> CommandResult:
        result = execute_command(self, command)
        self._emit(result)
        return result

    def _emit(self, result: CommandResult) -> None:
        if self._sink is not None:
            self._sink.write(result)


def _echo_line(prompt: str, command: str) -> OutputLine:
    return OutputLine(text=f"{prompt}{command}", category=LineCategory.COMMAND_ECHO)
