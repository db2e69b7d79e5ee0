"""
Interactive Prompt Loop

Wires a JsonShell to a prompt_toolkit session:

    Enter           submit the line
    Tab / Shift-Tab completion (CompletionEngine)
    Up / Down       history recall (History)
    Ctrl-C          discard the current line
    Ctrl-D, exit    leave the shell
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.application import run_in_terminal
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent

if TYPE_CHECKING:
    from jsonfs.api.shell import JsonShell
    from jsonfs.shell.render import RichRenderer

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


def _replace_line(event: KeyPressEvent, text: str) -> None:
    # Caret always goes to the end of the line
    event.current_buffer.document = Document(text, cursor_position=len(text))


def build_key_bindings(shell: "JsonShell", renderer: "RichRenderer") -> KeyBindings:
    """Key bindings routing Tab and arrow keys to the shell."""
    bindings = KeyBindings()

    def _complete(event: KeyPressEvent, backward: bool) -> None:
        result = shell.complete(event.current_buffer.text, backward=backward)
        if result.changed:
            _replace_line(event, result.line)
        if result.hint:
            hint = list(result.hint)
            run_in_terminal(lambda: renderer.print_hint(hint))

    @bindings.add("tab")
    def _tab(event: KeyPressEvent) -> None:
        _complete(event, backward=False)

    @bindings.add("s-tab")
    def _shift_tab(event: KeyPressEvent) -> None:
        _complete(event, backward=True)

    @bindings.add("up")
    def _up(event: KeyPressEvent) -> None:
        text = shell.recall_previous()
        if text is not None:
            _replace_line(event, text)

    @bindings.add("down")
    def _down(event: KeyPressEvent) -> None:
        text = shell.recall_next()
        if text is not None:
            _replace_line(event, text)

    return bindings


def is_exit_command(line: str) -> bool:
    return line.strip().lstrip("/").lower() in EXIT_COMMANDS


def run_repl(shell: "JsonShell", renderer: "RichRenderer") -> None:
    """
    Run the prompt loop until exit or end of input.

    Every submitted line, including a failing one, is followed by a fresh
    prompt showing the current path.
    """
    session: PromptSession[str] = PromptSession(
        key_bindings=build_key_bindings(shell, renderer),
        complete_while_typing=False,
    )

    while True:
        try:
            line = session.prompt(FormattedText([("ansicyan", shell.prompt())]))
        except KeyboardInterrupt:
            # Clear current line and return to a fresh prompt
            shell.completion.reset()
            continue
        except EOFError:
            break

        if is_exit_command(line):
            break

        shell.execute(line)

    logger.debug("Shell session ended")
