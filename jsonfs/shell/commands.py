"""
Shell Commands

Parses a submitted line into verb + argument and dispatches it:

    help                    Static usage text
    ls [name]               List the current directory (or a named child)
    cd <key|name|N|..|/>    Change directory
    cat <key|name|N|N.txt>  Print a value
    clear                   Clear prior output

Handlers return CommandResult values and raise ShellError subclasses for
user mistakes. The dispatcher turns every failure into one error line, so a
command never aborts the shell.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any, Callable

from jsonfs.errors import NotAContainerError, NotFoundError, ShellError, UsageError
from jsonfs.tree.naming import Child, child_names, positional_name
from jsonfs.tree.resolver import ABSENT, NodeKind, is_container, node_kind
from jsonfs.types.paths import IndexSegment, KeySegment
from jsonfs.types.results import AmbiguousMatch, CommandResult, LineCategory
from jsonfs.utils.fuzzy import fuzzy_filter

if TYPE_CHECKING:
    from jsonfs.api.shell import JsonShell

logger = logging.getLogger(__name__)

VERB_MARKER = "/"
EMPTY_LISTING = "(empty)"
ROOT_ARGUMENTS = ("/", "~")
PARENT_ARGUMENT = ".."

_NUMERIC_ARGUMENT = re.compile(r"^(\d+)(\.txt)?$", re.IGNORECASE | re.ASCII)

HELP_LINES = [
    "  help                     Show this help",
    "  ls [name]                List the current directory (or a child)",
    "  cd <key|name|..|/>       Enter a directory (fuzzy matching & Tab completion)",
    "  cat <key|name|N|N.txt>   Show a file or object (fuzzy matching & Tab completion)",
    "  clear                    Clear the screen",
    "Tips: Tab autocompletes, Shift+Tab cycles backward, Up/Down recall history.",
    "Commands may be prefixed with /, e.g. /ls.",
]


# =============================================================================
# Parsing
# =============================================================================

def parse_command(line: str) -> tuple[str, str]:
    """
    Parse a line into (verb_token, argument).

    The verb keeps its original casing so unknown commands can be echoed
    back; the argument is the rest of the line, trimmed.
    """
    text = line.strip()
    if text.startswith(VERB_MARKER):
        text = text[len(VERB_MARKER):].lstrip()
    parts = text.split(maxsplit=1)
    if not parts:
        return "", ""
    return parts[0], parts[1].strip() if len(parts) > 1 else ""


def numeric_index(argument: str, length: int) -> int | None:
    """
    Interpret ``3`` or ``3.txt`` as an array index.

    Numbers in 1..length are 1-based; otherwise 0 addresses the first
    element. Anything else is None.
    """
    match = _NUMERIC_ARGUMENT.match(argument)
    if match is None:
        return None
    n = int(match.group(1))
    if 1 <= n <= length:
        return n - 1
    if 0 <= n < length:
        return n
    return None


def format_value(value: Any, indent: int = 2) -> str:
    """Strings verbatim; everything else as indented JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=indent, ensure_ascii=False)


# =============================================================================
# Resolution
# =============================================================================

def _single_or_ambiguous(children: list[Child]) -> Child | AmbiguousMatch:
    if len(children) == 1:
        return children[0]
    # Same derived name on several elements: offer their positional names
    return AmbiguousMatch(
        candidates=[positional_name(int(child.selector)) for child in children],
        label=children[0].name,
    )


def _fuzzy_pick(pool: list[Child], argument: str) -> Child | AmbiguousMatch | None:
    names = list(dict.fromkeys(child.name for child in pool))
    matches = fuzzy_filter(names, argument)
    if not matches:
        return None
    if len(matches) > 1:
        return AmbiguousMatch(candidates=matches)
    return _single_or_ambiguous([child for child in pool if child.name == matches[0]])


def resolve_argument(
    node: Any,
    argument: str,
    *,
    containers_only: bool = False,
) -> Child | AmbiguousMatch | None:
    """
    Resolve an argument against the children of ``node``.

    Objects: exact key, then fuzzy over keys.
    Arrays: numeric index, then exact derived name (case-sensitive first,
    then case-insensitive), then fuzzy over derived names.

    With ``containers_only`` the numeric, name, and fuzzy steps only consider
    directories. An exact object key is returned even if it is a leaf so the
    caller can report it precisely.

    Returns:
        The child, an AmbiguousMatch, or None if nothing matched
    """
    if isinstance(node, dict):
        if argument in node:
            value = node[argument]
            return Child(argument, argument, value, is_container(value))
        return _fuzzy_pick(child_names(node, containers_only=containers_only), argument)

    if isinstance(node, list):
        children = child_names(node)
        pool = [child for child in children if child.is_container] if containers_only else children

        index = numeric_index(argument, len(node))
        if index is not None and (not containers_only or children[index].is_container):
            return children[index]

        exact = [child for child in pool if child.name == argument]
        if not exact:
            folded = argument.lower()
            exact = [child for child in pool if child.name.lower() == folded]
        if exact:
            return _single_or_ambiguous(exact)

        return _fuzzy_pick(pool, argument)

    return None


def _render_choices(result: CommandResult, match: AmbiguousMatch, *, directories: bool) -> None:
    if match.label is not None:
        result.add(f"Multiple items named {match.label}: " + "  ".join(match.candidates))
        return
    names = [f"{name}/" for name in match.candidates] if directories else match.candidates
    result.add("  ".join(names))


# =============================================================================
# Command Implementations
# =============================================================================

def cmd_help(shell: "JsonShell", argument: str) -> CommandResult:
    """Static usage text."""
    result = CommandResult()
    result.add("Available commands:", LineCategory.SUCCESS)
    for line in HELP_LINES:
        result.add(line)
    return result


def _list_node(result: CommandResult, node: Any, indent: int) -> None:
    if isinstance(node, dict):
        if not node:
            result.add(EMPTY_LISTING)
            return
        for key, value in node.items():
            if is_container(value):
                result.add(f"{key}/", LineCategory.SUCCESS)
            else:
                result.add(key)
        return

    if isinstance(node, list):
        if not node:
            result.add(EMPTY_LISTING)
            return
        for child in child_names(node):
            result.add(child.name, LineCategory.SUCCESS if child.is_container else LineCategory.PLAIN)
        return

    result.add(format_value(node, indent))


def cmd_ls(shell: "JsonShell", argument: str) -> CommandResult:
    """
    List the current directory.

    Objects list keys (directories end in "/"), arrays list derived names,
    and a scalar node prints its value. ``ls <name>`` lists a child
    directory without entering it.
    """
    result = CommandResult()
    node = shell.current_node()
    if node is ABSENT:
        raise NotFoundError("Not found.")

    if argument:
        found = resolve_argument(node, argument)
        if isinstance(found, AmbiguousMatch):
            _render_choices(result, found, directories=False)
            return result
        if found is None:
            raise NotFoundError(f"No such file or directory: {argument}")
        if not found.is_container:
            result.add(found.name)
            return result
        node = found.value

    _list_node(result, node, shell.config.indent)
    return result


def cmd_cd(shell: "JsonShell", argument: str) -> CommandResult:
    """
    Change directory.

    ``/`` or ``~`` returns to the root, ``..`` goes up one level (a no-op at
    the root). Ambiguous fuzzy matches print the choices without moving.
    """
    result = CommandResult()
    if not argument:
        raise UsageError("Usage: cd <key|..|/>")
    if argument in ROOT_ARGUMENTS:
        shell._reset_path()
        return result
    if argument == PARENT_ARGUMENT:
        shell._pop_segment()
        return result

    node = shell.current_node()

    if isinstance(node, dict):
        found = resolve_argument(node, argument, containers_only=True)
        if isinstance(found, AmbiguousMatch):
            _render_choices(result, found, directories=True)
            return result
        if found is None:
            raise NotFoundError(f"No such directory: {argument}")
        if not found.is_container:
            raise NotAContainerError("Not a directory (expects object or array)")
        shell._push_segment(KeySegment(key=str(found.selector)))
        return result

    if isinstance(node, list):
        found = resolve_argument(node, argument, containers_only=True)
        if isinstance(found, AmbiguousMatch):
            _render_choices(result, found, directories=True)
            return result
        if found is None:
            leaf = resolve_argument(node, argument)
            if isinstance(leaf, Child) and not leaf.is_container:
                raise NotAContainerError("Not a directory (file item; use cat to view)")
            raise NotFoundError(f"No such directory: {argument}")
        shell._push_segment(IndexSegment(index=int(found.selector), derived_name=found.name))
        return result

    raise NotAContainerError("Cannot cd into a primitive value.")


def cmd_cat(shell: "JsonShell", argument: str) -> CommandResult:
    """
    Print a child value: strings verbatim, anything else as indented JSON.
    """
    result = CommandResult()
    if not argument:
        raise UsageError("Usage: cat <key|name|index|N.txt>")

    node = shell.current_node()
    indent = shell.config.indent

    if not is_container(node):
        if node is ABSENT:
            raise NotFoundError("Not found.")
        result.add(format_value(node, indent))
        return result

    found = resolve_argument(node, argument)
    if isinstance(found, AmbiguousMatch):
        _render_choices(result, found, directories=False)
        return result
    if found is None:
        kind = node_kind(node)
        if kind == NodeKind.OBJECT:
            raise NotFoundError(f"No such key: {argument}")
        if kind == NodeKind.ARRAY_OF_PRIMITIVES:
            raise NotFoundError(f"No such file: {argument}")
        raise NotFoundError(f"No such item: {argument}")

    result.add(format_value(found.value, indent))
    return result


def cmd_clear(shell: "JsonShell", argument: str) -> CommandResult:
    """Clear prior output. Path, document, and history are untouched."""
    return CommandResult(clear=True)


COMMANDS: dict[str, Callable[["JsonShell", str], CommandResult]] = {
    "help": cmd_help,
    "ls": cmd_ls,
    "cd": cmd_cd,
    "cat": cmd_cat,
    "clear": cmd_clear,
}


def execute_command(shell: "JsonShell", line: str) -> CommandResult:
    """Execute one submitted line against a shell."""
    verb_token, argument = parse_command(line)
    if not verb_token:
        return CommandResult(command=line)

    verb = verb_token.lower()
    handler = COMMANDS.get(verb)
    if handler is None:
        result = CommandResult()
        result.add(f"Command not found: {verb_token} (try help)", LineCategory.ERROR)
    else:
        try:
            result = handler(shell, argument)
        except ShellError as e:
            logger.debug(f"{verb} failed: {e}")
            result = CommandResult()
            result.add(str(e), LineCategory.ERROR)
        except Exception as e:
            logger.exception(f"Unexpected failure in {verb}")
            result = CommandResult()
            result.add(f"Error executing {verb}: {e}", LineCategory.ERROR)

    result.command = line
    return result
