"""
Shell Internals

Command dispatch, completion, history, and rendering behind JsonShell.

Modules:
    commands: Verb parsing, argument resolution, and handlers (help, ls, cd, cat, clear)
    completion: Tab / Shift-Tab completion state machine
    history: Up/Down command recall
    render: Output sinks (in-memory and rich)
    repl: prompt_toolkit prompt loop

Argument Resolution Order:
    objects: exact key -> fuzzy over keys
    arrays:  index (1-based, then 0-based) -> exact name -> fuzzy over names
"""

__all__ = []
