"""Command history with Up/Down recall."""

from __future__ import annotations


class History:
    """
    Append-only list of submitted commands plus a recall cursor.

    Recall never mutates the entries. The cursor is -1 when no entry is being
    recalled; appending a command resets it.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def append(self, command: str) -> None:
        self._entries.append(command)
        self._cursor = -1

    def reset_cursor(self) -> None:
        self._cursor = -1

    def previous(self) -> str | None:
        """Step back (Up). Stops at the oldest entry; None if history is empty."""
        if not self._entries:
            return None
        if self._cursor < 0:
            self._cursor = len(self._entries) - 1
        else:
            self._cursor = max(0, self._cursor - 1)
        return self._entries[self._cursor]

    def next(self) -> str | None:
        """
        Step forward (Down).

        Past the newest entry the cursor is released and an empty line is
        returned. None means nothing is being recalled.
        """
        if self._cursor < 0:
            return None
        if self._cursor >= len(self._entries) - 1:
            self._cursor = -1
            return ""
        self._cursor += 1
        return self._entries[self._cursor]

    def tail(self, limit: int = 20) -> list[str]:
        if limit <= 0:
            return []
        return self._entries[-limit:]
