"""
Document Loading

Fetches and parses the JSON document once at shell start. This is the only
operation that may suspend; commands run synchronously afterwards.

Sources:
    ./data.json                 local file
    https://host/data.json      URL (fetched in a worker thread)
    -                           standard input

A caller can supply its own async ``fetch(source)``; it may return raw
text/bytes (parsed here) or an already-parsed JSON value.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
import urllib.request
from pathlib import Path
from typing import Any, Awaitable, Callable

from jsonfs.errors import LoadError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[Any]]

STDIN_SOURCE = "-"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_url(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    with urllib.request.urlopen(request, timeout=timeout) as response:
        status = getattr(response, "status", 200)
        if status >= 400:
            raise OSError(f"HTTP {status}")
        return response.read()


def _read_source(source: str, timeout: float) -> str | bytes:
    if source == STDIN_SOURCE:
        return sys.stdin.read()
    if is_url(source):
        return _read_url(source, timeout)
    return Path(source).expanduser().read_text(encoding="utf-8")


def parse_document(raw: str | bytes) -> Any:
    """Parse JSON text, tolerating a UTF-8 byte order mark."""
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8-sig")
    return json.loads(raw.lstrip("\ufeff"))


async def load_document(
    source: str,
    *,
    fetch: Fetcher | None = None,
    timeout: float = 10.0,
) -> Any:
    """
    Fetch and parse a JSON document.

    Args:
        source: File path, http(s) URL, or "-" for stdin
        fetch: Optional caller-supplied async fetcher
        timeout: Seconds to wait for a URL

    Returns:
        The parsed JSON value

    Raises:
        LoadError: If fetching or parsing fails
    """
    logger.debug(f"Loading document from {source}")

    if fetch is not None:
        try:
            raw = await fetch(source)
        except Exception as e:
            raise LoadError(source, str(e) or type(e).__name__) from e
        if not isinstance(raw, (str, bytes)):
            return raw
    else:
        try:
            raw = await asyncio.to_thread(_read_source, source, timeout)
        except (OSError, ValueError) as e:
            raise LoadError(source, str(e) or type(e).__name__) from e

    try:
        return parse_document(raw)
    except (ValueError, RecursionError) as e:
        raise LoadError(source, f"invalid JSON ({e})") from e
