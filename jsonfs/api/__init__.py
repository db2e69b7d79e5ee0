"""
Public API

Classes:
    JsonShell: Shell instance over one JSON document
"""

from jsonfs.api.shell import JsonShell

__all__ = ["JsonShell"]
