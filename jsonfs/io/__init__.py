"""
Document Input

Modules:
    loader: Async fetch-and-parse of the JSON document
"""

from jsonfs.io.loader import load_document, parse_document

__all__ = ["load_document", "parse_document"]
