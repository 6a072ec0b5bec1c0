"""
bookmarkt: read and write browser bookmark exports.

Parses the Netscape bookmark file format written by Firefox, Chrome and
Edge into a typed tree of folders and shortcuts, renders that tree back to
markup, and projects it to JSON.
"""

from typing import Union
from pathlib import Path

__version__ = "1.0.0"

from .core.data_models import Bookmark, Document, Folder, Item, ItemKind
from .core.netscape_parser import (
    NetscapeParser,
    NetscapeError,
    NetscapeFileError,
    NetscapeStructureError,
)
from .core.netscape_generator import render_document, render_item
from .core.exporters.json_exporter import to_json


def parse_file(path: Union[str, Path]) -> Document:
    """Parse a bookmark file with default settings."""
    return NetscapeParser().parse_file(path)


def parse_html(html_content: str) -> Document:
    """Parse bookmark markup held in a string."""
    return NetscapeParser().parse_html(html_content)


__all__ = [
    "__version__",
    "Bookmark",
    "Document",
    "Folder",
    "Item",
    "ItemKind",
    "NetscapeParser",
    "NetscapeError",
    "NetscapeFileError",
    "NetscapeStructureError",
    "parse_file",
    "parse_html",
    "render_document",
    "render_item",
    "to_json",
]
