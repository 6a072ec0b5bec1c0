"""
JSON document exporter.

The JSON projection mirrors the typed tree. Objects keep their fields in
declaration order and items carry no type tag: a bookmark is the object
with ``href``, a folder the one with ``children``.
"""

import json
from typing import Any, Dict, Optional, Union

from .base import DocumentExporter
from ..data_models import Document, Item

COMPACT_SEPARATORS = (",", ":")


def to_dict(obj: Union[Document, Item]) -> Dict[str, Any]:
    """JSON-ready dictionary for a Document or an Item."""
    return obj.to_dict()


def to_json(
    obj: Union[Document, Item],
    indent: Optional[int] = None,
    ensure_ascii: bool = False,
) -> str:
    """
    Serialize a Document or an Item.

    Args:
        obj: What to serialize
        indent: Indentation; None gives compact output without spaces
        ensure_ascii: Escape non-ASCII characters

    Returns:
        The JSON text
    """
    return json.dumps(
        to_dict(obj),
        indent=indent,
        ensure_ascii=ensure_ascii,
        separators=COMPACT_SEPARATORS if indent is None else None,
    )


class JSONExporter(DocumentExporter):
    """
    Export documents to JSON.

    Example:
        >>> exporter = JSONExporter(indent=2)
        >>> result = exporter.export(document, Path("bookmarks.json"))
    """

    def __init__(self, indent: Optional[int] = None, ensure_ascii: bool = False):
        """
        Initialize the JSON exporter.

        Args:
            indent: Number of spaces for indentation (None for compact output)
            ensure_ascii: Whether to escape non-ASCII characters
        """
        super().__init__()
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    @property
    def format_name(self) -> str:
        return "JSON"

    @property
    def file_extension(self) -> str:
        return "json"

    def render(self, document: Document) -> str:
        return to_json(document, indent=self.indent, ensure_ascii=self.ensure_ascii)
