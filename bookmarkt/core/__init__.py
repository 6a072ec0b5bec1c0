"""
Core bookmark modules.

This package contains the typed bookmark tree, the Netscape markup parser
and generator, and the exporters.
"""

from .data_models import (
    Bookmark,
    Document,
    Folder,
    Item,
    ItemKind,
    collect_shortcuts,
    collect_subfolders,
    item_from_dict,
)
from .netscape_parser import (
    NetscapeParser,
    NetscapeError,
    NetscapeFileError,
    NetscapeStructureError,
)
from .netscape_generator import NetscapeGenerator, NetscapeGeneratorError

__all__ = [
    'Bookmark',
    'Document',
    'Folder',
    'Item',
    'ItemKind',
    'collect_shortcuts',
    'collect_subfolders',
    'item_from_dict',
    'NetscapeParser',
    'NetscapeError',
    'NetscapeFileError',
    'NetscapeStructureError',
    'NetscapeGenerator',
    'NetscapeGeneratorError',
]
