"""
Data models for bookmarkt.

This module defines the typed tree that a Netscape bookmark document is
mapped to: shortcuts (Bookmark), subfolders (Folder), the Item union over
the two, and the top-level Document.

All records are immutable. A Folder owns its children outright, so any
recursive walk over the tree terminates without cycle detection.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class ItemKind(Enum):
    """The two kinds of entries a folder can hold."""

    SHORTCUT = "shortcut"
    SUBFOLDER = "subfolder"


class Item(ABC):
    """
    Base for the entries of a folder: either a Bookmark or a Folder.

    There are exactly two subclasses. RSS feeds and legacy web slices,
    which the file format also describes, are not modelled.
    """

    kind: ItemKind

    def is_shortcut(self) -> bool:
        """Check if the item is a shortcut."""
        return self.kind is ItemKind.SHORTCUT

    def is_subfolder(self) -> bool:
        """Check if the item is a subfolder."""
        return self.kind is ItemKind.SUBFOLDER

    def take_shortcut(self) -> Optional["Bookmark"]:
        """The item as a Bookmark, or None if it is a folder."""
        return self if isinstance(self, Bookmark) else None

    def take_subfolder(self) -> Optional["Folder"]:
        """The item as a Folder, or None if it is a bookmark."""
        return self if isinstance(self, Folder) else None

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dictionary of the item."""
        pass


@dataclass(frozen=True, eq=False)
class Bookmark(Item):
    """
    A shortcut: the ``<A>`` element of a bookmark file.

    Timestamps are kept verbatim as strings (browsers write UNIX seconds,
    but nothing guarantees it). ``icon`` is usually a base64 ``data:`` URI.

    Equality ignores ``icon_uri`` and ``icon``: icons do not identify a
    bookmark.
    """

    kind = ItemKind.SHORTCUT

    href: str = ""
    title: str = ""
    add_date: str = ""
    last_visit: str = ""
    last_modified: str = ""
    icon_uri: str = ""
    icon: str = ""

    def _identity(self) -> Tuple[str, ...]:
        return (
            self.href,
            self.add_date,
            self.last_visit,
            self.last_modified,
            self.title,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bookmark):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((Bookmark, self._identity()))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dictionary, keys in declaration order."""
        return {
            "href": self.href,
            "title": self.title,
            "add_date": self.add_date,
            "last_visit": self.last_visit,
            "last_modified": self.last_modified,
            "icon_uri": self.icon_uri,
            "icon": self.icon,
        }


@dataclass(frozen=True, eq=False)
class Folder(Item):
    """
    A subfolder: an ``<H3>`` heading plus the ``<DL>`` list that follows it.

    ``children`` keeps the order of the original outline. Equality only
    looks at ``title``, ``add_date`` and ``children``; the display flags
    (``folded``, toolbar and unfiled markers) and ``last_modified`` are
    left out.
    """

    kind = ItemKind.SUBFOLDER

    title: str = ""
    folded: bool = False
    add_date: str = ""
    last_modified: str = ""
    personal_toolbar_folder: bool = False
    unfiled_bookmarks_folder: bool = False
    children: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def _identity(self) -> Tuple[Any, ...]:
        return (self.title, self.add_date, self.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Folder):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((Folder, self._identity()))

    def get_bookmarks(self) -> List[Bookmark]:
        """All bookmarks nested anywhere below this folder."""
        return collect_shortcuts(self.children)

    def get_folders(self) -> List["Folder"]:
        """All folders nested anywhere below this folder."""
        return collect_subfolders(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dictionary, keys in declaration order."""
        return {
            "title": self.title,
            "folded": self.folded,
            "add_date": self.add_date,
            "last_modified": self.last_modified,
            "personal_toolbar_folder": self.personal_toolbar_folder,
            "unfiled_bookmarks_folder": self.unfiled_bookmarks_folder,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(frozen=True)
class Document:
    """
    A parsed bookmark file.

    ``title`` comes from ``<TITLE>`` and ``heading`` from ``<H1>``. Browsers
    usually write the same text in both, but they are read independently.
    """

    title: str = ""
    heading: str = ""
    children: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def get_bookmarks(self) -> List[Bookmark]:
        """Gets all nested bookmarks of the document."""
        return collect_shortcuts(self.children)

    def get_folders(self) -> List[Folder]:
        """Gets all nested folders of the document."""
        return collect_subfolders(self.children)

    def stats(self) -> Dict[str, int]:
        return {
            "bookmarks": len(self.get_bookmarks()),
            "folders": len(self.get_folders()),
        }

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dictionary, keys in declaration order."""
        return {
            "title": self.title,
            "heading": self.heading,
            "children": [child.to_dict() for child in self.children],
        }


def collect_shortcuts(items: Iterable[Item]) -> List[Bookmark]:
    """
    Collect every bookmark in ``items``, descending into folders.

    Bookmarks are returned in document order.
    """
    found: List[Bookmark] = []

    for item in items:
        if isinstance(item, Folder):
            found.extend(collect_shortcuts(item.children))
        elif isinstance(item, Bookmark):
            found.append(item)

    return found


def collect_subfolders(items: Iterable[Item]) -> List[Folder]:
    """
    Collect every folder in ``items``, descending into folders.

    Each folder comes before the folders nested inside it.
    """
    found: List[Folder] = []

    for item in items:
        if isinstance(item, Folder):
            found.append(item)
            found.extend(collect_subfolders(item.children))

    return found


def item_from_dict(data: Dict[str, Any]) -> Item:
    """
    Rebuild an Item from its JSON projection.

    The projection carries no type tag, so the variant is recovered from the
    shape of the object: ``href`` only exists on bookmarks and ``children``
    only on folders.

    Raises:
        ValueError: If the object has neither shape
    """
    if "href" in data and "children" not in data:
        return Bookmark(
            href=data.get("href", ""),
            title=data.get("title", ""),
            add_date=data.get("add_date", ""),
            last_visit=data.get("last_visit", ""),
            last_modified=data.get("last_modified", ""),
            icon_uri=data.get("icon_uri", ""),
            icon=data.get("icon", ""),
        )

    if "children" in data and "href" not in data:
        return Folder(
            title=data.get("title", ""),
            folded=bool(data.get("folded", False)),
            add_date=data.get("add_date", ""),
            last_modified=data.get("last_modified", ""),
            personal_toolbar_folder=bool(data.get("personal_toolbar_folder", False)),
            unfiled_bookmarks_folder=bool(data.get("unfiled_bookmarks_folder", False)),
            children=[item_from_dict(child) for child in data["children"]],
        )

    raise ValueError(
        f"Cannot tell a bookmark from a folder with fields: {sorted(data)}"
    )
