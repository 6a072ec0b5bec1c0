"""
Netscape bookmark file parser.

This module maps the bookmark export written by Firefox, Chrome and Edge
(the Netscape Bookmark File format) onto the typed tree of data_models.

Parsing is permissive. A missing attribute becomes an empty
string, a missing section an empty list, and a node that is neither a
shortcut nor a folder is skipped. Only file access can fail.

The markup is built into a tree by BeautifulSoup with the html5lib tree
builder. With HTML5 tree construction a ``<DT>`` is closed by the next
``<DT>``, which leaves a folder's ``<DL>`` body as a sibling of its
``<H3>`` heading rather than a child of it.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import PageElement

from .data_models import Bookmark, Document, Folder, Item
from .node_utils import (
    attribute_value,
    children,
    find_child,
    first_element_child,
    following_siblings,
    has_attribute,
    is_element,
    text_contents,
)


class NetscapeError(Exception):
    """Base exception for Netscape bookmark parsing errors."""

    pass


class NetscapeFileError(NetscapeError):
    """Raised when a bookmark file cannot be found or read."""

    pass


class NetscapeStructureError(NetscapeError):
    """Raised when a strict parser finds no Netscape DOCTYPE."""

    pass


def bookmark_from_node(node: PageElement) -> Optional[Bookmark]:
    """
    Creates a Bookmark from an ``<A>`` element.

    A ``<DT>`` wrapper is looked through: the format always writes a
    shortcut as ``<DT><A ...>``.

    Returns:
        The Bookmark, or None if the node is not a shortcut
    """
    if is_element(node, "DT"):
        anchor = first_element_child(node)
        if is_element(anchor, "A"):
            return bookmark_from_node(anchor)
        return None

    if not is_element(node, "A"):
        return None

    return Bookmark(
        href=attribute_value(node, "HREF"),
        title=text_contents(node),
        add_date=attribute_value(node, "ADD_DATE"),
        last_visit=attribute_value(node, "LAST_VISIT"),
        last_modified=attribute_value(node, "LAST_MODIFIED"),
        icon_uri=attribute_value(node, "ICON_URI"),
        icon=attribute_value(node, "ICON"),
    )


def folder_from_node(node: PageElement) -> Optional[Folder]:
    """
    Creates a Folder from an ``<H3>`` heading and the ``<DL>`` after it.

    The folder's items live in the first ``<DL>`` among the heading's
    following siblings, so the walk goes sideways before it goes down.
    Nesting depth is only bounded by the input.

    Returns:
        The Folder, or None if the node is not a subfolder heading
    """
    if is_element(node, "DT"):
        heading = find_child(node, "H3")
        if heading is not None:
            return folder_from_node(heading)
        return None

    if not is_element(node, "H3"):
        return None

    items: List[Item] = []
    for sibling in following_siblings(node):
        if is_element(sibling, "DL"):
            items = items_from_list(sibling)
            break

    return Folder(
        title=text_contents(node),
        folded=has_attribute(node, "FOLDED"),
        add_date=attribute_value(node, "ADD_DATE"),
        last_modified=attribute_value(node, "LAST_MODIFIED"),
        personal_toolbar_folder=has_attribute(node, "PERSONAL_TOOLBAR_FOLDER"),
        unfiled_bookmarks_folder=has_attribute(node, "UNFILED_BOOKMARKS_FOLDER"),
        children=items,
    )


def item_from_node(node: PageElement) -> Optional[Item]:
    """Tries a Bookmark first, then a Folder. None if the node is neither."""
    bookmark = bookmark_from_node(node)
    if bookmark is not None:
        return bookmark

    return folder_from_node(node)


def items_from_list(dl_node: PageElement) -> List[Item]:
    """Map every child of a ``<DL>`` list, dropping the ones that are not items."""
    items = []
    for child in children(dl_node):
        item = item_from_node(child)
        if item is not None:
            items.append(item)
    return items


def document_from_node(root: PageElement) -> Document:
    """
    Creates a Document from a parsed tree.

    ``<TITLE>`` is read from ``<HEAD>``; ``<H1>`` and the top-level ``<DL>``
    from ``<BODY>``. Each of them may be missing.
    """
    if is_element(root, "HTML"):
        html = root
    else:
        html = find_child(root, "HTML")

    head = find_child(html, "HEAD")
    body = find_child(html, "BODY")

    title_node = find_child(head, "TITLE")
    heading_node = find_child(body, "H1")
    root_list = find_child(body, "DL")

    return Document(
        title=text_contents(title_node),
        heading=text_contents(heading_node),
        children=items_from_list(root_list) if root_list is not None else [],
    )


class NetscapeParser:
    """
    Parser for Netscape bookmark files.

    Wraps the mapping functions of this module with file, text and byte
    entry points, encoding handling and logging.
    """

    DOCTYPE_PATTERN = r"<!DOCTYPE\s+NETSCAPE-Bookmark-file-1>"
    TREE_BUILDER = "html5lib"

    def __init__(self, encoding: str = "utf-8", require_doctype: bool = False):
        """
        Initialize the parser.

        Args:
            encoding: Encoding used to decode byte input
            require_doctype: Refuse input without the Netscape DOCTYPE
        """
        self.encoding = encoding
        self.require_doctype = require_doctype
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config) -> "NetscapeParser":
        """Build a parser from a BookmarktConfig."""
        return cls(
            encoding=config.parser.encoding,
            require_doctype=config.parser.require_doctype,
        )

    def parse_file(self, file_path: Union[str, Path]) -> Document:
        """
        Parse a bookmark file.

        Args:
            file_path: Path to the bookmark export

        Returns:
            The parsed Document

        Raises:
            NetscapeFileError: If the file is missing or unreadable
            NetscapeStructureError: If require_doctype is set and the
                DOCTYPE is missing
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise NetscapeFileError(f"File not found: {file_path}")

        try:
            with open(file_path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise NetscapeFileError(f"Error reading file {file_path}: {e}") from e

        document = self.parse_bytes(raw)

        self.logger.info(
            f"Parsed {len(document.get_bookmarks())} bookmarks and "
            f"{len(document.get_folders())} folders from {file_path}"
        )
        return document

    def parse_bytes(self, raw: bytes) -> Document:
        """Parse raw bytes, decoding them with the configured encoding."""
        if self.require_doctype:
            self._check_doctype(raw.decode(self.encoding, errors="replace"))

        soup = BeautifulSoup(
            raw,
            self.TREE_BUILDER,
            from_encoding=self.encoding,
            multi_valued_attributes=None,
        )
        return self.parse_node(soup)

    def parse_html(self, html_content: str) -> Document:
        """
        Parse markup that is already decoded.

        Handy for tests and for documents held in memory.
        """
        if self.require_doctype:
            self._check_doctype(html_content)

        soup = BeautifulSoup(
            html_content, self.TREE_BUILDER, multi_valued_attributes=None
        )
        return self.parse_node(soup)

    def parse_node(self, root: PageElement) -> Document:
        """Map an already built tree."""
        document = document_from_node(root)

        if not document.title and not document.heading and not document.children:
            self.logger.warning("No bookmark data found in document")

        return document

    def _check_doctype(self, content: str) -> None:
        if not re.search(self.DOCTYPE_PATTERN, content, re.IGNORECASE):
            raise NetscapeStructureError(
                "File does not appear to be a Netscape bookmark export "
                "(missing DOCTYPE)"
            )

    def validate_file(self, file_path: Union[str, Path]) -> bool:
        """
        Check if a file looks like a Netscape bookmark export.

        Args:
            file_path: Path to the file to validate

        Returns:
            True if the DOCTYPE is found in the first kilobyte
        """
        try:
            file_path = Path(file_path)

            if not file_path.exists() or file_path.suffix.lower() not in (
                ".html",
                ".htm",
            ):
                return False

            with open(file_path, "r", encoding=self.encoding, errors="ignore") as f:
                header = f.read(1024)

            return bool(re.search(self.DOCTYPE_PATTERN, header, re.IGNORECASE))

        except OSError as e:
            self.logger.debug(f"Cannot validate {file_path}: {e}")
            return False

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Get information about a bookmark file without mapping it.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with file information
        """
        file_path = Path(file_path)

        info = {
            "path": str(file_path),
            "exists": file_path.exists(),
            "size_bytes": 0,
            "is_netscape_bookmarks": False,
            "estimated_bookmark_count": 0,
        }

        if not info["exists"]:
            return info

        try:
            info["size_bytes"] = file_path.stat().st_size
            info["is_netscape_bookmarks"] = self.validate_file(file_path)

            if info["is_netscape_bookmarks"]:
                with open(file_path, "r", encoding=self.encoding, errors="ignore") as f:
                    content = f.read()
                info["estimated_bookmark_count"] = len(
                    re.findall(r"<A\s+HREF=", content, re.IGNORECASE)
                )

        except OSError as e:
            self.logger.warning(f"Error getting file info for {file_path}: {str(e)}")

        return info
