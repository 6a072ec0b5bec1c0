"""
Case-insensitive lookups over a parsed BeautifulSoup tree.

The Netscape bookmark format has no formal grammar and browsers disagree on
the case of tags and attributes, so every lookup here ignores case. Absence
is never an error: missing attributes give ``None`` (or a default) and
non-element nodes simply never match.
"""

from typing import Iterator, NamedTuple, Optional

from bs4 import Tag
from bs4.element import PageElement


class Attribute(NamedTuple):
    """An attribute as found in the tree: its raw name and its value."""

    name: str
    value: str


def is_element(node: Optional[PageElement], tag_name: str) -> bool:
    """Return True if ``node`` is an element named ``tag_name`` (any case)."""
    if not isinstance(node, Tag) or node.name is None:
        return False
    return node.name.lower() == tag_name.lower()


def select_attribute(node: Optional[PageElement], name: str) -> Optional[Attribute]:
    """
    Find the first attribute of ``node`` whose name matches ``name``.

    Args:
        node: Any tree node
        name: Attribute name, compared case-insensitively

    Returns:
        The matching Attribute, or None if the node is not an element or
        carries no such attribute
    """
    if not isinstance(node, Tag):
        return None

    wanted = name.lower()
    for raw_name, value in node.attrs.items():
        if raw_name.lower() == wanted:
            if isinstance(value, list):
                value = " ".join(value)
            return Attribute(raw_name, value if value is not None else "")

    return None


def attribute_value(node: Optional[PageElement], name: str, default: str = "") -> str:
    """Value of the attribute ``name``, or ``default`` when it is absent."""
    attribute = select_attribute(node, name)
    if attribute is None:
        return default
    return attribute.value


def has_attribute(node: Optional[PageElement], name: str) -> bool:
    """Presence test, for bare flags such as ``FOLDED``."""
    return select_attribute(node, name) is not None


def text_contents(node: Optional[PageElement]) -> str:
    """Concatenated text of all descendants, empty string if none."""
    if node is None:
        return ""
    return node.get_text()


def children(node: Optional[PageElement]) -> Iterator[PageElement]:
    """Direct children of ``node``, text nodes included."""
    if isinstance(node, Tag):
        yield from node.children


def element_children(node: Optional[PageElement]) -> Iterator[Tag]:
    """Direct children of ``node`` that are elements."""
    for child in children(node):
        if isinstance(child, Tag):
            yield child


def following_siblings(node: Optional[PageElement]) -> Iterator[PageElement]:
    """Siblings after ``node`` in document order."""
    if node is not None:
        yield from node.next_siblings


def find_child(node: Optional[PageElement], tag_name: str) -> Optional[Tag]:
    """First direct child element named ``tag_name``, or None."""
    for child in element_children(node):
        if is_element(child, tag_name):
            return child
    return None


def first_element_child(node: Optional[PageElement]) -> Optional[Tag]:
    """First direct child that is an element, or None."""
    return next(element_children(node), None)
