"""
Netscape bookmark file generator.

This module renders the typed tree back into Netscape-Bookmark-file-1
markup. It is the inverse of netscape_parser and needs nothing but the
model: any Bookmark, Folder, Item or Document can be rendered on its own.

Values are written verbatim, without HTML escaping, the same way the
parser reads them. Output is stable under a second round trip:
render(parse(render(parse(x)))) == render(parse(x)).
"""

import logging
from pathlib import Path
from typing import List, Union

from .data_models import Bookmark, Document, Folder, Item

DOCUMENT_HEADER = [
    "<!DOCTYPE NETSCAPE-Bookmark-file-1>",
    "<!-- This is an automatically generated file.",
    "     It will be read and overwritten.",
    "     DO NOT EDIT! -->",
    '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
]

LIST_OPEN = "<DL><p>"
LIST_CLOSE = "</DL><p>"


class NetscapeGeneratorError(Exception):
    """Base exception for Netscape markup generation errors."""

    pass


def render_bookmark(bookmark: Bookmark) -> str:
    """
    Render a shortcut as a ``<DT><A>`` line.

    Every attribute is written, empty ones included.
    """
    return (
        f'<DT><A HREF="{bookmark.href}" ADD_DATE="{bookmark.add_date}" '
        f'LAST_VISIT="{bookmark.last_visit}" '
        f'LAST_MODIFIED="{bookmark.last_modified}" '
        f'ICON_URI="{bookmark.icon_uri}" ICON="{bookmark.icon}">'
        f"{bookmark.title}</A>"
    )


def _folder_attributes(folder: Folder) -> str:
    # Flags are bare and only present when set; values only when non-empty.
    attrs = []

    if folder.folded:
        attrs.append("FOLDED")
    if folder.add_date:
        attrs.append(f'ADD_DATE="{folder.add_date}"')
    if folder.last_modified:
        attrs.append(f'LAST_MODIFIED="{folder.last_modified}"')
    if folder.personal_toolbar_folder:
        attrs.append("PERSONAL_TOOLBAR_FOLDER")
    if folder.unfiled_bookmarks_folder:
        attrs.append("UNFILED_BOOKMARKS_FOLDER")

    return "".join(f" {attr}" for attr in attrs)


def _render_list(items) -> List[str]:
    lines = [LIST_OPEN]
    lines.extend(render_item(item) for item in items)
    lines.append(LIST_CLOSE)
    return lines


def render_folder(folder: Folder) -> str:
    """Render a subfolder heading followed by its ``<DL>`` body."""
    heading = f"<DT><H3{_folder_attributes(folder)}>{folder.title}</H3>"
    return "\n".join([heading] + _render_list(folder.children))


def render_item(item: Item) -> str:
    """Render either kind of item."""
    if isinstance(item, Bookmark):
        return render_bookmark(item)
    if isinstance(item, Folder):
        return render_folder(item)
    raise NetscapeGeneratorError(f"Cannot render {type(item).__name__}")


def render_document(document: Document) -> str:
    """Render a complete bookmark file."""
    lines = list(DOCUMENT_HEADER)
    lines.append(f"<TITLE>{document.title}</TITLE>")
    lines.append(f"<H1>{document.heading}</H1>")
    lines.extend(_render_list(document.children))
    return "\n".join(lines)


class NetscapeGenerator:
    """
    Generator for Netscape bookmark files.

    Renders documents to strings or writes them to disk.
    """

    def __init__(self):
        """Initialize the generator."""
        self.logger = logging.getLogger(__name__)

    def render(self, obj: Union[Document, Item]) -> str:
        """Render a Document or a single Item."""
        if isinstance(obj, Document):
            return render_document(obj)
        return render_item(obj)

    def generate_html(self, document: Document, output_path: Union[str, Path]) -> Path:
        """
        Write a Document as a bookmark file.

        Args:
            document: Document to render
            output_path: Where to write the file

        Returns:
            The path written

        Raises:
            NetscapeGeneratorError: If the file cannot be written
        """
        output_path = Path(output_path)

        try:
            self.logger.info(f"Generating bookmark file: {output_path}")

            html_content = render_document(document)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(html_content)

            self.logger.info(
                f"Wrote {len(document.get_bookmarks())} bookmarks to {output_path}"
            )
            return output_path

        except OSError as e:
            error_msg = f"Failed to write bookmark file: {str(e)}"
            self.logger.error(error_msg)
            raise NetscapeGeneratorError(error_msg) from e
