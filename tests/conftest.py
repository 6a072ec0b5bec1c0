"""
Pytest configuration and shared fixtures for bookmarkt tests.

This module provides sample bookmark exports in the shapes written by
Chrome and Firefox, plus small hand-built documents.
"""

import logging
from pathlib import Path

import pytest

from bookmarkt.core.data_models import Bookmark, Document, Folder

CHROME_EXPORT = '''<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3 ADD_DATE="1715434444" LAST_MODIFIED="1717526901" PERSONAL_TOOLBAR_FOLDER="true">Bookmarks bar</H3>
    <DL><p>
        <DT><H3 ADD_DATE="1717175257" LAST_MODIFIED="1717526910">Machine Learning</H3>
        <DL><p>
            <DT><A HREF="https://example.com/" ADD_DATE="1717175221">Example Site</A>
            <DT><A HREF="https://test.com/" ADD_DATE="1717175261">Test Site</A>
        </DL><p>
        <DT><A HREF="https://direct.com/" ADD_DATE="1717175273">Direct Bookmark</A>
    </DL><p>
    <DT><H3 ADD_DATE="1634868593" LAST_MODIFIED="1634868593">Other Folder</H3>
    <DL><p>
        <DT><A HREF="https://nested.com/" ADD_DATE="1634868593">Nested Bookmark</A>
    </DL><p>
</DL><p>'''

FIREFOX_EXPORT = '''<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<Title>Bookmarks</Title>
<H1>Bookmarks Menu</H1>

<DL><p>
    <DT><H3 ADD_DATE="1600000000" LAST_MODIFIED="1600000100">Mozilla Firefox</H3>
    <DL><p>
        <DT><A HREF="https://support.mozilla.org/products/firefox" ADD_DATE="1600000001" LAST_MODIFIED="1600000002" ICON_URI="fake-favicon-uri:https://support.mozilla.org/products/firefox" ICON="data:image/png;base64,iVBORw0KGgo=">Get Help</A>
        <DD>Firefox support pages
        <DT><A HREF="https://www.mozilla.org/about/" ADD_DATE="1600000005" LAST_VISIT="1600000600">About Us</A>
    </DL><p>
    <HR>
    <DT><H3 FOLDED ADD_DATE="1600000000" LAST_MODIFIED="1600000200" PERSONAL_TOOLBAR_FOLDER="true">Bookmarks Toolbar</H3>
    <DL><p>
        <DT><A HREF="https://www.mozilla.org/firefox/central/" ADD_DATE="1600000003" LAST_MODIFIED="1600000004">Getting Started</A>
    </DL><p>
    <DT><H3 ADD_DATE="1600000000" LAST_MODIFIED="1600000300" UNFILED_BOOKMARKS_FOLDER="true">Other Bookmarks</H3>
    <DL><p>
    </DL><p>
</DL>'''

NESTED_FOLDERS = '''
<DT><H3>nested0</H3>
<DL><p>
<DT><H3>nested1</H3>
<DL><p>
<DT><H3>nested2</H3>
<DL><p>
<DT><H3>nested3</H3>
</DL><p>
</DL><p>
</DL><p>'''


@pytest.fixture
def chrome_html() -> str:
    """Bookmark export in the shape Chrome writes it."""
    return CHROME_EXPORT


@pytest.fixture
def firefox_html() -> str:
    """Bookmark export in the shape Firefox writes it."""
    return FIREFOX_EXPORT


@pytest.fixture
def nested_html() -> str:
    """Four folders nested inside each other."""
    return NESTED_FOLDERS


@pytest.fixture
def chrome_file(tmp_path, chrome_html) -> Path:
    """Chrome export written to a temporary file."""
    path = tmp_path / "bookmarks.html"
    path.write_text(chrome_html, encoding="utf-8")
    return path


@pytest.fixture
def mock_bookmark() -> Bookmark:
    """Bookmark with every field but icon_uri set."""
    return Bookmark(
        href="url",
        add_date="date",
        last_visit="date",
        last_modified="date",
        title="name",
        icon_uri="",
        icon="icon",
    )


@pytest.fixture
def sample_document() -> Document:
    """Hand-built document mixing bookmarks and nested folders."""
    return Document(
        title="My Bookmarks",
        heading="My Bookmarks",
        children=[
            Bookmark(href="https://a.example/", title="A", add_date="1"),
            Folder(
                title="Reading",
                folded=True,
                add_date="2",
                last_modified="3",
                children=[
                    Bookmark(
                        href="https://b.example/",
                        title="B",
                        add_date="4",
                        last_visit="5",
                        last_modified="6",
                        icon_uri="https://b.example/favicon.ico",
                        icon="data:image/png;base64,AAAA",
                    ),
                    Folder(title="Empty", personal_toolbar_folder=True),
                    Bookmark(href="https://c.example/", title="C"),
                ],
            ),
            Folder(title="Unfiled", unfiled_bookmarks_folder=True),
            Bookmark(href="https://d.example/", title="D"),
        ],
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the handlers setup_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
