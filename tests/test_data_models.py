"""
Unit tests for data models module.

Tests Bookmark, Folder, Document, the Item union and the nested
collection queries.
"""

import dataclasses

import pytest

from bookmarkt.core.data_models import (
    Bookmark,
    Document,
    Folder,
    Item,
    ItemKind,
    collect_shortcuts,
    collect_subfolders,
    item_from_dict,
)


class TestBookmark:
    """Test Bookmark class."""

    def test_default_creation(self):
        """Every field defaults to an empty string."""
        bookmark = Bookmark()

        assert bookmark.href == ""
        assert bookmark.title == ""
        assert bookmark.add_date == ""
        assert bookmark.last_visit == ""
        assert bookmark.last_modified == ""
        assert bookmark.icon_uri == ""
        assert bookmark.icon == ""

    def test_is_immutable(self):
        """Bookmarks cannot be changed after construction."""
        bookmark = Bookmark(href="url")
        with pytest.raises(dataclasses.FrozenInstanceError):
            bookmark.href = "other"

    def test_equality_ignores_icons(self, mock_bookmark):
        """Icons are not part of a bookmark's identity."""
        other = dataclasses.replace(mock_bookmark, icon="", icon_uri="favicon")

        assert other == mock_bookmark
        assert hash(other) == hash(mock_bookmark)

    @pytest.mark.parametrize(
        "field_name", ["href", "title", "add_date", "last_visit", "last_modified"]
    )
    def test_equality_uses_identifying_fields(self, mock_bookmark, field_name):
        """Changing any identifying field breaks equality."""
        other = dataclasses.replace(mock_bookmark, **{field_name: "changed"})
        assert other != mock_bookmark

    def test_kind(self, mock_bookmark):
        """A bookmark is the shortcut variant."""
        assert mock_bookmark.kind is ItemKind.SHORTCUT
        assert mock_bookmark.is_shortcut()
        assert not mock_bookmark.is_subfolder()
        assert mock_bookmark.take_shortcut() is mock_bookmark
        assert mock_bookmark.take_subfolder() is None


class TestFolder:
    """Test Folder class."""

    def test_default_creation(self):
        """Folders default to no flags and no children."""
        folder = Folder()

        assert folder.title == ""
        assert folder.folded is False
        assert folder.personal_toolbar_folder is False
        assert folder.unfiled_bookmarks_folder is False
        assert folder.children == ()

    def test_children_are_frozen_in_order(self):
        """A list of children becomes a tuple with the same order."""
        items = [Bookmark(href="1"), Folder(title="2"), Bookmark(href="3")]
        folder = Folder(title="f", children=items)

        assert isinstance(folder.children, tuple)
        assert list(folder.children) == items

    def test_equality_ignores_display_flags(self):
        """Flags and last_modified do not take part in equality."""
        plain = Folder(title="f", add_date="1")
        flagged = Folder(
            title="f",
            add_date="1",
            last_modified="2",
            folded=True,
            personal_toolbar_folder=True,
            unfiled_bookmarks_folder=True,
        )

        assert plain == flagged
        assert hash(plain) == hash(flagged)

    def test_equality_compares_children(self):
        """Children and their order take part in equality."""
        a, b = Bookmark(href="a"), Bookmark(href="b")

        assert Folder(children=[a, b]) == Folder(children=[a, b])
        assert Folder(children=[a, b]) != Folder(children=[b, a])
        assert Folder(children=[a]) != Folder(children=[a, b])

    def test_kind(self):
        """A folder is the subfolder variant."""
        folder = Folder(title="f")

        assert folder.kind is ItemKind.SUBFOLDER
        assert folder.is_subfolder()
        assert folder.take_subfolder() is folder
        assert folder.take_shortcut() is None


class TestItemEquality:
    """Equality between the two variants."""

    def test_variants_never_equal(self):
        """A bookmark and a folder are unequal even with matching fields."""
        bookmark = Bookmark(title="same", add_date="1")
        folder = Folder(title="same", add_date="1")

        assert bookmark != folder
        assert folder != bookmark

    def test_item_is_abstract(self):
        """Only the two concrete variants can be created."""
        with pytest.raises(TypeError):
            Item()

        assert isinstance(Bookmark(), Item)
        assert isinstance(Folder(), Item)


class TestCollections:
    """Test nested collection queries."""

    def test_collect_nested_items(self):
        """Bookmarks and folders are gathered depth-first in order."""
        b0 = Bookmark(href="test0", title="test0")
        b1 = Bookmark(href="test1", title="test1")
        f1 = Folder(title="f1", children=[b1])
        f0 = Folder(title="f0", children=[f1])
        folder = Folder(children=[b0, f0])

        assert collect_shortcuts(folder.children) == [b0, b1]
        assert collect_subfolders(folder.children) == [f0, f1]
        assert folder.get_bookmarks() == [b0, b1]
        assert folder.get_folders() == [f0, f1]

    def test_document_queries(self, sample_document):
        """Document exposes the same queries and a summary."""
        titles = [b.title for b in sample_document.get_bookmarks()]
        folders = [f.title for f in sample_document.get_folders()]

        assert titles == ["A", "B", "C", "D"]
        assert folders == ["Reading", "Empty", "Unfiled"]
        assert sample_document.stats() == {"bookmarks": 4, "folders": 3}

    def test_empty_document(self):
        """An empty document has nothing to collect."""
        document = Document()

        assert document.get_bookmarks() == []
        assert document.get_folders() == []


class TestDictProjection:
    """Test to_dict and item_from_dict."""

    def test_bookmark_to_dict_key_order(self, mock_bookmark):
        """Keys follow declaration order."""
        assert list(mock_bookmark.to_dict()) == [
            "href",
            "title",
            "add_date",
            "last_visit",
            "last_modified",
            "icon_uri",
            "icon",
        ]

    def test_folder_to_dict_key_order(self):
        """Keys follow declaration order, children last."""
        assert list(Folder().to_dict()) == [
            "title",
            "folded",
            "add_date",
            "last_modified",
            "personal_toolbar_folder",
            "unfiled_bookmarks_folder",
            "children",
        ]

    def test_document_to_dict(self, mock_bookmark):
        """Documents nest their children's projections."""
        document = Document(title="t", heading="h", children=[mock_bookmark])

        assert document.to_dict() == {
            "title": "t",
            "heading": "h",
            "children": [mock_bookmark.to_dict()],
        }

    def test_item_from_dict_recovers_variants(self, sample_document):
        """The variant is recovered from the shape of each object."""
        rebuilt = [item_from_dict(c.to_dict()) for c in sample_document.children]

        assert rebuilt == list(sample_document.children)
        assert [type(i) for i in rebuilt] == [Bookmark, Folder, Folder, Bookmark]

    def test_item_from_dict_keeps_icons_and_flags(self, sample_document):
        """Fields outside equality survive the projection too."""
        reading = item_from_dict(sample_document.children[1].to_dict())

        assert reading.folded is True
        assert reading.children[0].icon == "data:image/png;base64,AAAA"
        assert reading.children[1].personal_toolbar_folder is True

    def test_item_from_dict_rejects_unknown_shape(self):
        """Objects with neither shape are rejected."""
        with pytest.raises(ValueError):
            item_from_dict({"title": "orphan"})
