"""
Unit tests for the fixed book data source lookups
"""

import dataclasses

import pytest

from book_catalog import base
from book_catalog.book_model import BookFormat


class TestDataSource:
    def test_three_books_in_order(self):
        assert [book.title for book in base.all_books()] == [
            "The Awakening",
            "City of Glass",
            "The Eagle Has Landed",
        ]

    def test_ids_are_unique(self):
        ids = [book.id for book in base.books]
        assert ids == [1, 2, 3]

    def test_records_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            base.books[0].title = "Changed"

    def test_all_books_returns_a_copy(self):
        listed = base.all_books()
        listed.clear()
        assert len(base.all_books()) == 3

    def test_kindle_is_unused(self):
        assert all(book.format != BookFormat.KINDLE for book in base.books)


class TestLookups:
    def test_find_by_id(self):
        books = base.find_books_by_id(1)
        assert len(books) == 1
        assert books[0].title == "The Awakening"

    def test_find_by_unknown_id(self):
        assert base.find_books_by_id(99) == []

    def test_find_by_title(self):
        book = base.find_book_by_title("City of Glass")
        assert book.author == "Paul Auster"
        assert book.format is BookFormat.HARDCOVER

    def test_find_by_unknown_title(self):
        assert base.find_book_by_title("Nonexistent Title") is None

    def test_find_by_format_member(self):
        books = base.find_books_by_format(BookFormat.PAPERBACK)
        assert [book.title for book in books] == ["The Eagle Has Landed"]

    def test_find_by_format_wire_value(self):
        """Formats compare equal to their wire strings."""
        books = base.find_books_by_format("AUDIOBOOK")
        assert [book.id for book in books] == [1]

    def test_find_by_format_without_matches(self):
        assert base.find_books_by_format(BookFormat.KINDLE) == []
