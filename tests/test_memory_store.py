"""Tests for InMemoryBookmarkStore."""

from __future__ import annotations

import pytest

from event_bookmarks import Bookmark, IBookmarkStore, InMemoryBookmarkStore


class TestInMemoryBookmarkStore:
    """Test InMemoryBookmarkStore reads and upserts."""

    @pytest.fixture
    def store(self) -> InMemoryBookmarkStore:
        """Create fresh store for each test."""
        return InMemoryBookmarkStore()

    def test_satisfies_protocol(self, store: InMemoryBookmarkStore) -> None:
        assert isinstance(store, IBookmarkStore)

    def test_unknown_name_is_zero(self, store: InMemoryBookmarkStore) -> None:
        assert store.bookmark_for("proj-A") == Bookmark(name="proj-A", sequence=0)
        assert len(store) == 0

    def test_save_then_read(self, store: InMemoryBookmarkStore) -> None:
        store.save(Bookmark(name="proj-A", sequence=42))

        assert store.bookmark_for("proj-A") == Bookmark(name="proj-A", sequence=42)

    def test_overwrite_keeps_single_record(self, store: InMemoryBookmarkStore) -> None:
        store.save(Bookmark(name="n", sequence=5))
        store.save(Bookmark(name="n", sequence=9))

        assert len(store) == 1
        assert store.bookmark_for("n") == Bookmark(name="n", sequence=9)

    def test_bookmarks_for_defaults_and_dedupes(
        self, store: InMemoryBookmarkStore
    ) -> None:
        store.save(Bookmark(name="a", sequence=3))

        result = store.bookmarks_for(["a", "b", "a"])

        assert result == {
            Bookmark(name="a", sequence=3),
            Bookmark(name="b", sequence=0),
        }

    def test_bookmarks_for_empty(self, store: InMemoryBookmarkStore) -> None:
        assert store.bookmarks_for(set()) == set()
