"""InMemoryBookmarkStore — dict-backed fake for unit tests."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from event_bookmarks.domain.bookmark import Bookmark
from event_bookmarks.ports.bookmark_store import IBookmarkStore

if TYPE_CHECKING:
    from collections.abc import Iterable


class InMemoryBookmarkStore(IBookmarkStore):
    """In-memory implementation of ``IBookmarkStore``.

    Keeps sequences in a plain dict keyed by bookmark name. Safe to share
    between threads.
    """

    def __init__(self) -> None:
        self._sequences: dict[str, int] = {}
        self._lock = threading.Lock()

    def bookmark_for(self, name: str) -> Bookmark:
        with self._lock:
            sequence = self._sequences.get(name, 0)
        return Bookmark(name=name, sequence=sequence)

    def bookmarks_for(self, names: Iterable[str]) -> set[Bookmark]:
        requested = set(names)
        with self._lock:
            found = {name: self._sequences.get(name, 0) for name in requested}
        return {Bookmark(name=name, sequence=seq) for name, seq in found.items()}

    def save(self, bookmark: Bookmark) -> None:
        with self._lock:
            self._sequences[bookmark.name] = bookmark.sequence

    def __len__(self) -> int:
        with self._lock:
            return len(self._sequences)
