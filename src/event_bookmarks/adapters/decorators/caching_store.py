"""CachingBookmarkStore - Decorator for IBookmarkStore with in-process caching."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from event_bookmarks.ports.bookmark_store import IBookmarkStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from event_bookmarks.domain.bookmark import Bookmark

logger = logging.getLogger("event_bookmarks.caching")


class CachingBookmarkStore(IBookmarkStore):
    """
    Decorator that keeps the last seen bookmark per name in process memory.

    Pattern:
    - bookmark_for(name): Check cache -> Delegate to inner -> Cache result
    - bookmarks_for(names): Cache hits + one batched delegate call for misses
    - save(bookmark): Delegate to inner -> Cache bookmark

    The cache belongs to the instance and is never evicted; a process only
    tracks a handful of bookmark names. The map is lock-guarded so one
    instance can be shared by several consumer threads. The cache lock is not
    held while the delegate runs.
    """

    def __init__(self, delegate: IBookmarkStore) -> None:
        self._delegate = delegate
        self._cache: dict[str, Bookmark] = {}
        self._lock = threading.Lock()
        # Per-name: delegate write + cache update for one name happen in order.
        self._save_locks: dict[str, threading.Lock] = {}

    @property
    def delegate(self) -> IBookmarkStore:
        return self._delegate

    def bookmark_for(self, name: str) -> Bookmark:
        """Retrieve bookmark with read-through caching."""
        with self._lock:
            cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Bookmark cache hit for %s", name)
            return cached

        logger.debug("Bookmark cache miss for %s", name)
        return self._remember(self._delegate.bookmark_for(name))

    def bookmarks_for(self, names: Iterable[str]) -> set[Bookmark]:
        """Resolve cached names locally and fetch the rest in one delegate call."""
        requested = set(names)
        with self._lock:
            results = {
                name: self._cache[name] for name in requested if name in self._cache
            }

        missing = requested - results.keys()
        if missing:
            logger.debug(
                "Bookmark cache missed %d of %d names", len(missing), len(requested)
            )
            for bookmark in self._delegate.bookmarks_for(missing):
                if bookmark.name in missing:
                    results[bookmark.name] = self._remember(bookmark)

        return set(results.values())

    def save(self, bookmark: Bookmark) -> None:
        """Write to the delegate, then to the cache.

        A failing delegate leaves the cache untouched. Saves for different
        names do not wait on each other.
        """
        with self._save_lock_for(bookmark.name):
            self._delegate.save(bookmark)
            with self._lock:
                self._cache[bookmark.name] = bookmark

    def _save_lock_for(self, name: str) -> threading.Lock:
        with self._lock:
            return self._save_locks.setdefault(name, threading.Lock())

    def _remember(self, bookmark: Bookmark) -> Bookmark:
        # A save that landed while the delegate was being read wins.
        with self._lock:
            return self._cache.setdefault(bookmark.name, bookmark)
