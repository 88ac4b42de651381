"""IBookmarkStore - Protocol for bookmark persistence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from event_bookmarks.domain.bookmark import Bookmark


@runtime_checkable
class IBookmarkStore(Protocol):
    """
    Reads and advances the progress of event stream consumers.

    Implementations never raise for unknown names: they return a bookmark
    with sequence 0 instead.
    """

    def bookmark_for(self, name: str) -> Bookmark:
        """Return the stored bookmark for ``name`` or a zero-sequence one."""
        ...

    def bookmarks_for(self, names: Iterable[str]) -> set[Bookmark]:
        """
        Return exactly one bookmark per distinct name in ``names``.
        Names without a stored record get sequence 0.
        """
        ...

    def save(self, bookmark: Bookmark) -> None:
        """Insert or overwrite the bookmark stored under ``bookmark.name``."""
        ...
