"""Infrastructure exceptions for event-bookmarks.

Absence of a bookmark is never an error; everything here describes a
failure to reach or use the backing store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class BookmarkError(Exception):
    """Root exception for the bookmarks package."""


class InfrastructureError(BookmarkError):
    """Base class for all infrastructure-related errors."""


class SessionManagementError(InfrastructureError):
    """Raised when a store cannot be wired to a database session."""


class BookmarkPersistenceError(InfrastructureError):
    """Raised when reading or writing bookmarks against the backing store fails.

    The original driver/ORM exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, bookmark_names: Iterable[str] = ()) -> None:
        self.bookmark_names = frozenset(bookmark_names)
        super().__init__(message)


class BookmarkConflictError(BookmarkPersistenceError):
    """Raised when the database rejects a save with an integrity violation.

    Usage: Surfaces uniqueness conflicts on the bookmark name. Not retried.
    """
