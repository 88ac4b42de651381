"""event-bookmarks — durable progress markers for event stream consumers.

A bookmark records the last sequence number a named consumer processed.
Stores return a zero-sequence bookmark for names that were never saved.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import CachingBookmarkStore, InMemoryBookmarkStore

# ── Domain ───────────────────────────────────────────────────────
from .domain import MAX_SEQUENCE, NAME_MAX_LENGTH, Bookmark

# ── Persistence ──────────────────────────────────────────────────
from .persistence import (
    SQLAlchemyBookmarkStore,
    build_bookmarks_table,
    create_session_factory,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IBookmarkStore

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    BookmarkConflictError,
    BookmarkError,
    BookmarkPersistenceError,
    InfrastructureError,
    SessionManagementError,
)

__all__ = [
    # Adapters
    "CachingBookmarkStore",
    "InMemoryBookmarkStore",
    # Domain
    "Bookmark",
    "MAX_SEQUENCE",
    "NAME_MAX_LENGTH",
    # Persistence
    "SQLAlchemyBookmarkStore",
    "build_bookmarks_table",
    "create_session_factory",
    # Ports
    "IBookmarkStore",
    # Primitives
    "BookmarkConflictError",
    "BookmarkError",
    "BookmarkPersistenceError",
    "InfrastructureError",
    "SessionManagementError",
]
