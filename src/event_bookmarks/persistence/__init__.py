"""SQLAlchemy persistence adapter for bookmarks."""

from __future__ import annotations

from .models import DEFAULT_SEQUENCE_COLUMN, DEFAULT_TABLE_NAME, build_bookmarks_table
from .session import create_session_factory
from .store import SQLAlchemyBookmarkStore

__all__ = [
    "DEFAULT_SEQUENCE_COLUMN",
    "DEFAULT_TABLE_NAME",
    "SQLAlchemyBookmarkStore",
    "build_bookmarks_table",
    "create_session_factory",
]
