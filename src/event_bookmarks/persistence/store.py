"""SQLAlchemy bookmark store implementing IBookmarkStore."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from event_bookmarks.domain.bookmark import Bookmark
from event_bookmarks.ports.bookmark_store import IBookmarkStore
from event_bookmarks.primitives.exceptions import (
    BookmarkConflictError,
    BookmarkPersistenceError,
)

from .models import DEFAULT_SEQUENCE_COLUMN, DEFAULT_TABLE_NAME, build_bookmarks_table

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sqlalchemy import Executable, MetaData, Table
    from sqlalchemy.orm import Session

    SessionFactory = Callable[[], Session]

logger = logging.getLogger("event_bookmarks.sqlalchemy")

_ON_CONFLICT_DIALECTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}
_ON_DUPLICATE_KEY_DIALECTS = {"mysql": mysql_insert, "mariadb": mysql_insert}


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


class SQLAlchemyBookmarkStore(IBookmarkStore):
    """
    SQLAlchemy implementation of IBookmarkStore.

    Stores one row per bookmark name (see
    :func:`~event_bookmarks.persistence.models.build_bookmarks_table`).
    Every call opens a session from ``session_factory`` and runs exactly one
    transaction. Saves are a single ``INSERT ... ON CONFLICT`` style upsert
    on PostgreSQL, SQLite and MySQL/MariaDB, so concurrent writers never
    race between an existence check and the write.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        *,
        table_name: str = DEFAULT_TABLE_NAME,
        sequence_column: str = DEFAULT_SEQUENCE_COLUMN,
        metadata: MetaData | None = None,
    ) -> None:
        """
        Initialize bookmark store with session factory.

        Args:
            session_factory: Factory that creates new Session instances.
            table_name: Name of the bookmarks table.
            sequence_column: Physical name of the sequence column.
            metadata: Optional MetaData to register the table on.
        """
        self._session_factory = session_factory
        self._table = build_bookmarks_table(
            table_name, metadata=metadata, sequence_column=sequence_column
        )

    @property
    def table(self) -> Table:
        return self._table

    def bookmark_for(self, name: str) -> Bookmark:
        return next(iter(self.bookmarks_for((name,))))

    def bookmarks_for(self, names: Iterable[str]) -> set[Bookmark]:
        """Load all requested bookmarks with a single ``IN`` query."""
        requested = set(names)
        if not requested:
            return set()
        # Validates every name before the database is touched.
        empty = {name: Bookmark.empty(name) for name in requested}

        table = self._table
        stmt = select(table.c.name, table.c.sequence).where(
            table.c.name.in_(requested)
        )
        try:
            with self._session_factory() as session, session.begin():
                rows = session.execute(stmt).all()
        except SQLAlchemyError as exc:
            logger.error("Failed to load bookmarks %s: %s", sorted(requested), exc)
            raise BookmarkPersistenceError(
                f"Failed to load {len(requested)} bookmark(s): {exc}",
                bookmark_names=requested,
            ) from exc

        logger.debug("Loaded %d of %d bookmarks", len(rows), len(requested))
        found = {Bookmark(name=name, sequence=sequence) for name, sequence in rows}
        missing = requested - {bookmark.name for bookmark in found}
        return found | {empty[name] for name in missing}

    def save(self, bookmark: Bookmark) -> None:
        """Insert or update the row for ``bookmark.name``.

        ``created_at`` is only written on insert; ``updated_at`` on every save.
        """
        try:
            with self._session_factory() as session, session.begin():
                self._upsert(session, bookmark, utcnow())
        except IntegrityError as exc:
            logger.error("Conflict saving bookmark %s: %s", bookmark.name, exc)
            raise BookmarkConflictError(
                f"Conflict saving bookmark {bookmark.name!r}: {exc}",
                bookmark_names=(bookmark.name,),
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Failed to save bookmark %s: %s", bookmark.name, exc)
            raise BookmarkPersistenceError(
                f"Failed to save bookmark {bookmark.name!r}: {exc}",
                bookmark_names=(bookmark.name,),
            ) from exc

    def create_schema_if_not_exists(self) -> None:
        """Create the bookmarks table unless it already exists."""
        try:
            with self._session_factory() as session, session.begin():
                self._table.create(session.connection(), checkfirst=True)
        except SQLAlchemyError as exc:
            logger.error("Failed to create table %s: %s", self._table.name, exc)
            raise BookmarkPersistenceError(
                f"Failed to create table {self._table.name!r}: {exc}"
            ) from exc
        logger.debug("Ensured bookmark table %s exists", self._table.name)

    def upsert_statement(
        self, dialect: str, bookmark: Bookmark, now: datetime
    ) -> Executable | None:
        """
        Build the single-statement upsert for ``dialect``.

        Returns None when the dialect has no native insert-or-update.
        """
        table = self._table
        values = _insert_values(bookmark, now)
        changes = _update_values(bookmark, now)

        if dialect in _ON_CONFLICT_DIALECTS:
            # ON CONFLICT (name) DO UPDATE
            return (
                _ON_CONFLICT_DIALECTS[dialect](table)
                .values(values)
                .on_conflict_do_update(index_elements=[table.c.name], set_=changes)
            )
        if dialect in _ON_DUPLICATE_KEY_DIALECTS:
            return (
                _ON_DUPLICATE_KEY_DIALECTS[dialect](table)
                .values(values)
                .on_duplicate_key_update(changes)
            )
        return None

    def _upsert(self, session: Session, bookmark: Bookmark, now: datetime) -> None:
        dialect = session.get_bind().dialect.name
        stmt = self.upsert_statement(dialect, bookmark, now)
        if stmt is not None:
            session.execute(stmt)
            return

        table = self._table
        values = _insert_values(bookmark, now)
        changes = _update_values(bookmark, now)
        # No native upsert: lock the row if it exists, then insert or update.
        # Two first-time inserts can still collide and raise IntegrityError.
        logger.debug("Dialect %s has no native upsert, using row lock", dialect)
        existing = session.execute(
            select(table.c.name).where(table.c.name == bookmark.name).with_for_update()
        ).first()
        if existing is None:
            session.execute(insert(table).values(values))
        else:
            session.execute(
                update(table).where(table.c.name == bookmark.name).values(changes)
            )


def _insert_values(bookmark: Bookmark, now: datetime) -> dict[str, Any]:
    return {
        "name": bookmark.name,
        "sequence": bookmark.sequence,
        "created_at": now,
        "updated_at": now,
    }


def _update_values(bookmark: Bookmark, now: datetime) -> dict[str, Any]:
    # created_at is written once, on insert.
    return {"sequence": bookmark.sequence, "updated_at": now}
