"""Table definition for bookmark storage."""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, MetaData, String, Table

from event_bookmarks.domain.bookmark import NAME_MAX_LENGTH

DEFAULT_TABLE_NAME = "bookmarks"
DEFAULT_SEQUENCE_COLUMN = "sequence"


def build_bookmarks_table(
    table_name: str = DEFAULT_TABLE_NAME,
    *,
    metadata: MetaData | None = None,
    sequence_column: str = DEFAULT_SEQUENCE_COLUMN,
) -> Table:
    """
    Return the bookmarks table registered on ``metadata``.

    The sequence column is always addressed as ``table.c.sequence``; its
    physical name can differ (older deployments store it in ``value``).
    If ``metadata`` already holds a table with this name it is reused.

    Args:
        table_name: Physical table name.
        metadata: MetaData to register on. A private one is created if None.
        sequence_column: Physical name of the sequence column.
    """
    if metadata is None:
        metadata = MetaData()
    existing = metadata.tables.get(table_name)
    if existing is not None:
        return existing

    return Table(
        table_name,
        metadata,
        Column("name", String(NAME_MAX_LENGTH), primary_key=True),
        Column(sequence_column, BigInteger, key="sequence", nullable=False),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    )
