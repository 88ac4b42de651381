"""Shared fixtures for event-bookmarks tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from event_bookmarks import SQLAlchemyBookmarkStore

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy.engine import Engine


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    # File database so that every session sees the same data.
    eng = create_engine(f"sqlite:///{tmp_path / 'bookmarks.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def sql_store(session_factory: sessionmaker[Session]) -> SQLAlchemyBookmarkStore:
    store = SQLAlchemyBookmarkStore(session_factory)
    store.create_schema_if_not_exists()
    return store
