"""Tests for create_session_factory."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from event_bookmarks import (
    Bookmark,
    SessionManagementError,
    SQLAlchemyBookmarkStore,
    create_session_factory,
)


class TestCreateSessionFactory:
    def test_from_url(self, tmp_path) -> None:
        factory = create_session_factory(f"sqlite:///{tmp_path / 'from_url.db'}")
        store = SQLAlchemyBookmarkStore(factory)
        store.create_schema_if_not_exists()

        store.save(Bookmark(name="proj-A", sequence=4))

        assert store.bookmark_for("proj-A").sequence == 4
        with factory() as session:
            assert isinstance(session, Session)

    def test_from_engine(self, engine) -> None:
        factory = create_session_factory(engine=engine)

        with factory() as session:
            assert session.get_bind() is engine

    def test_requires_url_or_engine(self) -> None:
        with pytest.raises(SessionManagementError, match="must be provided"):
            create_session_factory()

    def test_rejects_url_and_engine(self, engine) -> None:
        with pytest.raises(SessionManagementError, match="Cannot provide both"):
            create_session_factory("sqlite://", engine=engine)

    def test_rejects_engine_options_with_engine(self, engine) -> None:
        with pytest.raises(SessionManagementError, match="only accepted"):
            create_session_factory(engine=engine, echo=True)
