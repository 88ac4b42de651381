"""Session factory helpers for owning processes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from event_bookmarks.primitives.exceptions import SessionManagementError

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def create_session_factory(
    url: str | None = None,
    *,
    engine: Engine | None = None,
    **engine_kwargs: Any,
) -> sessionmaker[Session]:
    """
    Build a ``sessionmaker`` for :class:`SQLAlchemyBookmarkStore`.

    Exactly one of ``url`` or ``engine`` must be provided. ``engine_kwargs``
    (``pool_pre_ping``, ``pool_timeout``, ``echo`` ...) are passed to
    ``create_engine`` and are only valid together with ``url``.
    """
    if url is not None and engine is not None:
        raise SessionManagementError(
            "Cannot provide both 'url' and 'engine'. "
            "Pass a database URL or an existing Engine."
        )
    if engine is None:
        if url is None:
            raise SessionManagementError(
                "Either 'url' or 'engine' must be provided."
            )
        engine = create_engine(url, **engine_kwargs)
    elif engine_kwargs:
        raise SessionManagementError(
            "Engine options are only accepted together with 'url'."
        )
    return sessionmaker(engine, expire_on_commit=False)
