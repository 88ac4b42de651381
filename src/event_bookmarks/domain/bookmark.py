"""Bookmark value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LENGTH = 160
MAX_SEQUENCE = 2**63 - 1


class Bookmark(BaseModel):
    """Last processed sequence number of a named event stream consumer.

    Immutable and compared by value. A bookmark with ``sequence == 0`` is
    what a store returns for a name that was never saved.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    sequence: int = Field(default=0, ge=0, le=MAX_SEQUENCE)

    @classmethod
    def empty(cls, name: str) -> Bookmark:
        """Bookmark for a consumer that has not processed anything yet."""
        return cls(name=name, sequence=0)
