from .bookmark_store import InMemoryBookmarkStore

__all__ = ["InMemoryBookmarkStore"]
