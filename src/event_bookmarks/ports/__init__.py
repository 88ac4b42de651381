from .bookmark_store import IBookmarkStore

__all__ = ["IBookmarkStore"]
