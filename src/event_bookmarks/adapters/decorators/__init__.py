from .caching_store import CachingBookmarkStore

__all__ = ["CachingBookmarkStore"]
