from .decorators import CachingBookmarkStore
from .memory import InMemoryBookmarkStore

__all__ = ["CachingBookmarkStore", "InMemoryBookmarkStore"]
