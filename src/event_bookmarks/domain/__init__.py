from .bookmark import MAX_SEQUENCE, NAME_MAX_LENGTH, Bookmark

__all__ = ["Bookmark", "MAX_SEQUENCE", "NAME_MAX_LENGTH"]
