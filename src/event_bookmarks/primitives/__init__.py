from .exceptions import (
    BookmarkConflictError,
    BookmarkError,
    BookmarkPersistenceError,
    InfrastructureError,
    SessionManagementError,
)

__all__ = [
    "BookmarkConflictError",
    "BookmarkError",
    "BookmarkPersistenceError",
    "InfrastructureError",
    "SessionManagementError",
]
