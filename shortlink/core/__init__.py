"""Core package - configuration, database and exceptions."""

from .config import settings, get_settings
from .database import Database, db, get_db, get_test_db
from .exceptions import (
    ShortLinkError,
    InvalidArgumentError,
    InvalidURLError,
    LinkNotFoundError,
    ShortCodeConflictError,
    ShortCodeExhaustedError,
    StorageError,
)

__all__ = [
    "settings",
    "get_settings",
    "Database",
    "db",
    "get_db",
    "get_test_db",
    "ShortLinkError",
    "InvalidArgumentError",
    "InvalidURLError",
    "LinkNotFoundError",
    "ShortCodeConflictError",
    "ShortCodeExhaustedError",
    "StorageError",
]
