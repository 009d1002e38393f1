"""Database module for the shortlink service.

This module owns the SQLite connection, creates the schema on startup
and translates sqlite3 failures into service exceptions. Link queries
live in :mod:`shortlink.core.store`.
"""

import sqlite3
import logging
import threading
from typing import Optional, Union

from .config import settings
from .exceptions import ShortCodeConflictError, StorageError

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS links (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    original_url TEXT NOT NULL,
    short_code TEXT NOT NULL UNIQUE,
    click_count INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL DEFAULT (datetime('now')),
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);
CREATE UNIQUE INDEX IF NOT EXISTS idx_links_short_code ON links(short_code);
"""


class Database:
    """Database class for managing the SQLite connection."""

    def __init__(self, db_path: Optional[str] = None):
        """Initialize database handle.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
        """
        if db_path:
            self.db_path = db_path
        else:
            self.db_path = settings.database_url
        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def _get_connection(self) -> sqlite3.Connection:
        """Create or return the database connection.

        The connection is shared between threads; every statement runs
        under ``self._lock``.

        Returns:
            SQLite connection.
        """
        if self._connection is None:
            try:
                self._connection = sqlite3.connect(
                    self.db_path,
                    check_same_thread=False,
                    timeout=30,
                )
            except sqlite3.Error as e:
                logger.error(f"Could not open database {self.db_path}: {e}")
                raise StorageError(str(e)) from e
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def _rollback(self, conn: sqlite3.Connection) -> None:
        try:
            conn.rollback()
        except sqlite3.Error as e:
            logger.warning(f"Rollback failed: {e}")

    def init_db(self) -> None:
        """Create the links table and its indexes if absent."""
        with self._lock:
            conn = self._get_connection()
            try:
                conn.executescript(SCHEMA_SQL)
                conn.commit()
                logger.info("Database initialized successfully")
            except sqlite3.Error as e:
                logger.error(f"Database initialization failed: {e}")
                raise StorageError(str(e)) from e

    def execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Union[list[dict], sqlite3.Cursor]:
        """Execute a SQL statement.

        Args:
            query: SQL query string.
            params: Query parameters.
            fetch: Whether to fetch results.

        Returns:
            Rows as dicts if fetch=True, otherwise the committed cursor
            (for ``rowcount`` and ``lastrowid``).

        Raises:
            ShortCodeConflictError: A UNIQUE constraint was violated.
            StorageError: Any other database failure.
        """
        with self._lock:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(query, params)
                if fetch:
                    return [dict(row) for row in cursor.fetchall()]
                conn.commit()
                return cursor
            except sqlite3.IntegrityError as e:
                self._rollback(conn)
                if "UNIQUE" in str(e):
                    raise ShortCodeConflictError(str(e)) from e
                logger.error(f"Query execution failed: {e}")
                raise StorageError(str(e)) from e
            except sqlite3.Error as e:
                self._rollback(conn)
                logger.error(f"Query execution failed: {e}")
                raise StorageError(str(e)) from e


# Global database instance
db = Database()


def get_db() -> Database:
    """Get database instance for dependency injection.

    Returns:
        Database instance.
    """
    return db


def get_test_db() -> Database:
    """Get a fresh in-memory database for testing.

    Returns:
        In-memory Database instance.
    """
    test_db = Database(":memory:")
    test_db.init_db()
    return test_db
