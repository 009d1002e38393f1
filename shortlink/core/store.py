"""Link store.

``LinkStore`` is the only component that reads or writes link rows.
Every public method is a single SQL statement, so concurrent callers
never interleave a read-modify-write.
"""

import logging
from typing import Optional

from .config import settings
from .database import Database
from .exceptions import InvalidArgumentError, ShortCodeExhaustedError
from ..models.link import Link
from ..utils.shortener import generate_short_code

logger = logging.getLogger(__name__)

LINK_COLUMNS = "id, original_url, short_code, click_count, created_at, updated_at"

# Largest value SQLite can store in an INTEGER column
MAX_ROW_ID = 2**63 - 1


def _is_row_id(link_id: int) -> bool:
    return 1 <= link_id <= MAX_ROW_ID


class LinkStore:
    """Persistent link records backed by a :class:`Database`."""

    def __init__(self, db: Database):
        self.db = db

    def find_by_short_code(self, short_code: str) -> Optional[Link]:
        """Get a link by its short code.

        Args:
            short_code: The short URL code.

        Returns:
            Link or None if not found.
        """
        query = f"SELECT {LINK_COLUMNS} FROM links WHERE short_code = ?"
        rows = self.db.execute(query, (short_code,), fetch=True)
        return Link(**rows[0]) if rows else None

    def find_by_id(self, link_id: int) -> Optional[Link]:
        """Get a link by id.

        Args:
            link_id: The link ID.

        Returns:
            Link or None if not found.
        """
        if not _is_row_id(link_id):
            return None
        query = f"SELECT {LINK_COLUMNS} FROM links WHERE id = ?"
        rows = self.db.execute(query, (link_id,), fetch=True)
        return Link(**rows[0]) if rows else None

    def find_all(self, limit: Optional[int] = None) -> list[Link]:
        """Get links newest first.

        Args:
            limit: Maximum number of links. Defaults to settings value.

        Returns:
            List of links ordered by descending id.

        Raises:
            InvalidArgumentError: If limit is not a positive integer.
        """
        if limit is None:
            limit = settings.default_list_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidArgumentError(f"List limit must be positive, got {limit!r}")
        query = f"SELECT {LINK_COLUMNS} FROM links ORDER BY id DESC LIMIT ?"
        rows = self.db.execute(query, (limit,), fetch=True)
        return [Link(**row) for row in rows]

    def create(self, original_url: str, short_code: str) -> int:
        """Insert a new link.

        Args:
            original_url: The destination URL.
            short_code: The short URL code.

        Returns:
            ID of the new link.

        Raises:
            ShortCodeConflictError: If ``short_code`` is already taken.
        """
        query = "INSERT INTO links (original_url, short_code) VALUES (?, ?)"
        cursor = self.db.execute(query, (original_url, short_code))
        logger.info(f"Created short link: {short_code}")
        return cursor.lastrowid

    def update_url(self, link_id: int, original_url: str) -> bool:
        """Replace the destination URL of a link.

        Args:
            link_id: The link ID.
            original_url: The new destination URL.

        Returns:
            True if a row was updated, False if the link does not exist.
        """
        if not _is_row_id(link_id):
            return False
        query = (
            "UPDATE links SET original_url = ?, updated_at = datetime('now') "
            "WHERE id = ?"
        )
        cursor = self.db.execute(query, (original_url, link_id))
        updated = cursor.rowcount > 0
        if updated:
            logger.info(f"Updated link {link_id}")
        return updated

    def increment_click_count(self, link_id: int) -> bool:
        """Add one click to a link.

        Args:
            link_id: The link ID.

        Returns:
            True if a row was updated.
        """
        if not _is_row_id(link_id):
            return False
        query = (
            "UPDATE links SET click_count = click_count + 1, "
            "updated_at = datetime('now') WHERE id = ?"
        )
        cursor = self.db.execute(query, (link_id,))
        return cursor.rowcount > 0

    def delete(self, link_id: int) -> bool:
        """Permanently delete a link.

        Args:
            link_id: The link ID.

        Returns:
            True if deleted, False if not found.
        """
        if not _is_row_id(link_id):
            return False
        cursor = self.db.execute("DELETE FROM links WHERE id = ?", (link_id,))
        deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted link {link_id}")
        return deleted

    def short_code_exists(self, short_code: str) -> bool:
        """Check if a short code already exists.

        Args:
            short_code: The short URL code.

        Returns:
            True if exists, False otherwise.
        """
        query = "SELECT 1 FROM links WHERE short_code = ?"
        rows = self.db.execute(query, (short_code,), fetch=True)
        return len(rows) > 0

    def generate_unique_short_code(self, length: Optional[int] = None) -> str:
        """Generate a short code not yet present in the store.

        The UNIQUE constraint on ``short_code`` remains authoritative; this
        only avoids conflicts in the common case.

        Args:
            length: Length of the generated code. Defaults to settings value.

        Returns:
            An unused short code.

        Raises:
            ShortCodeExhaustedError: If every attempt hit an existing code.
        """
        max_attempts = settings.max_short_code_attempts
        for _ in range(max_attempts):
            short_code = generate_short_code(length)
            if not self.short_code_exists(short_code):
                return short_code
            logger.warning(f"Short code collision on {short_code}, retrying")
        raise ShortCodeExhaustedError(
            f"Failed to generate unique short code after {max_attempts} attempts"
        )
