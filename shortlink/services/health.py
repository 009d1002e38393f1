"""Database health probes."""

import logging
from datetime import datetime, timezone

from ..core.database import Database
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class HealthChecker:
    """Check connectivity and schema of the links database."""

    def __init__(self, db: Database):
        self.db = db

    def check(self) -> dict:
        """Run every probe.

        Returns:
            ``{"status", "timestamp", "checks"}`` where status is
            ``"healthy"`` only if every check is ``"ok"``.
        """
        checks = {
            "database": self._check_database(),
            "schema": self._check_schema(),
        }
        healthy = all(result == "ok" for result in checks.values())
        if not healthy:
            logger.warning(f"Health check failed: {checks}")
        return {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": checks,
        }

    def _check_database(self) -> str:
        try:
            self.db.execute("SELECT 1", fetch=True)
        except StorageError as e:
            return f"error: {e}"
        return "ok"

    def _check_schema(self) -> str:
        query = "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'links'"
        try:
            rows = self.db.execute(query, fetch=True)
        except StorageError as e:
            return f"error: {e}"
        return "ok" if rows else "error: links table not found"
