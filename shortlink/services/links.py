"""Link lifecycle orchestration.

``LinkService`` ties URL validation, unique code generation and the
``LinkStore`` together. It keeps no state between calls; every read goes
back to the store.
"""

import logging
from typing import Optional

from ..core.config import settings
from ..core.exceptions import ShortCodeConflictError
from ..core.store import LinkStore
from ..models.link import Link
from ..utils.validators import validate_url

logger = logging.getLogger(__name__)


class LinkService:
    """Create, read, update, delete and resolve short links."""

    def __init__(self, store: LinkStore):
        self.store = store

    def create_link(self, original_url: str) -> Link:
        """Validate ``original_url`` and store it under a fresh short code.

        A conflict on insert (another request took the code between the
        existence check and the insert) is retried with a new code.

        Raises:
            InvalidURLError: If the URL is not http(s).
            ShortCodeConflictError: If every retry conflicted.
            ShortCodeExhaustedError: If no unused code could be generated.
        """
        validate_url(original_url)

        retries = settings.create_conflict_retries
        for attempt in range(retries + 1):
            short_code = self.store.generate_unique_short_code()
            try:
                link_id = self.store.create(original_url, short_code)
            except ShortCodeConflictError:
                if attempt == retries:
                    raise
                logger.warning(f"Short code {short_code} taken on insert, retrying")
                continue
            return self.store.find_by_id(link_id)

    def get_link(self, link_id: int) -> Optional[Link]:
        return self.store.find_by_id(link_id)

    def get_all_links(self, limit: Optional[int] = None) -> list[Link]:
        return self.store.find_all(limit)

    def update_link(self, link_id: int, original_url: Optional[str] = None) -> Optional[Link]:
        """Change the destination of a link.

        ``None`` or ``""`` leaves the URL untouched and only re-fetches.

        Returns:
            The current link, or None if ``link_id`` does not exist.

        Raises:
            InvalidURLError: If a non-empty URL is not http(s).
        """
        if original_url:
            validate_url(original_url)
            self.store.update_url(link_id, original_url)
        return self.store.find_by_id(link_id)

    def delete_link(self, link_id: int) -> bool:
        return self.store.delete(link_id)

    def redirect(self, short_code: str) -> Optional[str]:
        """Resolve a short code and count the visit.

        Returns:
            The destination URL, or None if the code is unknown.
        """
        link = self.store.find_by_short_code(short_code)
        if link is None:
            return None
        self.store.increment_click_count(link.id)
        return link.original_url
