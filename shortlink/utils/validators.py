"""Destination URL validation."""

import re
from typing import Optional

from ..core.exceptions import InvalidURLError

URL_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_valid_url(url: Optional[str]) -> bool:
    """Check that a destination URL is absolute http(s).

    Surrounding whitespace is ignored. Anything else (ftp, relative paths,
    ``javascript:``) is rejected.
    """
    if not isinstance(url, str):
        return False
    trimmed = url.strip()
    if not trimmed:
        return False
    return bool(URL_SCHEME_PATTERN.match(trimmed))


def validate_url(url: Optional[str]) -> None:
    """Raise InvalidURLError unless ``is_valid_url(url)``."""
    if not is_valid_url(url):
        raise InvalidURLError()
