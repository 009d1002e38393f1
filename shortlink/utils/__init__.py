"""Utils package for the shortlink service."""

from .shortener import ALPHABET, generate_short_code, validate_short_code
from .validators import is_valid_url, validate_url

__all__ = [
    "ALPHABET",
    "generate_short_code",
    "validate_short_code",
    "is_valid_url",
    "validate_url",
]
