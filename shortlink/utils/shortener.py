"""Short code utilities module.

This module handles the generation and structural validation of short codes.
Uniqueness is a store concern, see :meth:`LinkStore.generate_unique_short_code`.
"""

import re
import secrets
import string
from typing import Optional

from ..core.config import settings
from ..core.exceptions import InvalidArgumentError


# Characters drawn when generating short codes
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

# Characters accepted when looking a code up
SHORT_CODE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def generate_short_code(length: Optional[int] = None) -> str:
    """Generate a random short code.

    Every character is drawn independently from ``ALPHABET`` with the
    ``secrets`` module, so codes cannot be enumerated.

    Args:
        length: Length of the generated code. Defaults to settings value.

    Returns:
        Random short code string.

    Raises:
        InvalidArgumentError: If length is not a positive integer.
    """
    if length is None:
        length = settings.default_short_code_length
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidArgumentError(f"Short code length must be positive, got {length!r}")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def validate_short_code(code: str) -> bool:
    """Validate short code format.

    Args:
        code: Short code to validate.

    Returns:
        True if valid, False otherwise.
    """
    if not code or not isinstance(code, str):
        return False
    if len(code) < settings.min_short_code_length or len(code) > settings.max_short_code_length:
        return False
    if not SHORT_CODE_PATTERN.fullmatch(code):
        return False
    return True
