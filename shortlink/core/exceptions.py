"""Exceptions raised by the link lifecycle.

Classes:
    ShortLinkError:
        Base class for every error raised by the service.

    InvalidArgumentError:
        Raised for malformed input (bad URL, non-positive code length).

    InvalidURLError:
        Raised when a destination URL fails validation.

    LinkNotFoundError:
        Raised when a link id or short code does not resolve.

    ShortCodeConflictError:
        Raised when inserting a short code that is already taken.

    ShortCodeExhaustedError:
        Raised when no unused short code was found within the retry bound.

    StorageError:
        Raised when the database fails (connection, locking, disk, etc.).

Example:
    >>> from shortlink.core.exceptions import InvalidURLError
    >>> raise InvalidURLError()
    Traceback (most recent call last):
        ...
    shortlink.core.exceptions.InvalidURLError: Invalid URL. Must start with http or https
"""

INVALID_URL_MESSAGE = "Invalid URL. Must start with http or https"


class ShortLinkError(Exception):
    """Generic base class for service exceptions."""

    pass


class InvalidArgumentError(ShortLinkError, ValueError):
    """Exception raised when an argument is malformed."""

    pass


class InvalidURLError(InvalidArgumentError):
    """Exception raised when a destination URL is not http(s)."""

    def __init__(self, message: str = INVALID_URL_MESSAGE):
        super().__init__(message)


class LinkNotFoundError(ShortLinkError):
    """Exception raised when a link does not exist."""

    pass


class ShortCodeConflictError(ShortLinkError):
    """Exception raised when a short code already exists in the store."""

    pass


class ShortCodeExhaustedError(ShortLinkError):
    """Exception raised when unique short code generation gives up."""

    pass


class StorageError(ShortLinkError):
    """Exception raised when the underlying database fails.

    e.g. unreadable file, locked database, closed connection, etc.
    """

    pass
