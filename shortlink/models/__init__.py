"""Models package for the shortlink service."""

from .link import Link

__all__ = ["Link"]
