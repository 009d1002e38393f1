"""Schemas package for the shortlink service."""

from .link import (
    LinkCreate,
    LinkUpdate,
    ErrorResponse,
    OkResponse,
    HealthResponse,
)

__all__ = [
    "LinkCreate",
    "LinkUpdate",
    "ErrorResponse",
    "OkResponse",
    "HealthResponse",
]
