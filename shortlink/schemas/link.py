"""Request and response schemas for the shortlink HTTP API."""

from typing import Optional
from pydantic import BaseModel, Field


class LinkCreate(BaseModel):
    """Request body for creating a short link."""

    original_url: Optional[str] = Field(None, description="The destination URL to shorten")


class LinkUpdate(BaseModel):
    """Request body for updating a short link.

    An absent or empty ``original_url`` leaves the link unchanged.
    """

    original_url: Optional[str] = Field(None, description="The new destination URL")


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str


class OkResponse(BaseModel):
    """Response model for deletion."""

    ok: bool = True


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    timestamp: str
    checks: dict[str, str]
