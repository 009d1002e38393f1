"""Pydantic models for the shortlink service."""

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """A persisted short link."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    original_url: str
    short_code: str
    click_count: int = Field(0, ge=0)
    created_at: str
    updated_at: str
