"""Link management API routes.

This module contains the CRUD endpoints for links:
- List links (GET /api/links)
- Create link (POST /api/links)
- Get link (GET /api/links/{link_id})
- Update link (PUT /api/links/{link_id})
- Delete link (DELETE /api/links/{link_id})

Domain exceptions raised here are turned into ``{"error": ...}`` responses
by the handlers registered in :mod:`shortlink.main`.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from ...core.config import settings
from ...core.exceptions import LinkNotFoundError
from ...models.link import Link
from ...schemas.link import ErrorResponse, LinkCreate, LinkUpdate, OkResponse
from ...services.links import LinkService
from ..dependencies import get_link_service

router = APIRouter(prefix="/api/links", tags=["Links"])


def _clean_url(url: Optional[str]) -> Optional[str]:
    return url.strip() if isinstance(url, str) else url


@router.get(
    "",
    response_model=list[Link],
    summary="List links",
    description="List links newest first.",
)
async def list_links(
    limit: int = Query(settings.default_list_limit, ge=1, le=settings.max_list_limit),
    service: LinkService = Depends(get_link_service),
) -> list[Link]:
    return service.get_all_links(limit)


@router.post(
    "",
    response_model=Link,
    status_code=201,
    responses={
        201: {"description": "Link created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid URL"},
    },
    summary="Create a short link",
)
async def create_link(
    payload: Optional[LinkCreate] = Body(None),
    service: LinkService = Depends(get_link_service),
) -> Link:
    """Create a short link for ``original_url``.

    Args:
        payload: Link creation data.
        service: Link service.

    Returns:
        The stored link.
    """
    original_url = _clean_url(payload.original_url) if payload else None
    return service.create_link(original_url)


@router.get(
    "/{link_id}",
    response_model=Link,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Get a link",
)
async def get_link(
    link_id: int,
    service: LinkService = Depends(get_link_service),
) -> Link:
    link = service.get_link(link_id)
    if link is None:
        raise LinkNotFoundError(f"Link {link_id} not found")
    return link


@router.put(
    "/{link_id}",
    response_model=Link,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL"},
        404: {"model": ErrorResponse, "description": "Link not found"},
    },
    summary="Update a link",
    description="Change the destination URL. An empty or missing URL leaves the link unchanged.",
)
async def update_link(
    link_id: int,
    payload: Optional[LinkUpdate] = Body(None),
    service: LinkService = Depends(get_link_service),
) -> Link:
    """Update a link.

    Args:
        link_id: The link ID.
        payload: Link update data.
        service: Link service.

    Returns:
        The current link.
    """
    original_url = _clean_url(payload.original_url) if payload else None
    link = service.update_link(link_id, original_url)
    if link is None:
        raise LinkNotFoundError(f"Link {link_id} not found")
    return link


@router.delete(
    "/{link_id}",
    response_model=OkResponse,
    responses={404: {"model": ErrorResponse, "description": "Link not found"}},
    summary="Delete a link",
)
async def delete_link(
    link_id: int,
    service: LinkService = Depends(get_link_service),
) -> dict:
    if not service.delete_link(link_id):
        raise LinkNotFoundError(f"Link {link_id} not found")
    return {"ok": True}
