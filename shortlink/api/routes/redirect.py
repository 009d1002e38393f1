"""Short code redirect route (GET /{short_code})."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from ...schemas.link import ErrorResponse
from ...services.links import LinkService
from ...utils.shortener import validate_short_code
from ..dependencies import get_link_service

router = APIRouter(prefix="", tags=["Redirect"])


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=302,
    responses={
        302: {"description": "Redirect to original URL"},
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Redirect to original URL",
)
async def redirect_to_url(
    short_code: str,
    service: LinkService = Depends(get_link_service),
) -> Response:
    """Redirect to the original URL and count the click.

    Args:
        short_code: The short URL code.
        service: Link service.

    Returns:
        302 redirect, or plain-text 404.
    """
    if not validate_short_code(short_code):
        return PlainTextResponse("Not found", status_code=404)

    original_url = service.redirect(short_code)
    if original_url is None:
        return PlainTextResponse("Not found", status_code=404)

    return RedirectResponse(url=original_url, status_code=302)
