"""API routers."""

from .health import router as health_router
from .links import router as links_router
from .redirect import router as redirect_router

__all__ = ["health_router", "links_router", "redirect_router"]
