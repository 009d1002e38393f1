"""API package for the shortlink service."""

from .routes import health_router, links_router, redirect_router

__all__ = ["health_router", "links_router", "redirect_router"]
