"""Shortlink Service - Main FastAPI Application.

A URL shortening service with:
- Create, list, read, update and delete short links
- Redirect short codes to their destination while counting clicks
- Health check and Prometheus metrics
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.database import get_db
from .core.exceptions import (
    InvalidArgumentError,
    LinkNotFoundError,
    ShortLinkError,
    StorageError,
)
from .api.routes import health_router, links_router, redirect_router
from .services.metrics import MetricsCollector

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {settings.app_title}...")
    db = get_db()
    db.init_db()
    logger.info("Database initialized")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_title}...")
    db.close()


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    lifespan=lifespan,
)
app.state.metrics = MetricsCollector()

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    """Report every request to the metrics collector."""
    collector: MetricsCollector = request.app.state.metrics
    started = collector.start_request()
    try:
        response = await call_next(request)
    except Exception:
        collector.end_request(started, is_error=True)
        raise
    collector.end_request(started, is_error=response.status_code >= 500)
    return response


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.exception_handler(LinkNotFoundError)
async def not_found_handler(request: Request, exc: LinkNotFoundError):
    return JSONResponse(status_code=404, content={"error": "Not found"})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(ShortLinkError)
async def service_error_handler(request: Request, exc: ShortLinkError):
    """Conflicts that survived retries and exhausted code generation."""
    logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.exception(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


# Include routers; the redirect catch-all goes last
app.include_router(health_router)
app.include_router(links_router)
app.include_router(redirect_router)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("shortlink.main:app", host=settings.host, port=settings.port)
