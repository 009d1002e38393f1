"""Health check and metrics API routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from ...core.database import Database, get_db
from ...schemas.link import HealthResponse
from ...services.health import HealthChecker
from ...services.metrics import MetricsCollector
from ..dependencies import get_metrics_collector

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse, "description": "Service unhealthy"}},
    summary="Health check",
)
async def health_check(db: Database = Depends(get_db)) -> JSONResponse:
    """Health check endpoint.

    Returns:
        Health report, with status 503 when any probe fails.
    """
    report = HealthChecker(db).check()
    status_code = 200 if report["status"] == "healthy" else 503
    return JSONResponse(status_code=status_code, content=report)


@router.get("/metrics", response_class=PlainTextResponse, summary="Prometheus metrics")
async def prometheus_metrics(
    collector: MetricsCollector = Depends(get_metrics_collector),
) -> PlainTextResponse:
    return PlainTextResponse(
        collector.get_prometheus_metrics(),
        media_type="text/plain; version=0.0.4",
    )
