"""FastAPI dependencies wiring the database, store and service together."""

from fastapi import Depends, Request

from ..core.database import Database, get_db
from ..core.store import LinkStore
from ..services.links import LinkService
from ..services.metrics import MetricsCollector


def get_link_store(db: Database = Depends(get_db)) -> LinkStore:
    return LinkStore(db)


def get_link_service(store: LinkStore = Depends(get_link_store)) -> LinkService:
    return LinkService(store)


def get_metrics_collector(request: Request) -> MetricsCollector:
    return request.app.state.metrics
