"""Services package - link lifecycle, health and metrics."""

from .links import LinkService
from .health import HealthChecker
from .metrics import MetricsCollector

__all__ = ["LinkService", "HealthChecker", "MetricsCollector"]
