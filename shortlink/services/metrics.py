"""Request metrics collector.

Counts requests and errors and keeps a sliding window of latencies for
average / p95 / p99 reporting. The HTTP middleware feeds it; nothing in
the link lifecycle reads it.
"""

import math
import threading
import time
from collections import deque
from typing import Optional

from ..core.config import settings


class MetricsCollector:
    """Thread-safe request counters and latency percentiles."""

    def __init__(self, window: Optional[int] = None):
        self.window = settings.metrics_window if window is None else window
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self.request_count = 0
            self.error_count = 0
            self._latencies: deque[float] = deque(maxlen=self.window)

    def start_request(self) -> float:
        """Count a request and return the token to pass to ``end_request``."""
        with self._lock:
            self.request_count += 1
        return time.perf_counter()

    def end_request(self, started: Optional[float], is_error: bool = False) -> None:
        """Record the latency of a request started with ``start_request``."""
        with self._lock:
            if started is not None:
                self._latencies.append((time.perf_counter() - started) * 1000)
            if is_error:
                self.error_count += 1

    def get_metrics(self) -> dict:
        with self._lock:
            latencies = list(self._latencies)
            request_count = self.request_count
            error_count = self.error_count

        average = sum(latencies) / len(latencies) if latencies else 0.0
        return {
            "request_count": request_count,
            "error_count": error_count,
            "success_count": request_count - error_count,
            "average_latency_ms": round(average, 2),
            "p95_latency_ms": round(percentile(latencies, 95), 2),
            "p99_latency_ms": round(percentile(latencies, 99), 2),
        }

    def get_prometheus_metrics(self) -> str:
        """Render metrics in the Prometheus text exposition format."""
        metrics = self.get_metrics()
        series = [
            ("http_requests_total", "Total number of HTTP requests", "counter", "request_count"),
            ("http_errors_total", "Total number of HTTP errors", "counter", "error_count"),
            (
                "http_request_duration_ms",
                "Average request latency in milliseconds",
                "gauge",
                "average_latency_ms",
            ),
            (
                "http_request_duration_p95_ms",
                "95th percentile request latency in milliseconds",
                "gauge",
                "p95_latency_ms",
            ),
            (
                "http_request_duration_p99_ms",
                "99th percentile request latency in milliseconds",
                "gauge",
                "p99_latency_ms",
            ),
        ]
        blocks = [
            f"# HELP {name} {help_text}\n# TYPE {name} {kind}\n{name} {metrics[key]}\n"
            for name, help_text, kind, key in series
        ]
        return "\n".join(blocks)


def percentile(values: list[float], pct: float) -> float:
    """Nearest-rank percentile; 0 for an empty sample."""
    if not values:
        return 0.0
    ordered = sorted(values)
    index = math.ceil(len(ordered) * pct / 100) - 1
    return ordered[max(0, index)]

