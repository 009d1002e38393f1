"""Tests for the request metrics collector."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from shortlink.api.dependencies import get_link_service
from shortlink.main import app
from shortlink.services.metrics import MetricsCollector, percentile


@pytest.fixture
def collector():
    return MetricsCollector(window=1000)


class TestMetricsCollector:
    """Tests for MetricsCollector."""

    def test_empty(self, collector):
        assert collector.get_metrics() == {
            "request_count": 0,
            "error_count": 0,
            "success_count": 0,
            "average_latency_ms": 0.0,
            "p95_latency_ms": 0.0,
            "p99_latency_ms": 0.0,
        }

    def test_start_request_increments_count(self, collector):
        started = collector.start_request()
        collector.end_request(started)
        assert collector.get_metrics()["request_count"] == 1

    def test_error_increments_error_count(self, collector):
        started = collector.start_request()
        collector.end_request(started, is_error=True)
        metrics = collector.get_metrics()
        assert metrics["error_count"] == 1
        assert metrics["success_count"] == 0

    def test_success(self, collector):
        started = collector.start_request()
        collector.end_request(started, is_error=False)
        metrics = collector.get_metrics()
        assert metrics["error_count"] == 0
        assert metrics["success_count"] == 1

    def test_latency_recorded_in_milliseconds(self, collector):
        with patch("shortlink.services.metrics.time.perf_counter", side_effect=[10.0, 10.25]):
            started = collector.start_request()
            collector.end_request(started)
        metrics = collector.get_metrics()
        assert metrics["average_latency_ms"] == 250.0
        assert metrics["p95_latency_ms"] == 250.0

    def test_end_without_start_records_no_latency(self, collector):
        collector.end_request(None, is_error=True)
        metrics = collector.get_metrics()
        assert metrics["error_count"] == 1
        assert metrics["average_latency_ms"] == 0.0

    def test_window_keeps_latest_latencies(self):
        collector = MetricsCollector(window=3)
        # Requests taking 1, 2, 3 and 4 seconds
        clock = [0.0, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0, 4.0]
        with patch("shortlink.services.metrics.time.perf_counter", side_effect=clock):
            for _ in range(4):
                collector.end_request(collector.start_request())
        metrics = collector.get_metrics()
        assert metrics["request_count"] == 4
        assert metrics["average_latency_ms"] == 3000.0
        assert metrics["p99_latency_ms"] == 4000.0

    def test_default_window(self):
        assert MetricsCollector().window == 1000

    def test_zero_window_keeps_no_latencies(self):
        collector = MetricsCollector(window=0)
        assert collector.window == 0
        with patch("shortlink.services.metrics.time.perf_counter", side_effect=[0.0, 1.0]):
            collector.end_request(collector.start_request())
        metrics = collector.get_metrics()
        assert metrics["request_count"] == 1
        assert metrics["average_latency_ms"] == 0.0

    def test_reset_clears_all_metrics(self, collector):
        started = collector.start_request()
        collector.end_request(started, is_error=True)
        collector.reset()
        metrics = collector.get_metrics()
        assert metrics["request_count"] == 0
        assert metrics["error_count"] == 0
        assert metrics["average_latency_ms"] == 0.0

    def test_concurrent_requests_counted(self, collector):
        def one_request(_):
            collector.end_request(collector.start_request())

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(one_request, range(500)))
        assert collector.get_metrics()["request_count"] == 500

    def test_prometheus_format(self, collector):
        collector.end_request(collector.start_request())
        output = collector.get_prometheus_metrics()
        assert "# TYPE http_requests_total counter" in output
        assert "http_requests_total 1\n" in output
        assert "http_errors_total 0\n" in output
        assert "# HELP http_request_duration_ms" in output
        assert "http_request_duration_p95_ms" in output
        assert "http_request_duration_p99_ms" in output


class TestPercentile:
    """Tests for the nearest-rank percentile."""

    def test_empty(self):
        assert percentile([], 95) == 0.0

    def test_single_value(self):
        assert percentile([7.0], 99) == 7.0

    def test_nearest_rank(self):
        values = [float(v) for v in range(100, 0, -1)]
        assert percentile(values, 95) == 95.0
        assert percentile(values, 99) == 99.0
        assert percentile(values, 50) == 50.0


class TestMetricsMiddleware:
    """Tests for request reporting through the HTTP app."""

    def test_requests_are_counted(self, client):
        client.get("/api/links")
        client.get("/nonexistent", follow_redirects=False)
        metrics = app.state.metrics.get_metrics()
        assert metrics["request_count"] == 2
        assert metrics["error_count"] == 0

    def test_server_errors_are_counted(self, client):
        def broken_service():
            raise RuntimeError("boom")

        app.dependency_overrides[get_link_service] = broken_service
        client.get("/api/links")
        app.dependency_overrides.pop(get_link_service)
        assert app.state.metrics.get_metrics()["error_count"] == 1

    def test_metrics_endpoint(self, client):
        client.get("/api/links")
        response = client.get("/metrics")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_requests_total" in response.text
