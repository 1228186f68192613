from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)


class MetricsRegistry:
    """Process metrics plus HTTP request counters, rendered in the Prometheus text format.

    Owns its own ``CollectorRegistry`` so that each application instance (and each
    test) gets an isolated set of metric families instead of sharing the
    module-level default registry.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry | None = None, *, runtime_collectors: bool = True) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()

        if runtime_collectors:
            # Process stats are only populated where /proc exists; the others are portable.
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests handled.",
            labelnames=("method", "path", "status"),
            registry=self.registry,
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds.",
            labelnames=("method", "path"),
            registry=self.registry,
        )

    def observe_http_request(self, method: str, path: str, status_code: int, elapsed_seconds: float) -> None:
        self.http_requests_total.labels(method=method, path=path, status=str(status_code)).inc()
        self.http_request_duration_seconds.labels(method=method, path=path).observe(elapsed_seconds)

    def requests_count(self, method: str, path: str, status_code: int) -> float:
        value = self.registry.get_sample_value(
            "http_requests_total",
            {"method": method, "path": path, "status": str(status_code)},
        )
        return value or 0.0

    def render(self) -> bytes:
        """Serialize a fresh snapshot of every registered collector."""

        return generate_latest(self.registry)
