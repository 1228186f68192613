"""Observability helpers: structlog configuration, request context middleware,
and the Prometheus-backed metrics registry served on the scrape endpoint.
"""

from __future__ import annotations

from hello_web.observability.logging import configure_logging
from hello_web.observability.metrics import MetricsRegistry
from hello_web.observability.middleware import RequestContextMiddleware

__all__ = ["MetricsRegistry", "RequestContextMiddleware", "configure_logging"]
