from __future__ import annotations

import uuid
from collections.abc import Iterable
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders

from hello_web.observability.metrics import MetricsRegistry


UNMATCHED_PATH = "unmatched"


def _route_template(scope: dict[str, Any]) -> str:
    # The router stores the matched route in the scope; fall back to a fixed
    # label so arbitrary 404 paths do not create new series.
    route = scope.get("route")
    template = getattr(route, "path", None)
    return template if isinstance(template, str) else UNMATCHED_PATH


class RequestContextMiddleware:
    """Adds request_id context, access logs, and HTTP request metrics."""

    def __init__(
        self,
        app: Callable[..., Any],
        metrics: MetricsRegistry,
        excluded_paths: Iterable[str] = (),
    ) -> None:
        self.app = app
        self.metrics = metrics
        # Scrapes of the metrics endpoint are not counted.
        self._excluded_metric_paths = set(excluded_paths)

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        path = scope.get("path")
        method = scope.get("method")

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=path,
            method=method,
        )

        start = perf_counter()
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-ID"] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed = perf_counter() - start

            if path not in self._excluded_metric_paths:
                self.metrics.observe_http_request(
                    method=str(method),
                    path=_route_template(scope),
                    status_code=status_code,
                    elapsed_seconds=elapsed,
                )

            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed * 1000.0, 2),
            )

            structlog.contextvars.clear_contextvars()
