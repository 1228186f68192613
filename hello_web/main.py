from __future__ import annotations

import argparse
from collections.abc import Sequence

import structlog
import uvicorn
from fastapi import FastAPI

from hello_web import __version__
from hello_web.api.greetings import router as greetings_router
from hello_web.api.metrics import build_metrics_router
from hello_web.config import Settings, get_settings
from hello_web.observability import MetricsRegistry, RequestContextMiddleware, configure_logging


def create_app(settings: Settings | None = None, metrics: MetricsRegistry | None = None) -> FastAPI:
    """Build the application with its routes registered once, in match order."""

    settings = settings or get_settings()
    metrics = metrics or MetricsRegistry()

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.settings = settings
    app.state.metrics = metrics

    app.include_router(greetings_router)
    if settings.enable_metrics_endpoint:
        app.include_router(build_metrics_router(settings.metrics_path))

    app.add_middleware(
        RequestContextMiddleware,
        metrics=metrics,
        excluded_paths={settings.metrics_path},
    )
    return app


def announce(settings: Settings) -> None:
    print(f"Listening on {settings.base_url}", flush=True)
    if settings.enable_metrics_endpoint:
        print(f"Metrics available at {settings.metrics_url}", flush=True)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hello World HTTP service")
    parser.add_argument("--host", default=None, help="Interface to bind (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (overrides PORT)")
    parser.add_argument("--log-level", default=None, help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    overrides = {
        key: value
        for key, value in (("host", args.host), ("port", args.port), ("log_level", args.log_level))
        if value is not None
    }
    settings = get_settings().model_copy(update=overrides)

    configure_logging(settings.log_level)
    announce(settings)
    structlog.get_logger(__name__).info("server_starting", host=settings.host, port=settings.port)

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)
