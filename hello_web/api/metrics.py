from __future__ import annotations

from fastapi import APIRouter, Request, Response


async def metrics(request: Request) -> Response:
    """Expose the application's registry in the Prometheus text exposition format."""

    registry = request.app.state.metrics
    return Response(content=registry.render(), media_type=registry.content_type)


def build_metrics_router(path: str) -> APIRouter:
    router = APIRouter(tags=["metrics"])
    router.add_api_route(path, metrics, methods=["GET"], include_in_schema=False)
    return router
