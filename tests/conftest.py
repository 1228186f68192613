from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from hello_web.config import Settings, get_settings
from hello_web.main import create_app
from hello_web.observability import MetricsRegistry


_ENV_VARS = (
    "APP_NAME",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "WELCOME_MESSAGE",
    "HELLO_MESSAGE",
    "METRICS_PATH",
    "ENABLE_METRICS_ENDPOINT",
)


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Run from an empty directory so a developer's .env is not picked up.
    monkeypatch.chdir(tmp_path)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def metrics() -> MetricsRegistry:
    return MetricsRegistry()


@pytest.fixture
def app(settings: Settings, metrics: MetricsRegistry) -> FastAPI:
    return create_app(settings, metrics)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
