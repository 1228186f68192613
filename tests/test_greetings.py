import pytest
from httpx import ASGITransport, AsyncClient

from hello_web.config import Settings
from hello_web.main import create_app


async def test_index_returns_welcome_message(api_client, settings) -> None:
    resp = await api_client.get("/")
    assert resp.status_code == 200
    assert resp.text == settings.welcome_message
    assert resp.headers["content-type"].startswith("text/plain")


async def test_index_ignores_query_string_and_headers(api_client, settings) -> None:
    resp = await api_client.get("/", params={"name": "ignored"}, headers={"Accept": "application/json"})
    assert resp.status_code == 200
    assert resp.text == settings.welcome_message


async def test_hello_returns_greeting(api_client) -> None:
    resp = await api_client.get("/hello")
    assert resp.status_code == 200
    assert resp.text == "Hello, World!"


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("Alice", "Hello, Alice!"),
        ("Bob", "Hello, Bob!"),
        ("John%20Doe", "Hello, John Doe!"),
        ("<i>hi", "Hello, <i>hi!"),
    ],
)
async def test_greet_interpolates_path_segment(api_client, segment: str, expected: str) -> None:
    resp = await api_client.get(f"/greet/{segment}")
    assert resp.status_code == 200
    assert resp.text == expected


async def test_greet_without_name_is_not_found(api_client) -> None:
    resp = await api_client.get("/greet/")
    assert resp.status_code == 404


async def test_undefined_path_is_not_found(api_client) -> None:
    resp = await api_client.get("/nope")
    assert resp.status_code == 404


async def test_only_get_is_routed(api_client) -> None:
    resp = await api_client.post("/hello")
    assert resp.status_code == 405


async def test_responses_include_x_request_id(api_client) -> None:
    resp = await api_client.get("/hello")
    assert resp.status_code == 200
    assert resp.headers.get("x-request-id")


async def test_messages_follow_settings(monkeypatch) -> None:
    monkeypatch.setenv("WELCOME_MESSAGE", "Howdy")
    monkeypatch.setenv("HELLO_MESSAGE", "Hi there")
    app = create_app(Settings())

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        assert (await client.get("/")).text == "Howdy"
        assert (await client.get("/hello")).text == "Hi there"
