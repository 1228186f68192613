from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["greetings"], default_response_class=PlainTextResponse)


@router.get("/")
async def index(request: Request) -> str:
    return request.app.state.settings.welcome_message


@router.get("/hello")
async def hello(request: Request) -> str:
    return request.app.state.settings.hello_message


@router.get("/greet/{name}")
async def greet(name: str) -> str:
    # Served as text/plain, so the name is returned exactly as captured.
    return f"Hello, {name}!"
