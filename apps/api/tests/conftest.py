"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import anyio
import pytest
from app.main import app
from app.middleware import CleanPathMiddleware
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.types import ASGIApp, Message


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_echo_app(**middleware_options: Any) -> FastAPI:
    """Build an app that echoes every path, wrapped in CleanPathMiddleware."""
    echo_app = FastAPI(redirect_slashes=False)
    echo_app.add_middleware(CleanPathMiddleware, **middleware_options)

    @echo_app.get("/{path:path}")
    async def echo(request: Request) -> dict[str, str]:
        return {"path": request.url.path}

    return echo_app


@pytest.fixture
def echo_app_factory() -> Callable[..., FastAPI]:
    """Factory for echo apps with custom middleware options."""
    return make_echo_app


async def send_raw_get(
    asgi_app: ASGIApp, target: str, decoded_path: str | None = None
) -> tuple[int, dict[str, str]]:
    """Send a GET for ``target`` straight to the ASGI app.

    HTTP clients merge "//" and resolve dot segments before sending, so
    unnormalized paths have to be put into the scope by hand. ``decoded_path``
    sets the scope "path" when it differs from the percent-encoded target.
    """
    path, _, query = target.partition("?")
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path if decoded_path is None else decoded_path,
        "raw_path": path.encode("latin-1"),
        "query_string": query.encode("latin-1"),
        "root_path": "",
        "headers": [(b"host", b"test")],
        "server": ("test", 80),
        "client": ("127.0.0.1", 50000),
    }
    messages: list[Message] = []
    request_sent = False
    response_complete = anyio.Event()

    async def receive() -> Message:
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        await response_complete.wait()
        return {"type": "http.disconnect"}

    async def send(message: Message) -> None:
        messages.append(message)
        if message["type"] == "http.response.body" and not message.get("more_body", False):
            response_complete.set()

    await asgi_app(scope, receive, send)

    start = next(m for m in messages if m["type"] == "http.response.start")
    headers = {
        key.decode("latin-1"): value.decode("latin-1") for key, value in start["headers"]
    }
    return start["status"], headers


@pytest.fixture
def raw_get() -> Callable[[ASGIApp, str], Any]:
    """GET helper that bypasses client-side URL normalization."""
    return send_raw_get
