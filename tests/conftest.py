"""Shared fixtures: an in-process aiohttp server standing in for the cloud API."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from aiohttp import ClientSession, web
from aiohttp.test_utils import TestServer

from switchbot_cloud import ClientConfig, SwitchBotClient


def run_app(app: web.Application, scenario: Callable[[ClientSession, str], Awaitable[Any]]) -> Any:
    """Start ``app`` on a local port, run ``scenario(session, base_url)``, tear down."""

    async def _run() -> Any:
        server = TestServer(app)
        await server.start_server()
        try:
            async with ClientSession() as session:
                return await scenario(session, f"http://{server.host}:{server.port}")
        finally:
            await server.close()

    return asyncio.run(_run())


class FakeAPI:
    """Records every request and answers with a canned response."""

    def __init__(self, body: Any = None, *, status_code: int = 100, message: str = "success",
                 http_status: int = 200, raw: str | None = None, headers: dict | None = None) -> None:
        self.requests: list[dict[str, Any]] = []
        self._http_status = http_status
        self._headers = headers or {}
        if raw is not None:
            self._text = raw
        else:
            self._text = json.dumps({"statusCode": status_code, "body": body, "message": message})

    async def handler(self, request: web.Request) -> web.Response:
        text = await request.text()
        self.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "headers": request.headers.copy(),
                "text": text,
                "json": json.loads(text) if text else None,
            }
        )
        return web.Response(
            status=self._http_status,
            text=self._text,
            content_type="application/json",
            headers=self._headers,
        )

    def run(self, scenario: Callable[[SwitchBotClient], Awaitable[Any]], **config: Any) -> Any:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handler)
        config.setdefault("open_token", "open-token")

        async def _scenario(session: ClientSession, base_url: str) -> Any:
            client = SwitchBotClient(ClientConfig(endpoint=base_url, **config), session)
            return await scenario(client)

        return run_app(app, _scenario)


@pytest.fixture
def fake_api() -> Callable[..., FakeAPI]:
    return FakeAPI


@pytest.fixture
def serve_app() -> Callable[..., Any]:
    return run_app


@pytest.fixture(autouse=True)
def clean_switchbot_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # ClientConfig falls back to SWITCHBOT_* variables; keep the host's out
    for key in ("OPEN_TOKEN", "SECRET_KEY", "ENDPOINT", "TIMEOUT", "DEBUG"):
        monkeypatch.delenv(f"SWITCHBOT_{key}", raising=False)
