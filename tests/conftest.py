"""Shared fixtures: a NetworkClient wired to an httpx.MockTransport handler."""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from mirai_client.config import DEFAULT_CONFIG
from mirai_client.core import ClientSession, NetworkClient

BASE_URL = "http://gateway.test:8080"
SESSION_KEY = "SESSION-KEY"


class Recorder:
    """Records requests and answers them from a route table keyed by path."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def on(self, path: str, payload: Any = None, status: int = 200, text: str | None = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, json=payload)

        self.routes[path] = respond

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        return route(request)

    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content.decode("utf-8"))

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def test_config() -> Dict[str, Any]:
    config = DEFAULT_CONFIG.copy()
    config.update({"base_url": BASE_URL, "auth_key": "AUTH-KEY", "qq": 10001})
    return config


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest_asyncio.fixture
async def http_client(recorder):
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler)) as client:
        yield client


@pytest.fixture
def network(test_config, http_client) -> NetworkClient:
    return NetworkClient(test_config, http_client=http_client)


@pytest.fixture
def session() -> ClientSession:
    session = ClientSession()
    session.session_key = SESSION_KEY
    session.bound_qq = 10001
    return session
