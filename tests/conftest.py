"""Shared fixtures: spy executor and httpx mock server."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from polydata import DataClient, HttpResponse, RequestContext

BASE_URL = "https://data-api.test"
USER = "0x56687bf447db6ffa42ffe2204a05edaa20f55839"
CONDITION_ID = "0xdd22472e552920b8438158ea7238bfadfa4f736aa4cee91a6b86c39ead110917"


class SpyExecutor:
    """HttpExecutor that records calls and returns a canned response."""

    def __init__(self, status_code: int = 200, body: bytes | str = b"[]") -> None:
        self.status_code = status_code
        self.body = body.encode() if isinstance(body, str) else body
        self.calls: list[tuple[str, str]] = []

    def execute(self, method: str, url: str, ctx: RequestContext) -> HttpResponse:
        self.calls.append((method, url))
        return HttpResponse(status_code=self.status_code, body=self.body)


class MockServer:
    """httpx.MockTransport handler that records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = b"[]"
        self.on_request: Callable[[httpx.Request], None] | None = None

    def reply(self, status_code: int, payload: Any = None, *, raw: str | None = None) -> None:
        self.status_code = status_code
        self.content = raw.encode() if raw is not None else json.dumps(payload).encode()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext.background()


@pytest.fixture
def spy() -> SpyExecutor:
    return SpyExecutor()


@pytest.fixture
def spy_client(spy: SpyExecutor) -> DataClient:
    return DataClient(spy, base_url=BASE_URL)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def client(server: MockServer):
    with httpx.Client(transport=httpx.MockTransport(server)) as http:
        yield DataClient(http, base_url=BASE_URL)
