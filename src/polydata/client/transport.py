"""HTTP transport: executor protocol and the httpx-backed implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx
import structlog

from polydata.context import RequestContext
from polydata.errors import DeadlineExceeded, TransportError

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus the fully read body."""

    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpExecutor(Protocol):
    """Anything that can perform one HTTP request and return the full response.

    Implementations raise TransportError, Cancelled or DeadlineExceeded; they
    never retry.
    """

    def execute(self, method: str, url: str, ctx: RequestContext) -> HttpResponse: ...


class HttpxExecutor:
    """HttpExecutor over a caller-owned httpx.Client.

    The client is never created or closed here; connection pooling, proxies
    and TLS settings are the caller's concern.
    """

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def execute(self, method: str, url: str, ctx: RequestContext) -> HttpResponse:
        ctx.check()
        remaining = ctx.remaining()
        kwargs = {}
        if remaining is not None:
            kwargs["timeout"] = remaining
        try:
            resp = self.client.request(method, url, **kwargs)
            body = resp.read()
        except httpx.TimeoutException as e:
            if ctx.expired:
                raise DeadlineExceeded() from e
            raise TransportError(f"{method} {url} timed out: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.debug("http_transport_error", url=url, error=str(e))
            raise TransportError(f"{method} {url} failed: {e}") from e
        ctx.check()
        return HttpResponse(status_code=resp.status_code, body=body)
