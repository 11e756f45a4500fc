"""DataClient - typed operations over the Polymarket Data API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import BaseModel

from polydata.client import endpoints as ep
from polydata.client.query import build_url, encode_query
from polydata.client.response import classify
from polydata.client.transport import HttpExecutor, HttpxExecutor
from polydata.context import RequestContext
from polydata.models import (
    Activity,
    ClosedPosition,
    GetActivityParams,
    GetClosedPositionsParams,
    GetHoldersParams,
    GetLiveVolumeParams,
    GetOpenInterestParams,
    GetPositionsParams,
    GetTradedMarketsCountParams,
    GetTradesParams,
    GetValueParams,
    HealthResponse,
    LiveVolume,
    MarketHolders,
    OpenInterest,
    Position,
    Trade,
    TradedMarketsCount,
    UserValue,
)

log = structlog.get_logger(__name__)


class DataClient:
    """Client for https://data-api.polymarket.com.

    Every call is validate -> encode -> GET -> classify -> decode, driven by the
    descriptors in polydata.client.endpoints. One request per call, no retries.
    The client holds no mutable state; it is as thread-safe as the injected
    http client.
    """

    def __init__(
        self,
        http_client: httpx.Client | HttpExecutor,
        *,
        base_url: str = ep.DEFAULT_BASE_URL,
    ) -> None:
        if isinstance(http_client, httpx.Client):
            self.executor: HttpExecutor = HttpxExecutor(http_client)
        else:
            self.executor = http_client
        self.base_url = base_url.rstrip("/")

    def call(self, endpoint: ep.Endpoint, params: BaseModel | None, ctx: RequestContext) -> Any:
        """Run the shared pipeline for one endpoint."""
        query = encode_query(endpoint, params)
        url = build_url(self.base_url, endpoint.path, query)
        log.debug("data_api_request", endpoint=endpoint.name, url=url)
        resp = self.executor.execute("GET", url, ctx)
        return classify(endpoint, resp)

    def get_activity(self, params: GetActivityParams, *, ctx: RequestContext) -> list[Activity]:
        """On-chain activity for a user."""
        return self.call(ep.ACTIVITY, params, ctx)

    def get_holders(self, params: GetHoldersParams, *, ctx: RequestContext) -> list[MarketHolders]:
        """Top holders for each outcome token of the given markets."""
        return self.call(ep.HOLDERS, params, ctx)

    def get_positions(self, params: GetPositionsParams, *, ctx: RequestContext) -> list[Position]:
        """Current positions for a user."""
        return self.call(ep.POSITIONS, params, ctx)

    def get_closed_positions(
        self, params: GetClosedPositionsParams, *, ctx: RequestContext
    ) -> list[ClosedPosition]:
        """Closed positions for a user."""
        return self.call(ep.CLOSED_POSITIONS, params, ctx)

    def get_positions_value(self, params: GetValueParams, *, ctx: RequestContext) -> list[UserValue]:
        """Total value of a user's positions, optionally restricted to some markets."""
        return self.call(ep.VALUE, params, ctx)

    def get_trades(self, params: GetTradesParams, *, ctx: RequestContext) -> list[Trade]:
        """Trades for a user or markets; with no user set this is the global feed."""
        return self.call(ep.TRADES, params, ctx)

    def get_traded_markets_count(
        self, params: GetTradedMarketsCountParams, *, ctx: RequestContext
    ) -> TradedMarketsCount:
        """Number of distinct markets a user has traded."""
        return self.call(ep.TRADED, params, ctx)

    def get_open_interest(
        self, params: GetOpenInterestParams, *, ctx: RequestContext
    ) -> list[OpenInterest]:
        """Open interest per market; all markets when none are given."""
        return self.call(ep.OPEN_INTEREST, params, ctx)

    def get_live_volume(self, params: GetLiveVolumeParams, *, ctx: RequestContext) -> list[LiveVolume]:
        """Live volume for an event, with per-market breakdown."""
        return self.call(ep.LIVE_VOLUME, params, ctx)

    def health_check(self, *, ctx: RequestContext) -> HealthResponse:
        """GET / - returns data="OK" when the API is up."""
        return self.call(ep.HEALTH, None, ctx)
