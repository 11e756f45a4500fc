"""Declarative endpoint descriptors for the Polymarket Data API.

Each Endpoint names its path, the query parameters it accepts (with their
constraints) and the pydantic shape of a successful response. The validator,
query encoder and response decoder are driven entirely by these tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, TypeAdapter

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

DEFAULT_BASE_URL = "https://data-api.polymarket.com"

MAX_LIMIT = 500
MAX_TRADES_LIMIT = 10000
MAX_OFFSET = 10000
MAX_MIN_BALANCE = 999999
MAX_TITLE_LENGTH = 100


@dataclass(frozen=True)
class Param:
    """One query parameter: model attribute, wire key and constraints."""

    attr: str
    key: str
    required: bool = False
    min_value: int | Decimal | None = None
    max_value: int | None = None
    max_length: int | None = None


@dataclass(frozen=True, eq=False)
class Endpoint:
    name: str
    path: str
    response: TypeAdapter[Any]
    params_type: type[BaseModel] | None = None
    params: tuple[Param, ...] = ()
    exclusive: tuple[tuple[str, str], ...] = ()  # wire keys, never both set
    paired: tuple[tuple[str, str], ...] = ()  # wire keys, both or neither

    def param(self, key: str) -> Param:
        for p in self.params:
            if p.key == key:
                return p
        raise KeyError(key)


def _user(required: bool = True) -> Param:
    return Param("user", "user", required=required)


def _limit(bound: int = MAX_LIMIT) -> Param:
    return Param("limit", "limit", min_value=0, max_value=bound)


def _offset() -> Param:
    return Param("offset", "offset", min_value=0, max_value=MAX_OFFSET)


def _market(required: bool = False) -> Param:
    return Param("market", "market", required=required)


def _event_id() -> Param:
    return Param("event_id", "eventId")


_MARKET_OR_EVENT = (("market", "eventId"),)

ACTIVITY = Endpoint(
    name="activity",
    path="/activity",
    response=TypeAdapter(list[Activity]),
    params_type=GetActivityParams,
    params=(
        _user(),
        _limit(),
        _offset(),
        _market(),
        _event_id(),
        Param("type", "type"),
        Param("start", "start", min_value=0),
        Param("end", "end", min_value=0),
        Param("sort_by", "sortBy"),
        Param("sort_direction", "sortDirection"),
        Param("side", "side"),
    ),
    exclusive=_MARKET_OR_EVENT,
)

HOLDERS = Endpoint(
    name="holders",
    path="/holders",
    response=TypeAdapter(list[MarketHolders]),
    params_type=GetHoldersParams,
    params=(
        _market(required=True),
        _limit(),
        Param("min_balance", "minBalance", min_value=0, max_value=MAX_MIN_BALANCE),
    ),
)

POSITIONS = Endpoint(
    name="positions",
    path="/positions",
    response=TypeAdapter(list[Position]),
    params_type=GetPositionsParams,
    params=(
        _user(),
        _market(),
        _event_id(),
        Param("size_threshold", "sizeThreshold", min_value=Decimal(0)),
        Param("redeemable", "redeemable"),
        Param("mergeable", "mergeable"),
        _limit(),
        _offset(),
        Param("sort_by", "sortBy"),
        Param("sort_direction", "sortDirection"),
        Param("title", "title", max_length=MAX_TITLE_LENGTH),
    ),
)

CLOSED_POSITIONS = Endpoint(
    name="closed-positions",
    path="/closed-positions",
    response=TypeAdapter(list[ClosedPosition]),
    params_type=GetClosedPositionsParams,
    params=(
        _user(),
        _market(),
        Param("title", "title", max_length=MAX_TITLE_LENGTH),
        _event_id(),
        _limit(),
        _offset(),
        Param("sort_by", "sortBy"),
        Param("sort_direction", "sortDirection"),
    ),
    exclusive=_MARKET_OR_EVENT,
)

VALUE = Endpoint(
    name="value",
    path="/value",
    response=TypeAdapter(list[UserValue]),
    params_type=GetValueParams,
    params=(_user(), _market()),
)

TRADES = Endpoint(
    name="trades",
    path="/trades",
    response=TypeAdapter(list[Trade]),
    params_type=GetTradesParams,
    params=(
        _limit(MAX_TRADES_LIMIT),
        _offset(),
        Param("taker_only", "takerOnly"),
        Param("filter_type", "filterType"),
        Param("filter_amount", "filterAmount", min_value=Decimal(0)),
        _market(),
        _event_id(),
        _user(required=False),
        Param("side", "side"),
    ),
    exclusive=_MARKET_OR_EVENT,
    paired=(("filterType", "filterAmount"),),
)

TRADED = Endpoint(
    name="traded",
    path="/traded",
    response=TypeAdapter(TradedMarketsCount),
    params_type=GetTradedMarketsCountParams,
    params=(_user(),),
)

OPEN_INTEREST = Endpoint(
    name="oi",
    path="/oi",
    response=TypeAdapter(list[OpenInterest]),
    params_type=GetOpenInterestParams,
    params=(_market(),),
)

LIVE_VOLUME = Endpoint(
    name="live-volume",
    path="/live-volume",
    response=TypeAdapter(list[LiveVolume]),
    params_type=GetLiveVolumeParams,
    params=(Param("id", "id", min_value=1),),
)

HEALTH = Endpoint(
    name="health",
    path="/",
    response=TypeAdapter(HealthResponse),
)

ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        ACTIVITY,
        HOLDERS,
        POSITIONS,
        CLOSED_POSITIONS,
        VALUE,
        TRADES,
        TRADED,
        OPEN_INTEREST,
        LIVE_VOLUME,
        HEALTH,
    )
}
