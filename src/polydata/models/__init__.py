"""Data API records, request parameters and enums (Pydantic)."""

from polydata.models.activity import Activity
from polydata.models.enums import (
    ActivitySortBy,
    ActivityType,
    ClosedPositionSortBy,
    FilterType,
    SortBy,
    SortDirection,
    TradeSide,
)
from polydata.models.health import ErrorResponse, HealthResponse
from polydata.models.holder import Holder, MarketHolders
from polydata.models.market import LiveVolume, LiveVolumeMarket, OpenInterest
from polydata.models.params import (
    GetActivityParams,
    GetClosedPositionsParams,
    GetHoldersParams,
    GetLiveVolumeParams,
    GetOpenInterestParams,
    GetPositionsParams,
    GetTradedMarketsCountParams,
    GetTradesParams,
    GetValueParams,
)
from polydata.models.position import ClosedPosition, Position, UserValue
from polydata.models.trade import Trade, TradedMarketsCount

__all__ = [
    "Activity",
    "Trade",
    "TradedMarketsCount",
    "Position",
    "ClosedPosition",
    "UserValue",
    "Holder",
    "MarketHolders",
    "OpenInterest",
    "LiveVolume",
    "LiveVolumeMarket",
    "HealthResponse",
    "ErrorResponse",
    "SortBy",
    "SortDirection",
    "TradeSide",
    "FilterType",
    "ActivityType",
    "ActivitySortBy",
    "ClosedPositionSortBy",
    "GetActivityParams",
    "GetHoldersParams",
    "GetPositionsParams",
    "GetClosedPositionsParams",
    "GetValueParams",
    "GetTradesParams",
    "GetTradedMarketsCountParams",
    "GetOpenInterestParams",
    "GetLiveVolumeParams",
]
