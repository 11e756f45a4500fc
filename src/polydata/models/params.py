"""Request parameter models, one per endpoint.

Optional scalars default to None (unset). Optional numeric fields also treat
0 as unset, so limit=0 is omitted from the query rather than sent. Constraints
(required fields, bounds, exclusivity) live in polydata.client.endpoints and
are checked by polydata.client.validation, not by pydantic.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from polydata.models.base import DataModel
from polydata.models.enums import (
    ActivitySortBy,
    ActivityType,
    ClosedPositionSortBy,
    FilterType,
    SortBy,
    SortDirection,
    TradeSide,
)


class GetActivityParams(DataModel):
    user: str = ""  # required, 0x-prefixed proxy wallet
    limit: int | None = None  # 0..500, server default 100
    offset: int | None = None  # 0..10000
    market: list[str] = Field(default_factory=list)  # condition IDs; exclusive with event_id
    event_id: list[int] = Field(default_factory=list)
    type: list[ActivityType] = Field(default_factory=list)
    start: int | None = None  # unix seconds
    end: int | None = None
    sort_by: ActivitySortBy | None = None
    sort_direction: SortDirection | None = None
    side: TradeSide | None = None


class GetHoldersParams(DataModel):
    market: list[str] = Field(default_factory=list)  # required
    limit: int | None = None  # 0..500
    min_balance: int | None = None  # 0..999999, server default 1


class GetPositionsParams(DataModel):
    user: str = ""  # required
    market: list[str] = Field(default_factory=list)
    event_id: list[int] = Field(default_factory=list)
    size_threshold: Decimal | None = None  # >= 0, server default 1
    redeemable: bool | None = None
    mergeable: bool | None = None
    limit: int | None = None  # 0..500
    offset: int | None = None  # 0..10000
    sort_by: SortBy | None = None
    sort_direction: SortDirection | None = None
    title: str = ""  # max 100 chars


class GetClosedPositionsParams(DataModel):
    user: str = ""  # required
    market: list[str] = Field(default_factory=list)  # exclusive with event_id
    title: str = ""  # max 100 chars
    event_id: list[int] = Field(default_factory=list)
    limit: int | None = None  # 0..500, server default 50
    offset: int | None = None  # 0..10000
    sort_by: ClosedPositionSortBy | None = None
    sort_direction: SortDirection | None = None


class GetValueParams(DataModel):
    user: str = ""  # required
    market: list[str] = Field(default_factory=list)


class GetTradesParams(DataModel):
    limit: int | None = None  # 0..10000
    offset: int | None = None  # 0..10000
    taker_only: bool | None = None  # server default true
    filter_type: FilterType | None = None  # only together with filter_amount
    filter_amount: Decimal | None = None  # >= 0
    market: list[str] = Field(default_factory=list)  # exclusive with event_id
    event_id: list[int] = Field(default_factory=list)
    user: str = ""  # optional; empty means the global feed
    side: TradeSide | None = None


class GetTradedMarketsCountParams(DataModel):
    user: str = ""  # required


class GetOpenInterestParams(DataModel):
    market: list[str] = Field(default_factory=list)


class GetLiveVolumeParams(DataModel):
    id: int = 0  # event ID, required, >= 1
