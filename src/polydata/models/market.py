"""OpenInterest, LiveVolume - market-level aggregates."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from polydata.models.base import DataModel


class OpenInterest(DataModel):
    market: str = ""  # condition ID
    value: Decimal = Decimal(0)


class LiveVolumeMarket(DataModel):
    market: str = ""  # condition ID
    value: Decimal = Decimal(0)


class LiveVolume(DataModel):
    """Live volume for an event, total plus per-market breakdown."""

    total: Decimal = Decimal(0)
    markets: list[LiveVolumeMarket] = Field(default_factory=list)
