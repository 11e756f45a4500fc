"""Trade, TradedMarketsCount."""

from __future__ import annotations

from decimal import Decimal

from polydata.models.base import DataModel


class Trade(DataModel):
    """Executed trade from GET /trades."""

    proxy_wallet: str = ""
    side: str = ""  # BUY | SELL
    asset: str = ""
    condition_id: str = ""
    size: Decimal = Decimal(0)
    price: Decimal = Decimal(0)
    timestamp: int = 0
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_slug: str = ""
    outcome: str = ""
    outcome_index: int = 0
    name: str = ""
    pseudonym: str = ""
    bio: str = ""
    profile_image: str = ""
    profile_image_optimized: str = ""
    transaction_hash: str = ""


class TradedMarketsCount(DataModel):
    """Number of distinct markets a user has traded (GET /traded)."""

    user: str = ""
    traded: int = 0
