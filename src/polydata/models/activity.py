"""Activity - on-chain user activity (trades, splits, merges, redeems, ...)."""

from __future__ import annotations

from decimal import Decimal

from polydata.models.base import DataModel


class Activity(DataModel):
    """One row of GET /activity."""

    proxy_wallet: str = ""
    timestamp: int = 0
    condition_id: str = ""
    type: str = ""  # ActivityType value; kept as str so new types still decode
    size: Decimal = Decimal(0)
    usdc_size: Decimal = Decimal(0)
    transaction_hash: str = ""
    price: Decimal = Decimal(0)
    asset: str = ""
    side: str = ""
    outcome_index: int = 0
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_slug: str = ""
    outcome: str = ""
    name: str = ""
    pseudonym: str = ""
    bio: str = ""
    profile_image: str = ""
    profile_image_optimized: str = ""
