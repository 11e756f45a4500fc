"""Holder, MarketHolders - top holders per outcome token."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from polydata.models.base import DataModel


class Holder(DataModel):
    proxy_wallet: str = ""
    bio: str = ""
    asset: str = ""
    pseudonym: str = ""
    amount: Decimal = Decimal(0)
    display_username_public: bool = False
    outcome_index: int = 0
    name: str = ""
    profile_image: str = ""
    profile_image_optimized: str = ""


class MarketHolders(DataModel):
    """Holders of a single outcome token."""

    token: str = ""
    holders: list[Holder] = Field(default_factory=list)
