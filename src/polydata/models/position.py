"""Position, ClosedPosition, UserValue."""

from __future__ import annotations

from decimal import Decimal

from polydata.models.base import DataModel


class Position(DataModel):
    """Open position held by a user."""

    proxy_wallet: str = ""
    asset: str = ""
    condition_id: str = ""
    size: Decimal = Decimal(0)
    avg_price: Decimal = Decimal(0)
    initial_value: Decimal = Decimal(0)
    current_value: Decimal = Decimal(0)
    cash_pnl: Decimal = Decimal(0)
    percent_pnl: Decimal = Decimal(0)
    total_bought: Decimal = Decimal(0)
    realized_pnl: Decimal = Decimal(0)
    percent_realized_pnl: Decimal = Decimal(0)
    cur_price: Decimal = Decimal(0)
    redeemable: bool = False
    mergeable: bool = False
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_slug: str = ""
    outcome: str = ""
    outcome_index: int = 0
    opposite_outcome: str = ""
    opposite_asset: str = ""
    end_date: str = ""
    negative_risk: bool = False


class ClosedPosition(DataModel):
    """Position in a resolved or fully exited market."""

    proxy_wallet: str = ""
    asset: str = ""
    condition_id: str = ""
    avg_price: Decimal = Decimal(0)
    total_bought: Decimal = Decimal(0)
    realized_pnl: Decimal = Decimal(0)
    cur_price: Decimal = Decimal(0)
    title: str = ""
    slug: str = ""
    icon: str = ""
    event_slug: str = ""
    outcome: str = ""
    outcome_index: int = 0
    opposite_outcome: str = ""
    opposite_asset: str = ""
    end_date: str = ""


class UserValue(DataModel):
    """Total value of a user's positions."""

    user: str = ""
    value: Decimal = Decimal(0)
