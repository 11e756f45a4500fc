"""Market subcommands: holders, trades, oi, live-volume."""

from __future__ import annotations

import typer

from polydata.cli.common import run
from polydata.models import (
    FilterType,
    GetHoldersParams,
    GetLiveVolumeParams,
    GetOpenInterestParams,
    GetTradesParams,
    TradeSide,
)

app = typer.Typer(help="Market-level holders, trades, open interest and volume")


@app.command("holders")
def holders(
    ctx: typer.Context,
    market: list[str] = typer.Argument(..., help="Condition IDs"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max holders per token (0-500)"),
    min_balance: int | None = typer.Option(None, "--min-balance", help="Minimum balance (0-999999)"),
) -> None:
    """Top holders for the given markets."""
    run(
        ctx,
        lambda: GetHoldersParams(market=market, limit=limit, min_balance=min_balance),
        lambda client, params, rctx: client.get_holders(params, ctx=rctx),
    )


@app.command("trades")
def trades(
    ctx: typer.Context,
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max rows (0-10000)"),
    offset: int | None = typer.Option(None, "--offset", help="Rows to skip (0-10000)"),
    taker_only: bool | None = typer.Option(None, "--taker-only/--all-sides"),
    filter_type: FilterType | None = typer.Option(None, "--filter-type", help="Use with --filter-amount"),
    filter_amount: str | None = typer.Option(None, "--filter-amount", help="Minimum amount (decimal)"),
    market: list[str] | None = typer.Option(None, "--market", "-m", help="Condition ID (repeatable)"),
    event_id: list[int] | None = typer.Option(None, "--event-id", "-e", help="Event ID (repeatable)"),
    user: str = typer.Option("", "--user", "-u", help="User profile address"),
    side: TradeSide | None = typer.Option(None, "--side"),
) -> None:
    """Trades for a user or markets (global feed when neither is given)."""
    run(
        ctx,
        lambda: GetTradesParams(
            limit=limit,
            offset=offset,
            taker_only=taker_only,
            filter_type=filter_type,
            filter_amount=filter_amount,
            market=market or [],
            event_id=event_id or [],
            user=user,
            side=side,
        ),
        lambda client, params, rctx: client.get_trades(params, ctx=rctx),
    )


@app.command("oi")
def open_interest(
    ctx: typer.Context,
    market: list[str] | None = typer.Argument(None, help="Condition IDs (all markets when omitted)"),
) -> None:
    """Open interest per market."""
    run(
        ctx,
        lambda: GetOpenInterestParams(market=market or []),
        lambda client, params, rctx: client.get_open_interest(params, ctx=rctx),
    )


@app.command("live-volume")
def live_volume(
    ctx: typer.Context,
    event_id: int = typer.Argument(..., help="Event ID (>= 1)"),
) -> None:
    """Live volume for an event."""
    run(
        ctx,
        lambda: GetLiveVolumeParams(id=event_id),
        lambda client, params, rctx: client.get_live_volume(params, ctx=rctx),
    )
