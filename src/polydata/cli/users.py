"""User subcommands: activity, positions, closed-positions, value, traded."""

from __future__ import annotations

import typer

from polydata.cli.common import run
from polydata.models import (
    ActivitySortBy,
    ActivityType,
    ClosedPositionSortBy,
    GetActivityParams,
    GetClosedPositionsParams,
    GetPositionsParams,
    GetTradedMarketsCountParams,
    GetValueParams,
    SortBy,
    SortDirection,
    TradeSide,
)

app = typer.Typer(help="Per-user activity, positions and value")


@app.command("activity")
def activity(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User profile address (0x-prefixed)"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max rows (0-500)"),
    offset: int | None = typer.Option(None, "--offset", help="Rows to skip (0-10000)"),
    market: list[str] | None = typer.Option(None, "--market", "-m", help="Condition ID (repeatable)"),
    event_id: list[int] | None = typer.Option(None, "--event-id", "-e", help="Event ID (repeatable)"),
    type_: list[ActivityType] | None = typer.Option(None, "--type", help="Activity type (repeatable)"),
    start: int | None = typer.Option(None, "--start", help="Start timestamp (unix seconds)"),
    end: int | None = typer.Option(None, "--end", help="End timestamp (unix seconds)"),
    sort_by: ActivitySortBy | None = typer.Option(None, "--sort-by"),
    sort_direction: SortDirection | None = typer.Option(None, "--sort-direction"),
    side: TradeSide | None = typer.Option(None, "--side"),
) -> None:
    """On-chain activity for a user."""
    run(
        ctx,
        lambda: GetActivityParams(
            user=user,
            limit=limit,
            offset=offset,
            market=market or [],
            event_id=event_id or [],
            type=type_ or [],
            start=start,
            end=end,
            sort_by=sort_by,
            sort_direction=sort_direction,
            side=side,
        ),
        lambda client, params, rctx: client.get_activity(params, ctx=rctx),
    )


@app.command("positions")
def positions(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User profile address (0x-prefixed)"),
    market: list[str] | None = typer.Option(None, "--market", "-m", help="Condition ID (repeatable)"),
    event_id: list[int] | None = typer.Option(None, "--event-id", "-e", help="Event ID (repeatable)"),
    size_threshold: str | None = typer.Option(None, "--size-threshold", help="Minimum size (decimal)"),
    redeemable: bool | None = typer.Option(None, "--redeemable/--no-redeemable"),
    mergeable: bool | None = typer.Option(None, "--mergeable/--no-mergeable"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max rows (0-500)"),
    offset: int | None = typer.Option(None, "--offset", help="Rows to skip (0-10000)"),
    sort_by: SortBy | None = typer.Option(None, "--sort-by"),
    sort_direction: SortDirection | None = typer.Option(None, "--sort-direction"),
    title: str = typer.Option("", "--title", help="Filter by market title (max 100 chars)"),
) -> None:
    """Current positions for a user."""
    run(
        ctx,
        lambda: GetPositionsParams(
            user=user,
            market=market or [],
            event_id=event_id or [],
            size_threshold=size_threshold,
            redeemable=redeemable,
            mergeable=mergeable,
            limit=limit,
            offset=offset,
            sort_by=sort_by,
            sort_direction=sort_direction,
            title=title,
        ),
        lambda client, params, rctx: client.get_positions(params, ctx=rctx),
    )


@app.command("closed-positions")
def closed_positions(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User profile address (0x-prefixed)"),
    market: list[str] | None = typer.Option(None, "--market", "-m", help="Condition ID (repeatable)"),
    event_id: list[int] | None = typer.Option(None, "--event-id", "-e", help="Event ID (repeatable)"),
    title: str = typer.Option("", "--title", help="Filter by market title (max 100 chars)"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Max rows (0-500)"),
    offset: int | None = typer.Option(None, "--offset", help="Rows to skip (0-10000)"),
    sort_by: ClosedPositionSortBy | None = typer.Option(None, "--sort-by"),
    sort_direction: SortDirection | None = typer.Option(None, "--sort-direction"),
) -> None:
    """Closed positions for a user."""
    run(
        ctx,
        lambda: GetClosedPositionsParams(
            user=user,
            market=market or [],
            event_id=event_id or [],
            title=title,
            limit=limit,
            offset=offset,
            sort_by=sort_by,
            sort_direction=sort_direction,
        ),
        lambda client, params, rctx: client.get_closed_positions(params, ctx=rctx),
    )


@app.command("value")
def value(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User profile address (0x-prefixed)"),
    market: list[str] | None = typer.Option(None, "--market", "-m", help="Condition ID (repeatable)"),
) -> None:
    """Total value of a user's positions."""
    run(
        ctx,
        lambda: GetValueParams(user=user, market=market or []),
        lambda client, params, rctx: client.get_positions_value(params, ctx=rctx),
    )


@app.command("traded")
def traded(
    ctx: typer.Context,
    user: str = typer.Argument(..., help="User profile address (0x-prefixed)"),
) -> None:
    """Number of markets a user has traded."""
    run(
        ctx,
        lambda: GetTradedMarketsCountParams(user=user),
        lambda client, params, rctx: client.get_traded_markets_count(params, ctx=rctx),
    )
