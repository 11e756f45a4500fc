"""Shared helpers for CLI commands: client construction, output, error exit codes."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator

import httpx
import pydantic
import pydantic_core
import structlog
import typer

from polydata.client import DataClient
from polydata.context import RequestContext
from polydata.errors import DataAPIError, ParameterError

log = structlog.get_logger(__name__)


@contextmanager
def open_client(ctx: typer.Context) -> Iterator[DataClient]:
    """DataClient over a fresh httpx.Client that is closed when the command ends."""
    settings = ctx.obj["settings"]
    with httpx.Client(timeout=ctx.obj["timeout"]) as http:
        yield DataClient(http, base_url=ctx.obj.get("base_url") or settings.data_api_base)


def request_context(ctx: typer.Context) -> RequestContext:
    return RequestContext.with_timeout(ctx.obj["timeout"])


def echo_json(result: Any) -> None:
    typer.echo(pydantic_core.to_json(result, indent=2, by_alias=True).decode())


def run(ctx: typer.Context, build: Callable[[], Any], call: Callable[[DataClient, Any, RequestContext], Any]) -> None:
    """Build params, run one call and print the JSON result.

    Exit code 2 for invalid parameters, 1 for any other client error.
    """
    try:
        params = build()
    except pydantic.ValidationError as e:
        typer.echo(f"Invalid parameters: {e}", err=True)
        raise typer.Exit(2)
    try:
        with open_client(ctx) as client:
            result = call(client, params, request_context(ctx))
    except ParameterError as e:
        typer.echo(f"Invalid parameters: {e}", err=True)
        raise typer.Exit(2)
    except DataAPIError as e:
        log.debug("cli_request_failed", error_type=type(e).__name__, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    echo_json(result)
