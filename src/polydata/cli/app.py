"""Root CLI app - entry point and command registration."""

from pathlib import Path

import typer

from polydata.cli.common import run
from polydata.config import get_settings
from polydata.config.settings import configure_logging

app = typer.Typer(
    name="polydata",
    help="polydata - query the Polymarket Data API from the command line.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_dir: Path | None = typer.Option(
        None, "--config-dir", "-C", help="Config directory (default: ./config or package config)"
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Config profile (e.g. dev) to overlay on default.toml"
    ),
    base_url: str | None = typer.Option(None, "--base-url", help="Override the Data API base URL"),
    timeout: float | None = typer.Option(
        None, "--timeout", "-t", help="Per-request deadline in seconds (overrides config)"
    ),
) -> None:
    """Configure logging and store options in context."""
    settings = get_settings(profile, config_dir)
    configure_logging(settings)
    ctx.obj = {
        "settings": settings,
        "profile": profile,
        "base_url": base_url,
        "timeout": timeout if timeout is not None else settings.request_timeout_sec,
    }


@app.command("health")
def health(ctx: typer.Context) -> None:
    """Check that the Data API is up."""
    run(ctx, lambda: None, lambda client, _, rctx: client.health_check(ctx=rctx))


# Subcommands registered from other modules
from polydata.cli import markets, users  # noqa: E402

app.add_typer(users.app, name="user")
app.add_typer(markets.app, name="market")


def run_app() -> None:
    app()


if __name__ == "__main__":
    run_app()
