"""Mini README: Entry point CLI for the Food Corner ledger.

This script exposes a Typer CLI with two commands: ``run`` starts the FastAPI
application with configurable host, port and production flags, and
``summary`` prints the seeded ledger to the terminal. Settings are drawn from
``FOODCORNER_`` environment variables when available.
"""

from __future__ import annotations

import typer
import uvicorn

from foodcorner.configuration import get_settings
from foodcorner.ledger import LedgerStore, format_amount, format_entry_line, status_line
from foodcorner.logging_utils import (
    configure_root_logger,
    level_for_environment,
    uvicorn_log_config,
)

cli = typer.Typer(help="Launch and inspect the Food Corner ledger.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    level = level_for_environment(settings.environment)
    configure_root_logger(level)

    # Browsers cannot navigate to the 0.0.0.0 / :: wildcard, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting {settings.restaurant_name} on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
        + (
            " (use your machine's IP address for remote access)."
            if effective_host in {"0.0.0.0", "::"}
            else ""
        )
    )
    uvicorn.run(
        "foodcorner.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
        log_config=uvicorn_log_config(level),
    )


@cli.command()
def summary() -> None:
    """Print the seeded income and expense sources with the profit/loss line."""

    settings = get_settings()
    store = LedgerStore()
    typer.echo(settings.restaurant_name)
    for title, entries, total in (
        ("Income", store.list_income(), store.total_income()),
        ("Expense", store.list_expense(), store.total_expense()),
    ):
        typer.echo(f"\n{title}")
        for entry in entries:
            typer.echo(f"  {format_entry_line(entry)}")
        typer.echo(f"Total {title}: {format_amount(total)}")
    typer.echo(f"\n{status_line(store).text}")


if __name__ == "__main__":
    cli()
