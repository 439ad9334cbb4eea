"""Mini README: Entry point CLI for the Coffer service.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI application under uvicorn using configured host and port, and
``calculate`` applies the currency ledger to two amounts without touching
any wallet.
"""

from __future__ import annotations

import typer
import uvicorn

from coffer.configuration import get_settings
from coffer.currency import Money, apply
from coffer.exceptions import InsufficientFunds, UnsupportedOperation
from coffer.logging_utils import configure_root_logger, level_for_environment

cli = typer.Typer(help="Launch the Coffer service and work with currency amounts.")


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
    configure_root_logger(level_for_environment(settings.environment))

    # Browsers cannot open 0.0.0.0, so point operators at loopback instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Coffer on {effective_host}:{effective_port}.\n"
        f"Open http://{browser_host}:{effective_port}{settings.context_path}/inventory"
    )
    uvicorn.run(
        "coffer.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def calculate(
    first: str = typer.Argument(..., help="Starting amount, e.g. '10g 23s 67c'."),
    second: str = typer.Argument(..., help="Amount to add or subtract."),
    action: str = typer.Option("add", help="Either 'add' or 'subtract'."),
) -> None:
    """Print the result of applying ACTION to FIRST and SECOND."""

    try:
        result = apply(action, Money.parse(first), Money.parse(second))
    except UnsupportedOperation as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2) from error
    except InsufficientFunds as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error
    except ValueError as error:
        typer.echo(f"Invalid amount: {error}", err=True)
        raise typer.Exit(code=2) from error
    typer.echo(str(result))


if __name__ == "__main__":
    cli()
