#!/usr/bin/env python3
"""
Main CLI entry point for the unitgraph server.
"""

import os
import sys

import click
import uvicorn

from unitgraph import __version__
from unitgraph.config import settings
from unitgraph.logging import configure_logging, get_logger
from unitgraph.units import BASE_UNITS, UNIT_TABLES, QuantityKind

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="unitgraph")
def cli() -> None:
    """unitgraph CLI - run the server and inspect unit tables."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting unitgraph API server", host=host, port=port, reload=reload)

    # The app module reads settings from the environment on import
    if log_level == "debug":
        os.environ["UNITGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("UNITGRAPH_DEBUG", "false")
    os.environ["UNITGRAPH_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "unitgraph.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in QuantityKind]),
    default=None,
    help="Only show the table for this quantity kind",
)
def units(kind: str | None) -> None:
    """Print the unit conversion tables."""
    kinds = [QuantityKind(kind)] if kind else list(QuantityKind)
    for quantity in kinds:
        base = BASE_UNITS[quantity]
        click.echo(f"{quantity.value} (base unit: {base})")
        for symbol, factor in UNIT_TABLES[quantity].items():
            click.echo(f"  {symbol:<12} {factor:g}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
