"""
nsid CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from nsid import __version__
from nsid.cli import ids
from nsid.core.config import load_config, load_layered_env

app = typer.Typer(
    name="nsid",
    help="Decode, build and compare namespaced identifiers",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False, level: str = "WARNING") -> None:
    """
    Configure logging for nsid commands.

    Args:
        debug: If True, log at DEBUG regardless of level
        level: Configured level name used when debug is off
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    nsid - namespaced, temporal and bi-temporal identifiers.

    Identifiers are written as namespace/id, optionally followed by an
    as-of time and an as-at time: namespace/id/as_of/as_at.
    """
    load_layered_env()
    setup_logging(debug, load_config().log_level)


app.command(name="parse")(ids.parse)
app.command(name="new")(ids.new)
app.command(name="compare")(ids.compare)


@app.command()
def version() -> None:
    """Show nsid version and exit."""
    console.print(f"nsid version {__version__}")
    raise typer.Exit(0)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
