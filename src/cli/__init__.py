"""Main CLI application module.

This module provides the main entry point for the seedplane CLI, which
reconciles shoot control planes into their seed namespaces.

Command Groups:
- controlplane: reconcile, render, refresh-cloud-config, releases, sizing
"""

import sys
from typing import Annotated

import typer
from loguru import logger

from .commands import controlplane_app

# Create the main CLI application
app = typer.Typer(
    help="🌱 seedplane - Shoot control plane reconciliation",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def configure(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure logging."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


app.add_typer(controlplane_app, name="controlplane")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
