"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from src.cli.shared.console import CLIConsole, console
from src.infra.constants import DEFAULT_CONSTANTS, ControlPlaneConstants
from src.infra.helm import CommandRunner, HelmCommands
from src.infra.k8s import SeedControllerSync, get_seed_controller_sync


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    helm: HelmCommands
    seed_controller: SeedControllerSync
    constants: ControlPlaneConstants


def build_cli_context() -> CLIContext:
    """Build a fresh CLIContext."""
    return CLIContext(
        console=console,
        helm=HelmCommands(CommandRunner()),
        seed_controller=get_seed_controller_sync(),
        constants=DEFAULT_CONSTANTS,
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
