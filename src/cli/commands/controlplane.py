"""Control plane reconciliation commands.

This module provides commands for reconciling a shoot control plane into
its seed namespace, rendering values without applying them and inspecting
sizing decisions.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from src.cli.context import get_cli_context
from src.cli.shared.console import console, with_error_handling
from src.controlplane.checksums import ChecksumMap
from src.controlplane.config import ConfigData, load_config, load_mapping_file
from src.controlplane.context import ReconcileContext, build_reconcile_context
from src.controlplane.deployer import ControlPlaneDeployer
from src.controlplane.sizing import band_label, size_for
from src.infra.helm import ChartApplier

app = typer.Typer(
    help="Shoot control plane reconciliation",
    no_args_is_help=True,
)


ConfigOption = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the reconciliation config file"),
]


# ---------------------------------------------------------------------------
# Helper Functions
# ---------------------------------------------------------------------------


def _load_context(
    config_path: Path,
    checksums_path: Path | None = None,
    secrets_path: Path | None = None,
) -> tuple[ConfigData, ReconcileContext]:
    """Load configuration and build the context of one pass.

    Args:
        config_path: Reconciliation config file
        checksums_path: Optional YAML mapping of artifact name to checksum
        secrets_path: Optional YAML mapping of secret name to secret data

    Returns:
        Tuple of loaded config and reconciliation context
    """
    config = load_config(config_path)
    checksums = ChecksumMap(
        {
            str(k): str(v)
            for k, v in load_mapping_file(checksums_path).items()
            if v is not None
        }
    )
    secrets = load_mapping_file(secrets_path)
    return config, build_reconcile_context(config, checksums, secrets)


def _get_deployer(config: ConfigData) -> ControlPlaneDeployer:
    """Create a deployer wired to the CLI's seed controller."""
    cli_ctx = get_cli_context()
    return ControlPlaneDeployer.from_config(
        config,
        controller=cli_ctx.seed_controller,
        applier=ChartApplier(cli_ctx.helm, timeout=config.helm.timeout),
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
@with_error_handling
def reconcile(
    config_path: ConfigOption = Path("config.yaml"),
    checksums_path: Annotated[
        Path | None,
        typer.Option("--checksums", help="YAML mapping of artifact checksums"),
    ] = None,
    secrets_path: Annotated[
        Path | None,
        typer.Option("--secrets", help="YAML mapping of secret name to data"),
    ] = None,
) -> None:
    """Run one control plane reconciliation pass.

    Deploys etcd main and events, the cloud provider config, then waits for
    the API server address to resolve and deploys kube-apiserver,
    kube-controller-manager, cloud-controller-manager and kube-scheduler.
    """
    config, ctx = _load_context(config_path, checksums_path, secrets_path)
    console.print_header(f"Reconciling control plane in {ctx.seed_namespace}")

    deployer = _get_deployer(config)
    with console.status("[bold green]Reconciling..."):
        deployer.reconcile(ctx)

    console.ok(f"Control plane in {ctx.seed_namespace} reconciled")


@app.command()
@with_error_handling
def render(
    config_path: ConfigOption = Path("config.yaml"),
    component: Annotated[
        str | None,
        typer.Option(
            "--component", help="Only print the release with this name (e.g. etcd-main)"
        ),
    ] = None,
    checksums_path: Annotated[
        Path | None,
        typer.Option("--checksums", help="YAML mapping of artifact checksums"),
    ] = None,
    secrets_path: Annotated[
        Path | None,
        typer.Option("--secrets", help="YAML mapping of secret name to data"),
    ] = None,
) -> None:
    """Print synthesized chart values without applying them.

    Live replica counts are still read from the seed unless autoscaling is
    centralized.
    """
    config, ctx = _load_context(config_path, checksums_path, secrets_path)
    deployer = _get_deployer(config)

    rendered = deployer.render(ctx)
    if component is not None:
        rendered = [v for v in rendered if v.release_name == component]
        if not rendered:
            console.handle_error(f"Unknown component: {component}")

    for values in rendered:
        if values.default_values is not None:
            console.print_release_values(values.release_name, values.default_values)
        if values.cloud_values is not None:
            console.print_release_values(
                values.release_name, values.cloud_values, layer="cloud"
            )


@app.command("refresh-cloud-config")
@with_error_handling
def refresh_cloud_config(config_path: ConfigOption = Path("config.yaml")) -> None:
    """Regenerate the cloud provider config map in place.

    Does nothing when the config map has not been deployed yet.
    """
    config, ctx = _load_context(config_path)
    deployer = _get_deployer(config)
    deployer.cloud_config.refresh(ctx)
    console.ok("Cloud provider config refreshed")


@app.command()
@with_error_handling
def releases(config_path: ConfigOption = Path("config.yaml")) -> None:
    """List the Helm releases in the shoot's seed namespace."""
    config = load_config(config_path)
    cli_ctx = get_cli_context()

    found = cli_ctx.helm.list_releases(config.namespace)
    if not found:
        console.warn(f"No releases found in {config.namespace}")
        return

    table = Table(title=f"Releases in {config.namespace}")
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Chart")
    table.add_column("Revision", justify="right")
    for release in found:
        status_style = "green" if release.status == "deployed" else "yellow"
        table.add_row(
            release.name,
            f"[{status_style}]{release.status}[/{status_style}]",
            release.chart,
            release.revision,
        )
    console.print(table)


@app.command()
def sizing(
    node_count: Annotated[int, typer.Argument(help="Number of shoot nodes")],
) -> None:
    """Show the kube-apiserver resource profile for a node count."""
    profile = size_for(node_count)

    table = Table(title=f"kube-apiserver resources for {node_count} nodes")
    table.add_column("Resource", style="cyan")
    table.add_column("Request")
    table.add_column("Limit")
    table.add_row("cpu", profile.cpu_request, profile.cpu_limit)
    table.add_row("memory", profile.memory_request, profile.memory_limit)
    console.print(table)

    console.info(f"Band: {band_label(node_count)}")
