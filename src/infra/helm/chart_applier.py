"""Chart application via Helm.

Renders values layers to temporary files and applies a chart with
``helm upgrade --install``. Default values and override values are written
to separate files so Helm resolves their precedence (overrides win).
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from loguru import logger

from src.controlplane.errors import ChartApplyError
from src.infra.constants import DEFAULT_CONSTANTS

from .commands import HelmCommands
from .runner import CommandRunner


class ChartApplier:
    """Applies control plane charts into the seed cluster."""

    def __init__(
        self,
        helm: HelmCommands | None = None,
        *,
        timeout: str = DEFAULT_CONSTANTS.HELM_TIMEOUT,
    ) -> None:
        """Initialize the chart applier.

        Args:
            helm: Helm command executor (a default runner is created if omitted)
            timeout: Helm operation timeout
        """
        self.helm = helm or HelmCommands(CommandRunner())
        self.timeout = timeout

    def apply(
        self,
        chart_path: Path,
        release_name: str,
        namespace: str,
        default_values: dict[str, Any] | None,
        override_values: dict[str, Any] | None,
    ) -> None:
        """Render and apply a chart.

        Args:
            chart_path: Path to the chart directory
            release_name: Helm release name
            namespace: Target seed namespace
            default_values: Lower precedence values layer (may be None)
            override_values: Higher precedence values layer (may be None)

        Raises:
            ChartApplyError: If helm reports a failure
        """
        with tempfile.TemporaryDirectory(prefix=f"{release_name}-values-") as tmp:
            value_files: list[Path] = []
            for layer, values in (
                ("defaults", default_values),
                ("overrides", override_values),
            ):
                if values is None:
                    continue
                path = Path(tmp) / f"{layer}.yaml"
                with open(path, "w") as f:
                    yaml.safe_dump(values, f, default_flow_style=False)
                value_files.append(path)

            logger.info(f"Applying chart {chart_path.name} as release {release_name}")
            result = self.helm.upgrade_install(
                release_name=release_name,
                chart_path=chart_path,
                namespace=namespace,
                value_files=value_files,
                timeout=self.timeout,
            )

        if not result.success:
            raise ChartApplyError(
                f"Failed to apply chart {chart_path.name} as release {release_name}",
                details=result.stderr or result.stdout or None,
            )
        logger.debug(f"Release {release_name} applied to namespace {namespace}")
