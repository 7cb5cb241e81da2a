"""Control plane constants.

This module centralizes all magic strings, chart names and well-known
resource names used when deploying shoot control planes into a seed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ControlPlaneConstants:
    """Constants for control plane deployment.

    This class provides a centralized location for all control plane
    related constants, making them easy to find, update, and test.

    All attributes are class-level and immutable.
    """

    # Cloud provider config map
    CLOUD_PROVIDER_CONFIG_NAME: str = "cloud-provider-config"
    CLOUD_PROVIDER_CONFIG_MAP_KEY: str = "cloudprovider.conf"

    # Store
    BACKUP_SECRET_NAME: str = "etcd-backup"
    ETCD_SERVICE_PORT: int = 2379

    # API server
    API_SERVER_SECURE_PORT: int = 443
    API_SERVER_MAX_REPLICAS: int = 3

    # Helm
    HELM_TIMEOUT: str = "10m"

    # Relative path fragments for chart layout
    CHARTS_DIR: str = "charts"
    SEED_CONTROLPLANE_DIR: str = "seed-controlplane"


DEFAULT_CONSTANTS = ControlPlaneConstants()


class ChartPaths:
    """Path resolver for control plane charts.

    Charts live below ``<chart_root>/seed-controlplane/charts/<name>``.
    """

    def __init__(self, chart_root: Path) -> None:
        """Initialize chart paths.

        Args:
            chart_root: Directory containing the ``seed-controlplane`` chart
        """
        self._chart_root = chart_root
        self._constants = DEFAULT_CONSTANTS

        self.controlplane = (
            chart_root / self._constants.SEED_CONTROLPLANE_DIR / self._constants.CHARTS_DIR
        )

    @property
    def chart_root(self) -> Path:
        """Get the chart root directory."""
        return self._chart_root

    def chart(self, name: str) -> Path:
        """Get the path of a control plane sub-chart by name."""
        return self.controlplane / name
