"""Cloud provider plugin interface.

A provider contributes the cloud specific parts of the control plane:
backup material for the store, the cloud provider config file and a values
fragment per component that takes precedence over the default values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from src.controlplane.models import BackupConfig

if TYPE_CHECKING:
    from src.controlplane.context import ReconcileContext


class CloudControlPlaneProvider(ABC):
    """Abstract interface for cloud specific control plane values."""

    @property
    @abstractmethod
    def cloud_provider_name(self) -> str:
        """Name passed to ``--cloud-provider`` of the controller managers."""
        ...

    @abstractmethod
    def generate_etcd_backup_config(self, ctx: ReconcileContext) -> BackupConfig:
        """Return backup secret data and chart backup values.

        Providers without backup support return an empty ``BackupConfig``.
        """
        ...

    @abstractmethod
    def generate_cloud_provider_config(self, ctx: ReconcileContext) -> str:
        """Return the content of the cloud provider config file."""
        ...

    @abstractmethod
    def refresh_cloud_provider_config(self, current: dict[str, str]) -> dict[str, str]:
        """Return the complete, refreshed data of the cloud provider config map.

        Args:
            current: Data of the existing config map
        """
        ...

    @abstractmethod
    def generate_kube_apiserver_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        """Cloud specific values for the kube-apiserver chart."""
        ...

    @abstractmethod
    def generate_kube_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        """Cloud specific values for the kube-controller-manager chart."""
        ...

    @abstractmethod
    def generate_cloud_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        """Cloud specific values for the cloud-controller-manager chart."""
        ...

    @abstractmethod
    def generate_kube_scheduler_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        """Cloud specific values for the kube-scheduler chart."""
        ...
