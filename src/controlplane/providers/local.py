"""Provider for seeds without any cloud integration (kind, minikube)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from src.controlplane.models import BackupConfig

from .base import CloudControlPlaneProvider

if TYPE_CHECKING:
    from src.controlplane.context import ReconcileContext


class LocalCloudProvider(CloudControlPlaneProvider):
    """No cloud provider, no backups, no cloud specific values."""

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self.options = dict(options or {})

    @property
    def cloud_provider_name(self) -> str:
        return ""

    def generate_etcd_backup_config(self, ctx: ReconcileContext) -> BackupConfig:
        return BackupConfig()

    def generate_cloud_provider_config(self, ctx: ReconcileContext) -> str:
        return ""

    def refresh_cloud_provider_config(self, current: dict[str, str]) -> dict[str, str]:
        return dict(current)

    def generate_kube_apiserver_config(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        return None

    def generate_kube_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return None

    def generate_cloud_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return None

    def generate_kube_scheduler_config(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        return None
