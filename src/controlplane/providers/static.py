"""Provider whose cloud specific values come straight from configuration.

Example ``cloud_provider`` section:

    cloud_provider:
      name: static
      options:
        cloud_provider_name: openstack
        cloud_provider_config: |
          [Global]
          auth-url = https://keystone.example.com/v3
        backup:
          secret:
            accessKeyID: ${BACKUP_ACCESS_KEY_ID}
          config:
            storageProvider: S3
            storageContainer: shoot-backups
        values:
          kube-apiserver:
            environment:
              - name: OS_REGION
                value: eu-1
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from src.controlplane.errors import ProviderError
from src.controlplane.models import BackupConfig, ControlPlaneComponent
from src.infra.constants import DEFAULT_CONSTANTS

from .base import CloudControlPlaneProvider

if TYPE_CHECKING:
    from src.controlplane.context import ReconcileContext


class StaticBackupOptions(BaseModel):
    secret: dict[str, str] | None = None
    config: dict[str, Any] | None = None


class StaticProviderOptions(BaseModel):
    """Options of the static provider."""

    cloud_provider_name: str
    cloud_provider_config: str = ""
    backup: StaticBackupOptions = Field(default_factory=StaticBackupOptions)
    values: dict[ControlPlaneComponent, dict[str, Any]] = Field(default_factory=dict)


class StaticCloudProvider(CloudControlPlaneProvider):
    """Serves configured values for every cloud specific request."""

    def __init__(self, options: dict[str, Any]) -> None:
        try:
            self.options = StaticProviderOptions(**options)
        except ValidationError as e:
            raise ProviderError("Invalid static provider options", details=str(e)) from e

    @property
    def cloud_provider_name(self) -> str:
        return self.options.cloud_provider_name

    def _values_for(self, component: ControlPlaneComponent) -> dict[str, Any] | None:
        values = self.options.values.get(component)
        return copy.deepcopy(values) if values is not None else None

    def generate_etcd_backup_config(self, ctx: ReconcileContext) -> BackupConfig:
        backup = self.options.backup
        return BackupConfig(
            secret_data=dict(backup.secret) if backup.secret is not None else None,
            backup_values=copy.deepcopy(backup.config),
        )

    def generate_cloud_provider_config(self, ctx: ReconcileContext) -> str:
        return self.options.cloud_provider_config

    def refresh_cloud_provider_config(self, current: dict[str, str]) -> dict[str, str]:
        refreshed = dict(current)
        refreshed[DEFAULT_CONSTANTS.CLOUD_PROVIDER_CONFIG_MAP_KEY] = (
            self.options.cloud_provider_config
        )
        return refreshed

    def generate_kube_apiserver_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return self._values_for(ControlPlaneComponent.KUBE_APISERVER)

    def generate_kube_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return self._values_for(ControlPlaneComponent.KUBE_CONTROLLER_MANAGER)

    def generate_cloud_controller_manager_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return self._values_for(ControlPlaneComponent.CLOUD_CONTROLLER_MANAGER)

    def generate_kube_scheduler_config(
        self, ctx: ReconcileContext
    ) -> dict[str, Any] | None:
        return self._values_for(ControlPlaneComponent.KUBE_SCHEDULER)
