"""Cloud provider config map management.

The config map's content checksum is recorded in the checksum registry so
the controller managers roll whenever the cloud configuration changes.
"""

from __future__ import annotations

from loguru import logger

from src.controlplane.checksums import compute_checksum
from src.controlplane.context import ReconcileContext
from src.controlplane.providers import CloudControlPlaneProvider
from src.infra.constants import DEFAULT_CONSTANTS, ChartPaths
from src.infra.helm import ChartApplier
from src.infra.k8s import ResourceNotFoundError, SeedControllerSync


class CloudProviderConfigManager:
    """Deploys and refreshes the ``cloud-provider-config`` config map."""

    def __init__(
        self,
        provider: CloudControlPlaneProvider,
        applier: ChartApplier,
        controller: SeedControllerSync,
        paths: ChartPaths,
    ) -> None:
        self.provider = provider
        self.applier = applier
        self.controller = controller
        self.paths = paths

    def generate(self, ctx: ReconcileContext) -> str:
        """Generate the cloud provider config and record its checksum."""
        config = self.provider.generate_cloud_provider_config(ctx)
        ctx.checksums.record(
            DEFAULT_CONSTANTS.CLOUD_PROVIDER_CONFIG_NAME, compute_checksum(config)
        )
        return config

    def deploy(self, ctx: ReconcileContext) -> None:
        """Generate the cloud provider config and apply its chart."""
        name = DEFAULT_CONSTANTS.CLOUD_PROVIDER_CONFIG_NAME
        config = self.generate(ctx)

        self.applier.apply(
            self.paths.chart(name),
            name,
            ctx.seed_namespace,
            {"cloudProviderConfig": config},
            None,
        )
        logger.info(f"Deployed {name}")

    def refresh(self, ctx: ReconcileContext) -> None:
        """Let the provider refresh an existing config map (e.g. rotated credentials).

        Does nothing if the config map does not exist yet.
        """
        name = DEFAULT_CONSTANTS.CLOUD_PROVIDER_CONFIG_NAME
        try:
            current = self.controller.get_config_map(ctx.seed_namespace, name)
        except ResourceNotFoundError:
            logger.debug(f"Config map {name} does not exist yet, nothing to refresh")
            return

        data = self.provider.refresh_cloud_provider_config(dict(current.data))
        ctx.checksums.record(
            name,
            compute_checksum(data.get(DEFAULT_CONSTANTS.CLOUD_PROVIDER_CONFIG_MAP_KEY, "")),
        )
        self.controller.update_config_map(ctx.seed_namespace, name, data)
        logger.info(f"Refreshed {name}")
