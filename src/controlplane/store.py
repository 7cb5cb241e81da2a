"""Deployment of the two etcd roles.

The ``main`` etcd holds all cluster state and is backed up; the ``events``
etcd only holds events and never is. Both are releases of the same chart.
"""

from __future__ import annotations

from loguru import logger

from src.controlplane.context import ReconcileContext
from src.controlplane.models import StoreRole
from src.controlplane.providers import CloudControlPlaneProvider
from src.controlplane.synthesizers import StoreSynthesizer, store_release_name
from src.infra.constants import DEFAULT_CONSTANTS
from src.infra.helm import ChartApplier
from src.infra.k8s import ResourceNotFoundError, SeedControllerSync

ROLES: tuple[StoreRole, ...] = (StoreRole.MAIN, StoreRole.EVENTS)


class StoreDeployer:
    """Deploys the main and events etcd releases of a shoot."""

    def __init__(
        self,
        provider: CloudControlPlaneProvider,
        synthesizer: StoreSynthesizer,
        applier: ChartApplier,
        controller: SeedControllerSync,
    ) -> None:
        self.provider = provider
        self.synthesizer = synthesizer
        self.applier = applier
        self.controller = controller

    def deploy(self, ctx: ReconcileContext) -> None:
        """Deploy both roles, main first.

        A failure leaves earlier roles deployed; the next pass picks up from
        there.
        """
        backup = self.provider.generate_etcd_backup_config(ctx)

        # Providers without backup support return no secret data
        if backup.secret_data is not None:
            self.controller.create_secret(
                ctx.seed_namespace,
                DEFAULT_CONSTANTS.BACKUP_SECRET_NAME,
                backup.secret_data,
                secret_type="Opaque",
                update=True,
            )
            logger.info(f"Stored backup secret {DEFAULT_CONSTANTS.BACKUP_SECRET_NAME}")

        for role in ROLES:
            values = self.synthesizer.synthesize(ctx, role, backup.backup_values)
            self.applier.apply(
                values.chart_path,
                values.release_name,
                ctx.seed_namespace,
                values.default_values,
                values.cloud_values,
            )
            self._delete_legacy_service(ctx.seed_namespace, role)
            logger.info(f"Deployed etcd role {role.value}")

    def _delete_legacy_service(self, namespace: str, role: StoreRole) -> None:
        name = store_release_name(role)
        try:
            self.controller.delete_service(namespace, name)
            logger.info(f"Deleted legacy service {namespace}/{name}")
        except ResourceNotFoundError:
            logger.debug(f"Legacy service {namespace}/{name} already gone")
