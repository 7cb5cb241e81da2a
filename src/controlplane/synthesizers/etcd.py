"""etcd values for the two store roles."""

from __future__ import annotations

import copy
from typing import Any

from src.controlplane.checksums import checksum_annotations
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ComponentValues, ControlPlaneComponent, StoreRole
from src.infra.constants import ChartPaths
from src.infra.images import ImageResolver

# An empty storage provider turns backups off in the etcd chart
DISABLED_BACKUP: dict[str, Any] = {"storageProvider": ""}


def store_release_name(role: StoreRole) -> str:
    return f"etcd-{role.value}"


class StoreSynthesizer:
    """Builds the values of one etcd role."""

    component = ControlPlaneComponent.ETCD
    images = {"etcd": "etcd", "etcd-backup-restore": "etcd-backup-restore"}
    annotation_refs = {
        "secret-etcd-ca": "ca-etcd",
        "secret-etcd-server-tls": "etcd-server-tls",
        "secret-etcd-client-tls": "etcd-client-tls",
    }

    def __init__(self, image_resolver: ImageResolver, paths: ChartPaths) -> None:
        self.image_resolver = image_resolver
        self.paths = paths

    def synthesize(
        self,
        ctx: ReconcileContext,
        role: StoreRole,
        backup_values: dict[str, Any] | None,
    ) -> ComponentValues:
        """Build values for ``role``.

        The events role never gets a backup, whatever ``backup_values`` says.
        """
        values: dict[str, Any] = {
            "role": role.value,
            "podAnnotations": checksum_annotations(ctx.checksums, self.annotation_refs),
        }
        if role is StoreRole.EVENTS:
            values["backup"] = dict(DISABLED_BACKUP)
        elif backup_values is not None:
            values["backup"] = copy.deepcopy(backup_values)

        resolved = self.image_resolver.resolve(
            values, ctx.seed.kubernetes_version, self.images
        )
        return ComponentValues(
            component=self.component,
            release_name=store_release_name(role),
            chart_path=self.paths.chart(self.component.value),
            default_values=resolved,
            cloud_values=None,
        )
