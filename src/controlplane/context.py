"""Per-pass reconciliation context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from src.controlplane.checksums import ChecksumMap
from src.controlplane.config.config_data import ConfigData, SeedConfig, ShootConfig
from src.controlplane.models import (
    AutoscalingMode,
    CentralizedAutoscaling,
    LiveDrivenAutoscaling,
)


@dataclass(frozen=True)
class ReconcileContext:
    """Inputs of one control plane reconciliation pass.

    Attributes:
        shoot: Managed cluster settings (version, networks, component settings)
        seed: Hosting cluster settings
        seed_namespace: Namespace of the shoot's control plane in the seed
        api_server_address: DNS name the shoot API server is reachable at
        checksums: Artifact checksum registry
        secrets: Secret name to data, e.g. ``kubecfg`` probe credentials
        autoscaling: Replica governance mode for this installation
    """

    shoot: ShootConfig
    seed: SeedConfig
    seed_namespace: str
    api_server_address: str
    checksums: ChecksumMap = field(default_factory=ChecksumMap)
    secrets: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    autoscaling: AutoscalingMode = field(default_factory=LiveDrivenAutoscaling)

    @property
    def centrally_autoscaled(self) -> bool:
        return isinstance(self.autoscaling, CentralizedAutoscaling)


def autoscaling_mode(config: ConfigData) -> AutoscalingMode:
    """Select the autoscaling mode from configuration."""
    settings = config.autoscaling
    if settings.mode == "centralized":
        replicas, min_replicas, max_replicas = (
            settings.replicas,
            settings.min_replicas,
            settings.max_replicas,
        )
        if replicas is None or min_replicas is None or max_replicas is None:
            raise ValueError(
                "centralized autoscaling requires replicas, min_replicas and max_replicas"
            )
        return CentralizedAutoscaling(
            replicas=replicas,
            min_replicas=min_replicas,
            max_replicas=max_replicas,
        )
    return LiveDrivenAutoscaling()


def build_reconcile_context(
    config: ConfigData,
    checksums: ChecksumMap | None = None,
    secrets: Mapping[str, Mapping[str, str]] | None = None,
) -> ReconcileContext:
    """Build the context of a reconciliation pass from loaded configuration."""
    return ReconcileContext(
        shoot=config.shoot,
        seed=config.seed,
        seed_namespace=config.namespace,
        api_server_address=config.api_server_address,
        checksums=checksums if checksums is not None else ChecksumMap(),
        secrets=dict(secrets or {}),
        autoscaling=autoscaling_mode(config),
    )
