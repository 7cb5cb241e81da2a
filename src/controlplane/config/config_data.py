"""Configuration schema for control plane reconciliation.

Mirrors the ``config:`` section of ``config.yaml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from src.controlplane.models import AdmissionPlugin


class NetworksConfig(BaseModel):
    """CIDRs of a cluster's networks."""

    pods: str | None = None
    services: str | None = None
    nodes: str | None = None


class ComponentConfig(BaseModel):
    """Settings shared by all Kubernetes control plane components."""

    feature_gates: dict[str, bool] = Field(default_factory=dict)


class KubeAPIServerConfig(ComponentConfig):
    """User settings for the shoot API server."""

    runtime_config: dict[str, bool] = Field(default_factory=dict)
    oidc_config: dict[str, Any] | None = None
    admission_plugins: list[AdmissionPlugin] = Field(default_factory=list)


class ShootConfig(BaseModel):
    """The managed cluster whose control plane is deployed."""

    kubernetes_version: str
    node_count: int = 0
    networks: NetworksConfig = Field(default_factory=NetworksConfig)
    kube_apiserver: KubeAPIServerConfig | None = None
    kube_controller_manager: ComponentConfig | None = None
    cloud_controller_manager: ComponentConfig | None = None
    kube_scheduler: ComponentConfig | None = None


class SeedConfig(BaseModel):
    """The hosting cluster."""

    kubernetes_version: str
    networks: NetworksConfig = Field(default_factory=NetworksConfig)


class AutoscalingConfig(BaseModel):
    """How control plane replica counts are governed.

    - live: keep whatever the seed's autoscaler set on the live deployment
    - centralized: use the static replicas/min_replicas/max_replicas values
    """

    mode: Literal["live", "centralized"] = "live"
    replicas: int | None = None
    min_replicas: int | None = None
    max_replicas: int | None = None

    @model_validator(mode="after")
    def _require_static_values(self) -> AutoscalingConfig:
        if self.mode == "centralized":
            missing = [
                name
                for name in ("replicas", "min_replicas", "max_replicas")
                if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(
                    f"centralized autoscaling requires {', '.join(missing)}"
                )
        return self


class CloudProviderConfig(BaseModel):
    """Selection and options of the cloud provider plugin."""

    name: str = "local"
    options: dict[str, Any] = Field(default_factory=dict)


class DNSConfig(BaseModel):
    timeout_seconds: float = 600.0
    interval_seconds: float = 5.0


class HelmConfig(BaseModel):
    timeout: str = "10m"


class ConfigData(BaseModel):
    """Root of the ``config:`` section."""

    namespace: str
    chart_root: Path
    image_vector: Path
    api_server_address: str
    cloud_provider: CloudProviderConfig = Field(default_factory=CloudProviderConfig)
    autoscaling: AutoscalingConfig = Field(default_factory=AutoscalingConfig)
    seed: SeedConfig
    shoot: ShootConfig
    dns: DNSConfig = Field(default_factory=DNSConfig)
    helm: HelmConfig = Field(default_factory=HelmConfig)
