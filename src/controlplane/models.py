"""Domain types for control plane value synthesis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel


class StoreRole(str, Enum):
    """Role of an etcd instance.

    - MAIN: full cluster state, backed up
    - EVENTS: event data only, never backed up
    """

    MAIN = "main"
    EVENTS = "events"


class ControlPlaneComponent(str, Enum):
    """Control plane components synthesized per reconciliation pass."""

    ETCD = "etcd"
    KUBE_APISERVER = "kube-apiserver"
    KUBE_CONTROLLER_MANAGER = "kube-controller-manager"
    CLOUD_CONTROLLER_MANAGER = "cloud-controller-manager"
    KUBE_SCHEDULER = "kube-scheduler"


@dataclass(frozen=True)
class ResourceProfile:
    """Compute requests and limits of a deployment, as quantity strings."""

    cpu_request: str
    memory_request: str
    cpu_limit: str
    memory_limit: str

    def to_values(self) -> dict[str, Any]:
        """Render as a Kubernetes ``resources`` block."""
        return {
            "limits": {"cpu": self.cpu_limit, "memory": self.memory_limit},
            "requests": {"cpu": self.cpu_request, "memory": self.memory_request},
        }


class AdmissionPlugin(BaseModel):
    """An API server admission plugin and its opaque configuration."""

    name: str
    config: Any | None = None

    def to_values(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class CentralizedAutoscaling:
    """Replica counts and bounds are fixed by static configuration."""

    replicas: int
    min_replicas: int
    max_replicas: int


@dataclass(frozen=True)
class LiveDrivenAutoscaling:
    """Replica counts follow whatever the seed's autoscaler set live."""


AutoscalingMode = CentralizedAutoscaling | LiveDrivenAutoscaling


@dataclass(frozen=True)
class ReplicaDecision:
    """Replica settings for a deployment.

    ``None`` means the field is left unset so the chart default (or an
    autoscaler that owns the field) takes effect.
    """

    replicas: int | None
    min_replicas: int | None
    max_replicas: int


@dataclass(frozen=True)
class BackupConfig:
    """Backup material returned by a cloud provider for the store.

    Both parts may be None for providers without backup support.
    """

    secret_data: dict[str, str] | None = None
    backup_values: dict[str, Any] | None = None


@dataclass(frozen=True)
class ComponentValues:
    """Values for one chart release.

    ``default_values`` and ``cloud_values`` are separate precedence layers;
    the chart applier gives ``cloud_values`` priority on conflicting keys.
    """

    component: ControlPlaneComponent
    release_name: str
    chart_path: Path
    default_values: dict[str, Any] | None
    cloud_values: dict[str, Any] | None = field(default=None)
