"""Abstract seed cluster controller interface.

Defines the contract for the seed cluster operations the control plane
reconciliation needs. Implementations must raise ``ResourceNotFoundError``
for absent objects so callers can tell expected absence apart from real
failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .utils import run_sync

# =============================================================================
# Data Types
# =============================================================================


class ResourceNotFoundError(Exception):
    """Raised when a requested Kubernetes object does not exist."""

    def __init__(self, kind: str, name: str, namespace: str) -> None:
        self.kind = kind
        self.name = name
        self.namespace = namespace
        super().__init__(f'{kind} "{name}" not found in namespace "{namespace}"')


@dataclass
class DeploymentInfo:
    """Information about a Kubernetes Deployment."""

    name: str
    namespace: str
    replicas: int | None = None


@dataclass
class ConfigMapInfo:
    """Information about a Kubernetes ConfigMap."""

    name: str
    namespace: str
    data: dict[str, str] = field(default_factory=dict)


# =============================================================================
# Abstract Controller
# =============================================================================


class SeedController(ABC):
    """Abstract base class for seed cluster operations.

    All methods are async to support native async clients (kr8s).
    Use ``SeedControllerSync`` to call them from synchronous code.
    """

    # =========================================================================
    # ConfigMap Operations
    # =========================================================================

    @abstractmethod
    async def get_config_map(self, namespace: str, name: str) -> ConfigMapInfo:
        """Get a ConfigMap.

        Args:
            namespace: Kubernetes namespace
            name: ConfigMap name

        Returns:
            ConfigMapInfo with the config map data

        Raises:
            ResourceNotFoundError: If the config map does not exist
        """
        ...

    @abstractmethod
    async def update_config_map(
        self, namespace: str, name: str, data: dict[str, str]
    ) -> ConfigMapInfo:
        """Replace the data of an existing ConfigMap.

        Args:
            namespace: Kubernetes namespace
            name: ConfigMap name
            data: New data section

        Returns:
            ConfigMapInfo reflecting the update

        Raises:
            ResourceNotFoundError: If the config map does not exist
        """
        ...

    # =========================================================================
    # Deployment Operations
    # =========================================================================

    @abstractmethod
    async def get_deployment(self, namespace: str, name: str) -> DeploymentInfo:
        """Get a Deployment.

        Args:
            namespace: Kubernetes namespace
            name: Deployment name

        Returns:
            DeploymentInfo with the desired replica count

        Raises:
            ResourceNotFoundError: If the deployment does not exist
        """
        ...

    # =========================================================================
    # Service Operations
    # =========================================================================

    @abstractmethod
    async def delete_service(self, namespace: str, name: str) -> None:
        """Delete a Service.

        Raises:
            ResourceNotFoundError: If the service does not exist
        """
        ...

    # =========================================================================
    # Secret Operations
    # =========================================================================

    @abstractmethod
    async def create_secret(
        self,
        namespace: str,
        name: str,
        data: dict[str, str],
        *,
        secret_type: str = "Opaque",
        update: bool = True,
    ) -> None:
        """Create a Secret, optionally updating it if it already exists.

        Args:
            namespace: Kubernetes namespace
            name: Secret name
            data: Plain (not yet base64 encoded) secret data
            secret_type: Kubernetes secret type
            update: Whether to overwrite the data of an existing secret
        """
        ...


class SeedControllerSync:
    """Blocking facade over an async ``SeedController``.

    The reconciliation engine is synchronous; every call is driven to
    completion with ``run_sync``.
    """

    def __init__(self, controller: SeedController) -> None:
        self._controller = controller

    def get_config_map(self, namespace: str, name: str) -> ConfigMapInfo:
        return run_sync(self._controller.get_config_map(namespace, name))

    def update_config_map(
        self, namespace: str, name: str, data: dict[str, str]
    ) -> ConfigMapInfo:
        return run_sync(self._controller.update_config_map(namespace, name, data))

    def get_deployment(self, namespace: str, name: str) -> DeploymentInfo:
        return run_sync(self._controller.get_deployment(namespace, name))

    def delete_service(self, namespace: str, name: str) -> None:
        run_sync(self._controller.delete_service(namespace, name))

    def create_secret(
        self,
        namespace: str,
        name: str,
        data: dict[str, str],
        *,
        secret_type: str = "Opaque",
        update: bool = True,
    ) -> None:
        run_sync(
            self._controller.create_secret(
                namespace, name, data, secret_type=secret_type, update=update
            )
        )
