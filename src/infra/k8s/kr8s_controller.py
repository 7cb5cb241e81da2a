"""Kr8s-based implementation of SeedController.

Uses the kr8s library for native async Kubernetes operations.
"""

from __future__ import annotations

from typing import Any

import kr8s
from kr8s.asyncio.objects import ConfigMap, Deployment, Secret, Service
from loguru import logger

from src.controlplane.errors import ClusterOperationError

from .controller import (
    ConfigMapInfo,
    DeploymentInfo,
    ResourceNotFoundError,
    SeedController,
)
from .utils import encode_secret_data


class Kr8sSeedController(SeedController):
    """Seed controller using the kr8s library.

    Note: The kr8s API client is NOT cached because it's tied to the event loop
    that was running when created. ``run_sync()`` creates a new event loop per
    call, which would make a cached client unusable.
    """

    async def _get_api(self) -> Any:  # Returns kr8s._api.Api
        """Create a kr8s API client bound to the current event loop."""
        return await kr8s.asyncio.api()

    # =========================================================================
    # ConfigMap Operations
    # =========================================================================

    async def get_config_map(self, namespace: str, name: str) -> ConfigMapInfo:
        """Get a ConfigMap."""
        try:
            api = await self._get_api()
            cm = await ConfigMap.get(name, namespace=namespace, api=api)
        except kr8s.NotFoundError as e:
            raise ResourceNotFoundError("configmap", name, namespace) from e
        except Exception as e:
            raise ClusterOperationError(
                f"Failed to read configmap {namespace}/{name}", details=str(e)
            ) from e
        return ConfigMapInfo(
            name=name, namespace=namespace, data=dict(cm.raw.get("data") or {})
        )

    async def update_config_map(
        self, namespace: str, name: str, data: dict[str, str]
    ) -> ConfigMapInfo:
        """Replace the data of an existing ConfigMap."""
        try:
            api = await self._get_api()
            cm = await ConfigMap.get(name, namespace=namespace, api=api)
            await cm.patch({"data": data})
        except kr8s.NotFoundError as e:
            raise ResourceNotFoundError("configmap", name, namespace) from e
        except Exception as e:
            raise ClusterOperationError(
                f"Failed to update configmap {namespace}/{name}", details=str(e)
            ) from e
        logger.debug(f"Updated configmap {namespace}/{name}")
        return ConfigMapInfo(name=name, namespace=namespace, data=dict(data))

    # =========================================================================
    # Deployment Operations
    # =========================================================================

    async def get_deployment(self, namespace: str, name: str) -> DeploymentInfo:
        """Get a Deployment."""
        try:
            api = await self._get_api()
            deployment = await Deployment.get(name, namespace=namespace, api=api)
        except kr8s.NotFoundError as e:
            raise ResourceNotFoundError("deployment", name, namespace) from e
        except Exception as e:
            raise ClusterOperationError(
                f"Failed to read deployment {namespace}/{name}", details=str(e)
            ) from e
        replicas = deployment.raw.get("spec", {}).get("replicas")
        return DeploymentInfo(name=name, namespace=namespace, replicas=replicas)

    # =========================================================================
    # Service Operations
    # =========================================================================

    async def delete_service(self, namespace: str, name: str) -> None:
        """Delete a Service."""
        try:
            api = await self._get_api()
            service = await Service.get(name, namespace=namespace, api=api)
            await service.delete()
        except kr8s.NotFoundError as e:
            raise ResourceNotFoundError("service", name, namespace) from e
        except Exception as e:
            raise ClusterOperationError(
                f"Failed to delete service {namespace}/{name}", details=str(e)
            ) from e
        logger.debug(f"Deleted service {namespace}/{name}")

    # =========================================================================
    # Secret Operations
    # =========================================================================

    async def create_secret(
        self,
        namespace: str,
        name: str,
        data: dict[str, str],
        *,
        secret_type: str = "Opaque",
        update: bool = True,
    ) -> None:
        """Create a Secret, updating the data of an existing one if requested."""
        encoded = encode_secret_data(data)
        try:
            api = await self._get_api()
            try:
                secret = await Secret.get(name, namespace=namespace, api=api)
            except kr8s.NotFoundError:
                secret = Secret(
                    {
                        "apiVersion": "v1",
                        "kind": "Secret",
                        "metadata": {"name": name, "namespace": namespace},
                        "type": secret_type,
                        "data": encoded,
                    },
                    api=api,
                )
                await secret.create()
                logger.debug(f"Created secret {namespace}/{name}")
                return

            if update:
                await secret.patch({"data": encoded})
                logger.debug(f"Updated secret {namespace}/{name}")
        except Exception as e:
            raise ClusterOperationError(
                f"Failed to create secret {namespace}/{name}", details=str(e)
            ) from e
