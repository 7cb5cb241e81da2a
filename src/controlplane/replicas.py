"""Replica preservation for horizontally autoscaled control plane deployments.

When the seed runs an autoscaler for a deployment, re-applying the chart
with a fixed replica count would fight it. The live count is therefore
carried over unless control plane scaling is centrally configured.
"""

from __future__ import annotations

from loguru import logger

from src.controlplane.models import (
    AutoscalingMode,
    CentralizedAutoscaling,
    ReplicaDecision,
)
from src.infra.constants import DEFAULT_CONSTANTS
from src.infra.k8s import ResourceNotFoundError, SeedControllerSync


def read_live_replicas(
    controller: SeedControllerSync, namespace: str, name: str
) -> int | None:
    """Read the desired replica count of a live deployment.

    Returns:
        The replica count, or None if the deployment does not exist

    Raises:
        Any error other than ``ResourceNotFoundError`` from the controller
    """
    try:
        deployment = controller.get_deployment(namespace, name)
    except ResourceNotFoundError:
        logger.debug(f"Deployment {namespace}/{name} not found, no live replicas")
        return None
    return deployment.replicas


def decide_replicas(
    mode: AutoscalingMode,
    live_replicas: int | None,
    *,
    max_replicas: int = DEFAULT_CONSTANTS.API_SERVER_MAX_REPLICAS,
) -> ReplicaDecision:
    """Choose replica settings for a deployment.

    Args:
        mode: Autoscaling mode of this installation
        live_replicas: Replica count of the live deployment, if any
        max_replicas: Upper bound handed to the seed autoscaler

    Returns:
        Static values verbatim in centralized mode; otherwise the live count
        if it is positive (else unset) with the default upper bound.
    """
    if isinstance(mode, CentralizedAutoscaling):
        return ReplicaDecision(
            replicas=mode.replicas,
            min_replicas=mode.min_replicas,
            max_replicas=mode.max_replicas,
        )

    replicas = live_replicas if live_replicas is not None and live_replicas > 0 else None
    return ReplicaDecision(replicas=replicas, min_replicas=None, max_replicas=max_replicas)
