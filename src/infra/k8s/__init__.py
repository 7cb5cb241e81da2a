"""Seed cluster access layer.

This module provides a small abstraction over the seed cluster operations
needed by control plane reconciliation, backed by the kr8s library.

Example:
    from src.infra.k8s import get_seed_controller_sync

    controller = get_seed_controller_sync()
    info = controller.get_deployment("shoot--dev--demo", "kube-apiserver")
"""

from .controller import (
    ConfigMapInfo,
    DeploymentInfo,
    ResourceNotFoundError,
    SeedController,
    SeedControllerSync,
)
from .helpers import get_seed_controller, get_seed_controller_sync
from .utils import run_sync

__all__ = [
    # Controller classes
    "SeedController",
    "SeedControllerSync",
    # Data classes
    "ConfigMapInfo",
    "DeploymentInfo",
    # Errors
    "ResourceNotFoundError",
    # Factories
    "get_seed_controller",
    "get_seed_controller_sync",
    # Utilities
    "run_sync",
]
