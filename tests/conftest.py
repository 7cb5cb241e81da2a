"""Shared fixtures for control plane tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.controlplane.checksums import ChecksumMap
from src.controlplane.config.config_data import NetworksConfig, SeedConfig, ShootConfig
from src.controlplane.context import ReconcileContext
from src.controlplane.providers import LocalCloudProvider
from src.infra.constants import ChartPaths
from src.infra.images import ImageResolver, ImageSource, ImageVector
from tests.helpers import not_found

NAMESPACE = "shoot--dev--demo"


@pytest.fixture
def shoot() -> ShootConfig:
    return ShootConfig(
        kubernetes_version="1.12.1",
        node_count=5,
        networks=NetworksConfig(
            pods="100.96.0.0/11", services="100.64.0.0/13", nodes="10.250.0.0/16"
        ),
    )


@pytest.fixture
def seed() -> SeedConfig:
    return SeedConfig(
        kubernetes_version="1.11.4",
        networks=NetworksConfig(
            pods="10.242.0.0/16", services="10.243.0.0/16", nodes="10.240.0.0/16"
        ),
    )


@pytest.fixture
def make_context(shoot: ShootConfig, seed: SeedConfig):
    """Factory for reconcile contexts with per-test overrides."""

    def _make(**overrides) -> ReconcileContext:
        fields = {
            "shoot": shoot,
            "seed": seed,
            "seed_namespace": NAMESPACE,
            "api_server_address": "api.demo.dev.example.com",
            "checksums": ChecksumMap(),
        }
        fields.update(overrides)
        return ReconcileContext(**fields)

    return _make


@pytest.fixture
def image_vector() -> ImageVector:
    return ImageVector(
        images=[
            ImageSource(name="hyperkube", repository="k8s.gcr.io/hyperkube"),
            ImageSource(name="vpn-seed", repository="eu.gcr.io/gardener/vpn-seed", tag="0.8.0"),
            ImageSource(
                name="blackbox-exporter", repository="quay.io/prometheus/blackbox", tag="v0.12.0"
            ),
            ImageSource(name="etcd", repository="quay.io/coreos/etcd", tag="v3.3.10"),
            ImageSource(
                name="etcd-backup-restore",
                repository="eu.gcr.io/gardener/etcdbrctl",
                tag="0.4.1",
            ),
        ]
    )


@pytest.fixture
def image_resolver(image_vector: ImageVector) -> ImageResolver:
    return ImageResolver(image_vector)


@pytest.fixture
def paths() -> ChartPaths:
    return ChartPaths(Path("/charts"))


@pytest.fixture
def provider() -> LocalCloudProvider:
    return LocalCloudProvider()


@pytest.fixture
def controller() -> MagicMock:
    """Seed controller where no deployment, service or config map exists."""
    mock = MagicMock()
    mock.get_deployment.side_effect = not_found("deployment")
    mock.delete_service.side_effect = not_found("service")
    mock.get_config_map.side_effect = not_found("configmap")
    return mock
