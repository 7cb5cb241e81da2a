"""Tests for building the reconcile context."""

from pathlib import Path

import pytest

from src.controlplane.checksums import ChecksumMap
from src.controlplane.config.config_data import (
    AutoscalingConfig,
    ConfigData,
    SeedConfig,
    ShootConfig,
)
from src.controlplane.context import autoscaling_mode, build_reconcile_context
from src.controlplane.models import CentralizedAutoscaling, LiveDrivenAutoscaling


def _config(**overrides) -> ConfigData:
    fields = {
        "namespace": "shoot--dev--demo",
        "chart_root": Path("/charts"),
        "image_vector": Path("/charts/images.yaml"),
        "api_server_address": "api.example.com",
        "seed": SeedConfig(kubernetes_version="1.11.0"),
        "shoot": ShootConfig(kubernetes_version="1.12.0", node_count=3),
    }
    fields.update(overrides)
    return ConfigData(**fields)


class TestBuildReconcileContext:
    def test_live_mode_by_default(self) -> None:
        ctx = build_reconcile_context(_config())

        assert ctx.seed_namespace == "shoot--dev--demo"
        assert ctx.api_server_address == "api.example.com"
        assert isinstance(ctx.autoscaling, LiveDrivenAutoscaling)
        assert not ctx.centrally_autoscaled
        assert len(ctx.checksums) == 0

    def test_centralized_mode(self) -> None:
        config = _config(
            autoscaling=AutoscalingConfig(
                mode="centralized", replicas=2, min_replicas=1, max_replicas=4
            )
        )

        ctx = build_reconcile_context(config)

        assert ctx.autoscaling == CentralizedAutoscaling(
            replicas=2, min_replicas=1, max_replicas=4
        )
        assert ctx.centrally_autoscaled

    def test_checksums_and_secrets_are_passed_through(self) -> None:
        checksums = ChecksumMap({"ca": "1"})

        ctx = build_reconcile_context(
            _config(), checksums, {"kubecfg": {"username": "admin"}}
        )

        assert ctx.checksums is checksums
        assert ctx.secrets == {"kubecfg": {"username": "admin"}}


class TestAutoscalingMode:
    def test_centralized_without_static_values_raises(self) -> None:
        """An unvalidated centralized config must not yield a partial triple."""
        settings = AutoscalingConfig.model_construct(
            mode="centralized", replicas=2, min_replicas=None, max_replicas=4
        )
        config = _config().model_copy(update={"autoscaling": settings})

        with pytest.raises(ValueError, match="centralized autoscaling requires"):
            autoscaling_mode(config)

    def test_centralized_config_validation_rejects_missing_values(self) -> None:
        with pytest.raises(ValueError, match="max_replicas"):
            AutoscalingConfig(mode="centralized", replicas=2, min_replicas=1)
