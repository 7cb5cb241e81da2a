"""Tests for applying charts with layered values files."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from src.controlplane.errors import ChartApplyError
from src.infra.helm import ChartApplier, CommandResult


class TestChartApplier:
    """Tests for ChartApplier."""

    @pytest.fixture
    def mock_helm(self) -> MagicMock:
        helm = MagicMock()
        helm.upgrade_install.return_value = CommandResult(success=True)
        return helm

    @pytest.fixture
    def applier(self, mock_helm: MagicMock) -> ChartApplier:
        return ChartApplier(mock_helm, timeout="5m")

    def test_defaults_written_before_overrides(
        self, applier: ChartApplier, mock_helm: MagicMock
    ) -> None:
        """Helm gives later files precedence, so overrides must come last."""
        captured: list[dict] = []

        def _capture(**kwargs) -> CommandResult:
            for path in kwargs["value_files"]:
                captured.append(yaml.safe_load(Path(path).read_text()))
            return CommandResult(success=True)

        mock_helm.upgrade_install.side_effect = _capture

        applier.apply(
            Path("/charts/kube-apiserver"),
            "kube-apiserver",
            "shoot--dev--demo",
            {"replicas": 1, "region": "default"},
            {"region": "eu-1"},
        )

        assert captured == [{"replicas": 1, "region": "default"}, {"region": "eu-1"}]
        kwargs = mock_helm.upgrade_install.call_args.kwargs
        assert kwargs["release_name"] == "kube-apiserver"
        assert kwargs["namespace"] == "shoot--dev--demo"
        assert kwargs["timeout"] == "5m"
        assert [p.name for p in kwargs["value_files"]] == ["defaults.yaml", "overrides.yaml"]

    def test_missing_layers_are_skipped(
        self, applier: ChartApplier, mock_helm: MagicMock
    ) -> None:
        applier.apply(Path("/charts/etcd"), "etcd-main", "ns", {"role": "main"}, None)

        value_files = mock_helm.upgrade_install.call_args.kwargs["value_files"]
        assert [p.name for p in value_files] == ["defaults.yaml"]

    def test_failure_raises_with_helm_output(
        self, applier: ChartApplier, mock_helm: MagicMock
    ) -> None:
        mock_helm.upgrade_install.return_value = CommandResult(
            success=False, stderr="Error: UPGRADE FAILED", returncode=1
        )

        with pytest.raises(ChartApplyError) as excinfo:
            applier.apply(Path("/charts/etcd"), "etcd-main", "ns", {}, None)

        assert excinfo.value.details == "Error: UPGRADE FAILED"
        assert "etcd-main" in excinfo.value.message
