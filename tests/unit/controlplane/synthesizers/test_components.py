"""Tests for controller manager, cloud-controller-manager and scheduler values.

Also covers properties shared by all component synthesizers.
"""

from unittest.mock import MagicMock

import pytest

from src.controlplane.checksums import ChecksumMap
from src.controlplane.config.config_data import ComponentConfig
from src.controlplane.errors import ProviderError
from src.controlplane.models import CentralizedAutoscaling, StoreRole
from src.controlplane.providers import StaticCloudProvider
from src.controlplane.synthesizers import (
    CloudControllerManagerSynthesizer,
    KubeAPIServerSynthesizer,
    KubeControllerManagerSynthesizer,
    KubeSchedulerSynthesizer,
    StoreSynthesizer,
)

CENTRALIZED = CentralizedAutoscaling(replicas=2, min_replicas=2, max_replicas=4)


@pytest.fixture
def static_provider() -> StaticCloudProvider:
    return StaticCloudProvider(
        {
            "cloud_provider_name": "openstack",
            "values": {
                "kube-controller-manager": {"environment": [{"name": "OS_REGION"}]},
                "kube-scheduler": {"extra": True},
            },
        }
    )


class TestKubeControllerManagerSynthesizer:
    """Tests for kube-controller-manager values."""

    @pytest.fixture
    def synthesizer(self, static_provider, image_resolver, paths):
        return KubeControllerManagerSynthesizer(static_provider, image_resolver, paths)

    def test_defaults(self, synthesizer, make_context) -> None:
        result = synthesizer.synthesize(make_context())
        values = result.default_values

        assert result.release_name == "kube-controller-manager"
        assert values["cloudProvider"] == "openstack"
        assert values["clusterName"] == "shoot--dev--demo"
        assert values["kubernetesVersion"] == "1.12.1"
        assert values["podNetwork"] == "100.96.0.0/11"
        assert values["serviceNetwork"] == "100.64.0.0/13"
        assert values["images"] == {"hyperkube": "k8s.gcr.io/hyperkube:v1.11.4"}
        assert "resources" not in values

    def test_cloud_values_are_a_separate_layer(self, synthesizer, make_context) -> None:
        result = synthesizer.synthesize(make_context())

        assert result.cloud_values == {"environment": [{"name": "OS_REGION"}]}
        assert "environment" not in result.default_values

    def test_centralized_sets_limits_and_autoscaler_tuning(self, synthesizer, make_context) -> None:
        values = synthesizer.synthesize(make_context(autoscaling=CENTRALIZED)).default_values

        assert values["resources"] == {"limits": {"cpu": "750m", "memory": "1Gi"}}
        assert values["horizontalPodAutoscaler"] == {
            "downscaleDelay": "24h",
            "upscaleDelay": "1m",
            "tolerance": 0.2,
        }

    def test_feature_gates(self, synthesizer, shoot, make_context) -> None:
        shoot = shoot.model_copy(
            update={"kube_controller_manager": ComponentConfig(feature_gates={"Foo": False})}
        )

        values = synthesizer.synthesize(make_context(shoot=shoot)).default_values

        assert values["featureGates"] == {"Foo": False}


class TestCloudControllerManagerSynthesizer:
    @pytest.fixture
    def synthesizer(self, static_provider, image_resolver, paths):
        return CloudControllerManagerSynthesizer(static_provider, image_resolver, paths)

    def test_defaults(self, synthesizer, make_context) -> None:
        result = synthesizer.synthesize(make_context())

        assert result.release_name == "cloud-controller-manager"
        assert result.cloud_values is None
        assert result.default_values["cloudProvider"] == "openstack"
        assert result.default_values["podNetwork"] == "100.96.0.0/11"
        assert "resources" not in result.default_values

    def test_centralized_limits(self, synthesizer, make_context) -> None:
        values = synthesizer.synthesize(make_context(autoscaling=CENTRALIZED)).default_values

        assert values["resources"] == {"limits": {"cpu": "500m", "memory": "512Mi"}}


class TestKubeSchedulerSynthesizer:
    @pytest.fixture
    def synthesizer(self, static_provider, image_resolver, paths):
        return KubeSchedulerSynthesizer(static_provider, image_resolver, paths)

    def test_defaults(self, synthesizer, make_context) -> None:
        result = synthesizer.synthesize(make_context())

        assert result.default_values["kubernetesVersion"] == "1.12.1"
        assert result.cloud_values == {"extra": True}

    def test_centralized_limits(self, synthesizer, make_context) -> None:
        values = synthesizer.synthesize(make_context(autoscaling=CENTRALIZED)).default_values

        assert values["resources"] == {"limits": {"cpu": "300m", "memory": "350Mi"}}


class TestChecksumAnnotationsAcrossComponents:
    """A checksum change must only roll the components that mount the artifact."""

    @pytest.fixture
    def synthesizers(self, static_provider, image_resolver, paths, controller):
        return [
            KubeAPIServerSynthesizer(static_provider, image_resolver, paths, controller),
            KubeControllerManagerSynthesizer(static_provider, image_resolver, paths),
            CloudControllerManagerSynthesizer(static_provider, image_resolver, paths),
            KubeSchedulerSynthesizer(static_provider, image_resolver, paths),
        ]

    @staticmethod
    def _annotations(synthesizers, ctx) -> dict[str, dict[str, str]]:
        return {
            s.release_name: s.synthesize(ctx).default_values["podAnnotations"]
            for s in synthesizers
        }

    def test_only_dependent_annotations_change(self, synthesizers, make_context) -> None:
        base = {
            "ca": "1",
            "kube-apiserver": "2",
            "kube-controller-manager": "3",
            "cloud-provider-config": "4",
            "kube-scheduler": "5",
        }
        before = self._annotations(synthesizers, make_context(checksums=ChecksumMap(base)))
        after = self._annotations(
            synthesizers,
            make_context(checksums=ChecksumMap({**base, "cloud-provider-config": "changed"})),
        )

        assert before["kube-apiserver"] == after["kube-apiserver"]
        assert before["kube-scheduler"] == after["kube-scheduler"]
        for release in ("kube-controller-manager", "cloud-controller-manager"):
            assert after[release]["checksum/configmap-cloud-provider-config"] == "changed"
            changed = {
                k for k in after[release] if after[release][k] != before[release].get(k)
            }
            assert changed == {"checksum/configmap-cloud-provider-config"}

    def test_identical_inputs_give_identical_values(self, synthesizers, make_context) -> None:
        checksums = ChecksumMap({"ca": "1", "kube-scheduler": "5"})

        first = [s.synthesize(make_context(checksums=checksums)) for s in synthesizers]
        second = [s.synthesize(make_context(checksums=checksums)) for s in synthesizers]

        assert first == second

    def test_etcd_ca_change_rolls_only_etcd_and_api_server(
        self, synthesizers, image_resolver, paths, make_context
    ) -> None:
        store = StoreSynthesizer(image_resolver, paths)
        base = {
            "ca": "1",
            "ca-etcd": "2",
            "etcd-server-tls": "3",
            "etcd-client-tls": "4",
            "kube-controller-manager": "5",
            "cloud-provider-config": "6",
            "kube-scheduler": "7",
        }

        def annotations(checksums: dict[str, str]) -> dict[str, dict[str, str]]:
            ctx = make_context(checksums=ChecksumMap(checksums))
            result = self._annotations(synthesizers, ctx)
            for role in StoreRole:
                values = store.synthesize(ctx, role, None)
                result[values.release_name] = values.default_values["podAnnotations"]
            return result

        before = annotations(base)
        after = annotations({**base, "ca-etcd": "rotated"})

        assert set(after) == {
            "etcd-main",
            "etcd-events",
            "kube-apiserver",
            "kube-controller-manager",
            "cloud-controller-manager",
            "kube-scheduler",
        }
        for release in ("etcd-main", "etcd-events", "kube-apiserver"):
            changed = {k for k in after[release] if after[release][k] != before[release].get(k)}
            assert changed == {"checksum/secret-etcd-ca"}
            assert after[release]["checksum/secret-etcd-ca"] == "rotated"
        for release in ("kube-controller-manager", "cloud-controller-manager", "kube-scheduler"):
            assert after[release] == before[release]


class TestCloudProviderFailure:
    """A failing cloud provider aborts synthesis without a partial payload."""

    @pytest.fixture
    def failing_provider(self) -> MagicMock:
        provider = MagicMock()
        error = ProviderError("cloud provider unavailable")
        provider.generate_kube_apiserver_config.side_effect = error
        provider.generate_kube_controller_manager_config.side_effect = error
        provider.generate_cloud_controller_manager_config.side_effect = error
        provider.generate_kube_scheduler_config.side_effect = error
        return provider

    @pytest.mark.parametrize(
        "synthesizer_cls",
        [
            KubeControllerManagerSynthesizer,
            CloudControllerManagerSynthesizer,
            KubeSchedulerSynthesizer,
        ],
    )
    def test_error_propagates(
        self, synthesizer_cls, failing_provider, paths, make_context
    ) -> None:
        image_resolver = MagicMock()
        synthesizer = synthesizer_cls(failing_provider, image_resolver, paths)

        with pytest.raises(ProviderError, match="cloud provider unavailable"):
            synthesizer.synthesize(make_context())

        image_resolver.resolve.assert_not_called()

    def test_api_server_does_not_read_live_state(
        self, failing_provider, paths, controller, make_context
    ) -> None:
        image_resolver = MagicMock()
        synthesizer = KubeAPIServerSynthesizer(
            failing_provider, image_resolver, paths, controller
        )

        with pytest.raises(ProviderError):
            synthesizer.synthesize(make_context())

        controller.get_deployment.assert_not_called()
        image_resolver.resolve.assert_not_called()
