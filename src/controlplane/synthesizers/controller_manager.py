"""kube-controller-manager values."""

from __future__ import annotations

from typing import Any

from src.controlplane.config.config_data import ComponentConfig
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ControlPlaneComponent

from .base import ComponentSynthesizer, limits_only


class KubeControllerManagerSynthesizer(ComponentSynthesizer):
    component = ControlPlaneComponent.KUBE_CONTROLLER_MANAGER
    annotation_refs = {
        "secret-ca": "ca",
        "secret-kube-controller-manager": "kube-controller-manager",
        "secret-service-account-key": "service-account-key",
        "secret-cloudprovider": "cloudprovider",
        "configmap-cloud-provider-config": "cloud-provider-config",
    }

    def cloud_values(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        return self.provider.generate_kube_controller_manager_config(ctx)

    def component_config(self, ctx: ReconcileContext) -> ComponentConfig | None:
        return ctx.shoot.kube_controller_manager

    def default_values(self, ctx: ReconcileContext) -> dict[str, Any]:
        values: dict[str, Any] = {
            "cloudProvider": self.provider.cloud_provider_name,
            "clusterName": ctx.seed_namespace,
            "kubernetesVersion": ctx.shoot.kubernetes_version,
            "podNetwork": ctx.shoot.networks.pods,
            "serviceNetwork": ctx.shoot.networks.services,
        }
        if ctx.centrally_autoscaled:
            values["resources"] = limits_only("750m", "1Gi")
            values["horizontalPodAutoscaler"] = {
                "downscaleDelay": "24h",
                "upscaleDelay": "1m",
                "tolerance": 0.2,
            }
        return values
