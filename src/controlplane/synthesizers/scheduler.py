"""kube-scheduler values."""

from __future__ import annotations

from typing import Any

from src.controlplane.config.config_data import ComponentConfig
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ControlPlaneComponent

from .base import ComponentSynthesizer, limits_only


class KubeSchedulerSynthesizer(ComponentSynthesizer):
    component = ControlPlaneComponent.KUBE_SCHEDULER
    annotation_refs = {"secret-kube-scheduler": "kube-scheduler"}

    def cloud_values(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        return self.provider.generate_kube_scheduler_config(ctx)

    def component_config(self, ctx: ReconcileContext) -> ComponentConfig | None:
        return ctx.shoot.kube_scheduler

    def default_values(self, ctx: ReconcileContext) -> dict[str, Any]:
        values: dict[str, Any] = {"kubernetesVersion": ctx.shoot.kubernetes_version}
        if ctx.centrally_autoscaled:
            values["resources"] = limits_only("300m", "350Mi")
        return values
