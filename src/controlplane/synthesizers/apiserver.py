"""kube-apiserver values."""

from __future__ import annotations

import base64
from typing import Any

from loguru import logger

from src.controlplane.admission import (
    default_admission_plugins,
    merge_admission_plugins,
)
from src.controlplane.config.config_data import ComponentConfig
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ControlPlaneComponent, StoreRole
from src.controlplane.providers import CloudControlPlaneProvider
from src.controlplane.replicas import decide_replicas, read_live_replicas
from src.controlplane.sizing import size_for
from src.infra.constants import DEFAULT_CONSTANTS, ChartPaths
from src.infra.images import ImageResolver
from src.infra.k8s import SeedControllerSync

from .base import ComponentSynthesizer, limits_only

PROBE_CREDENTIALS_SECRET = "kubecfg"


def etcd_client_service_fqdn(role: StoreRole, namespace: str) -> str:
    return f"etcd-{role.value}-client.{namespace}.svc"


def probe_credentials(ctx: ReconcileContext) -> str | None:
    """Base64 ``username:password`` of the kubecfg secret, if present."""
    kubecfg = ctx.secrets.get(PROBE_CREDENTIALS_SECRET)
    if not kubecfg:
        return None
    raw = f"{kubecfg.get('username', '')}:{kubecfg.get('password', '')}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class KubeAPIServerSynthesizer(ComponentSynthesizer):
    """Values of the shoot API server, including sizing and replica handling."""

    component = ControlPlaneComponent.KUBE_APISERVER
    images = {
        "hyperkube": "hyperkube",
        "vpn-seed": "vpn-seed",
        "blackbox-exporter": "blackbox-exporter",
    }
    annotation_refs = {
        "secret-ca": "ca",
        "secret-ca-front-proxy": "ca-front-proxy",
        "secret-kube-apiserver": "kube-apiserver",
        "secret-kube-aggregator": "kube-aggregator",
        "secret-kube-apiserver-kubelet": "kube-apiserver-kubelet",
        "secret-kube-apiserver-basic-auth": "kube-apiserver-basic-auth",
        "secret-vpn-seed": "vpn-seed",
        "secret-vpn-seed-tlsauth": "vpn-seed-tlsauth",
        "secret-service-account-key": "service-account-key",
        "secret-etcd-ca": "ca-etcd",
        "secret-etcd-client-tls": "etcd-client-tls",
    }

    def __init__(
        self,
        provider: CloudControlPlaneProvider,
        image_resolver: ImageResolver,
        paths: ChartPaths,
        controller: SeedControllerSync,
    ) -> None:
        super().__init__(provider, image_resolver, paths)
        self.controller = controller

    def cloud_values(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        return self.provider.generate_kube_apiserver_config(ctx)

    def component_config(self, ctx: ReconcileContext) -> ComponentConfig | None:
        return ctx.shoot.kube_apiserver

    def default_values(self, ctx: ReconcileContext) -> dict[str, Any]:
        namespace = ctx.seed_namespace
        values: dict[str, Any] = {
            "etcdServicePort": DEFAULT_CONSTANTS.ETCD_SERVICE_PORT,
            "etcdMainServiceFqdn": etcd_client_service_fqdn(StoreRole.MAIN, namespace),
            "etcdEventsServiceFqdn": etcd_client_service_fqdn(StoreRole.EVENTS, namespace),
            "kubernetesVersion": ctx.shoot.kubernetes_version,
            "shootNetworks": {"service": ctx.shoot.networks.services},
            "seedNetworks": {
                "service": ctx.seed.networks.services,
                "pod": ctx.seed.networks.pods,
                "node": ctx.seed.networks.nodes,
            },
            "securePort": DEFAULT_CONSTANTS.API_SERVER_SECURE_PORT,
        }

        credentials = probe_credentials(ctx)
        if credentials is not None:
            values["probeCredentials"] = credentials
        else:
            logger.warning(
                f"Secret {PROBE_CREDENTIALS_SECRET} not available, "
                "omitting API server probe credentials"
            )

        values.update(self._replica_values(ctx))
        values["apiServerResources"] = self._resources(ctx)
        values.update(self._api_server_settings(ctx))
        return values

    def _replica_values(self, ctx: ReconcileContext) -> dict[str, Any]:
        live = None
        if not ctx.centrally_autoscaled:
            live = read_live_replicas(
                self.controller, ctx.seed_namespace, self.release_name
            )
        decision = decide_replicas(ctx.autoscaling, live)

        values: dict[str, Any] = {"maxReplicas": decision.max_replicas}
        if decision.replicas is not None:
            values["replicas"] = decision.replicas
        if decision.min_replicas is not None:
            values["minReplicas"] = decision.min_replicas
        return values

    def _resources(self, ctx: ReconcileContext) -> dict[str, Any]:
        if ctx.centrally_autoscaled:
            return limits_only("1500m", "4000Mi")
        return size_for(ctx.shoot.node_count).to_values()

    def _api_server_settings(self, ctx: ReconcileContext) -> dict[str, Any]:
        settings = ctx.shoot.kube_apiserver
        defaults = default_admission_plugins(ctx.shoot.kubernetes_version)
        if settings is None:
            return {"admissionPlugins": [p.to_values() for p in defaults]}

        values: dict[str, Any] = {"runtimeConfig": dict(settings.runtime_config)}
        if settings.oidc_config is not None:
            values["oidcConfig"] = dict(settings.oidc_config)
        plugins = merge_admission_plugins(defaults, settings.admission_plugins)
        values["admissionPlugins"] = [p.to_values() for p in plugins]
        return values
