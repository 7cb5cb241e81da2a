"""Control plane deployer.

This module provides the ControlPlaneDeployer class which runs one
reconciliation pass of a shoot control plane in the seed. It coordinates
specialized components for:
- etcd (main and events roles)
- cloud provider configuration
- kube-apiserver, kube-controller-manager, cloud-controller-manager and
  kube-scheduler values synthesis and chart application

A failing step aborts the rest of the pass. Components applied before the
failure stay in place; the next pass starts over.
"""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from src.controlplane.cloud_config import CloudProviderConfigManager
from src.controlplane.config.config_data import ConfigData
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ComponentValues
from src.controlplane.providers import CloudControlPlaneProvider, get_cloud_provider
from src.controlplane.store import ROLES, StoreDeployer
from src.controlplane.synthesizers import (
    CloudControllerManagerSynthesizer,
    ComponentSynthesizer,
    KubeAPIServerSynthesizer,
    KubeControllerManagerSynthesizer,
    KubeSchedulerSynthesizer,
    StoreSynthesizer,
)
from src.infra.constants import ChartPaths
from src.infra.dns import wait_until_resolvable
from src.infra.helm import ChartApplier
from src.infra.images import ImageResolver, ImageVector
from src.infra.k8s import SeedControllerSync, get_seed_controller_sync


class ControlPlaneDeployer:
    """Runs control plane reconciliation passes.

    The workflow of a pass consists of:
    1. Deploy etcd main, then etcd events
    2. Deploy the cloud provider config (records its checksum)
    3. Wait until the API server address resolves
    4. Deploy kube-apiserver
    5. Deploy kube-controller-manager, cloud-controller-manager, kube-scheduler

    Attributes:
        provider: Cloud provider plugin
        store: etcd role deployer
        cloud_config: Cloud provider config manager
        synthesizers: Component synthesizers in deployment order
    """

    def __init__(
        self,
        provider: CloudControlPlaneProvider,
        image_resolver: ImageResolver,
        applier: ChartApplier,
        controller: SeedControllerSync,
        paths: ChartPaths,
        *,
        resolve_address: Callable[[str], str] = wait_until_resolvable,
    ) -> None:
        """Initialize the deployer.

        Args:
            provider: Cloud provider plugin
            image_resolver: Image reference resolver
            applier: Chart applier
            controller: Seed cluster controller
            paths: Chart path resolver
            resolve_address: Blocking DNS wait returning the resolved address
        """
        self.provider = provider
        self.applier = applier
        self.controller = controller
        self.resolve_address = resolve_address

        self.store_synthesizer = StoreSynthesizer(image_resolver, paths)
        self.store = StoreDeployer(provider, self.store_synthesizer, applier, controller)
        self.cloud_config = CloudProviderConfigManager(provider, applier, controller, paths)
        self.synthesizers: list[ComponentSynthesizer] = [
            KubeAPIServerSynthesizer(provider, image_resolver, paths, controller),
            KubeControllerManagerSynthesizer(provider, image_resolver, paths),
            CloudControllerManagerSynthesizer(provider, image_resolver, paths),
            KubeSchedulerSynthesizer(provider, image_resolver, paths),
        ]

    @classmethod
    def from_config(
        cls,
        config: ConfigData,
        *,
        controller: SeedControllerSync | None = None,
        applier: ChartApplier | None = None,
    ) -> ControlPlaneDeployer:
        """Wire a deployer from loaded configuration.

        Raises:
            ValueError: If the provider name or image vector is invalid
        """
        dns = config.dns
        return cls(
            provider=get_cloud_provider(config.cloud_provider),
            image_resolver=ImageResolver(ImageVector.load(config.image_vector)),
            applier=applier or ChartApplier(timeout=config.helm.timeout),
            controller=controller or get_seed_controller_sync(),
            paths=ChartPaths(config.chart_root),
            resolve_address=lambda host: wait_until_resolvable(
                host, timeout=dns.timeout_seconds, interval=dns.interval_seconds
            ),
        )

    def reconcile(self, ctx: ReconcileContext) -> None:
        """Run one reconciliation pass."""
        logger.info(f"Reconciling control plane in {ctx.seed_namespace}")

        self.store.deploy(ctx)
        self.cloud_config.deploy(ctx)

        address = self.resolve_address(ctx.api_server_address)
        logger.info(f"API server address {ctx.api_server_address} resolves to {address}")

        for synthesizer in self.synthesizers:
            values = synthesizer.synthesize(ctx)
            self.apply(ctx, values)

        logger.info(f"Control plane in {ctx.seed_namespace} reconciled")

    def render(self, ctx: ReconcileContext) -> list[ComponentValues]:
        """Synthesize the values of every release without applying anything."""
        backup = self.provider.generate_etcd_backup_config(ctx)
        rendered = [
            self.store_synthesizer.synthesize(ctx, role, backup.backup_values)
            for role in ROLES
        ]
        self.cloud_config.generate(ctx)
        rendered.extend(s.synthesize(ctx) for s in self.synthesizers)
        return rendered

    def apply(self, ctx: ReconcileContext, values: ComponentValues) -> None:
        self.applier.apply(
            values.chart_path,
            values.release_name,
            ctx.seed_namespace,
            values.default_values,
            values.cloud_values,
        )
        logger.info(f"Deployed {values.release_name}")
