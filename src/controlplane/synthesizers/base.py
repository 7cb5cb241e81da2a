"""Common flow of the per-component value synthesizers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from src.controlplane.checksums import checksum_annotations
from src.controlplane.config.config_data import ComponentConfig
from src.controlplane.context import ReconcileContext
from src.controlplane.models import ComponentValues, ControlPlaneComponent
from src.controlplane.providers import CloudControlPlaneProvider
from src.infra.constants import ChartPaths
from src.infra.images import ImageResolver


def limits_only(cpu: str, memory: str) -> dict[str, Any]:
    """A ``resources`` block that only sets limits."""
    return {"limits": {"cpu": cpu, "memory": memory}}


class ComponentSynthesizer(ABC):
    """Builds the chart values of one control plane component.

    Subclasses declare the component, the images its chart needs and the
    checksum annotations of its pods, and fill in the component specific
    default values.
    """

    component: ControlPlaneComponent
    images: dict[str, str] = {"hyperkube": "hyperkube"}
    annotation_refs: dict[str, str] = {}

    def __init__(
        self,
        provider: CloudControlPlaneProvider,
        image_resolver: ImageResolver,
        paths: ChartPaths,
    ) -> None:
        self.provider = provider
        self.image_resolver = image_resolver
        self.paths = paths

    @property
    def release_name(self) -> str:
        return self.component.value

    def synthesize(self, ctx: ReconcileContext) -> ComponentValues:
        """Build default and cloud specific values for the component.

        Raises:
            Errors of the cloud provider, live state reads and image
            resolution, unchanged
        """
        cloud_values = self.cloud_values(ctx)
        defaults = self.default_values(ctx)
        defaults["podAnnotations"] = checksum_annotations(
            ctx.checksums, self.annotation_refs
        )

        settings = self.component_config(ctx)
        if settings is not None:
            defaults["featureGates"] = dict(settings.feature_gates)

        values = self.image_resolver.resolve(
            defaults, ctx.seed.kubernetes_version, self.images
        )
        logger.debug(f"Synthesized values for {self.component.value}: {sorted(values)}")
        return ComponentValues(
            component=self.component,
            release_name=self.release_name,
            chart_path=self.paths.chart(self.component.value),
            default_values=values,
            cloud_values=cloud_values,
        )

    @abstractmethod
    def cloud_values(self, ctx: ReconcileContext) -> dict[str, Any] | None:
        """Ask the provider for the component's cloud specific fragment."""
        ...

    @abstractmethod
    def default_values(self, ctx: ReconcileContext) -> dict[str, Any]:
        """Component specific default values (without annotations and images)."""
        ...

    def component_config(self, ctx: ReconcileContext) -> ComponentConfig | None:
        """User settings of the component, if any."""
        return None
