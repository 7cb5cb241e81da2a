"""Image reference resolution from an image vector file.

The image vector is a YAML document listing the container images the
control plane charts need:

    images:
    - name: hyperkube
      repository: k8s.gcr.io/hyperkube
      versions: ">= 1.10"
    - name: etcd
      repository: quay.io/coreos/etcd
      tag: v3.3.10

An entry without a tag is tagged with the target Kubernetes version.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from src.controlplane.errors import ImageNotFoundError
from src.utils.versions import matches_constraint


class ImageSource(BaseModel):
    """A single image vector entry."""

    name: str
    repository: str
    tag: str | None = None
    versions: str = ""

    def to_reference(self, target_version: str) -> str:
        """Render the image reference for a Kubernetes version."""
        tag = self.tag or f"v{target_version.lstrip('v')}"
        return f"{self.repository}:{tag}"


class ImageVector(BaseModel):
    """Ordered collection of image sources."""

    images: list[ImageSource] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> ImageVector:
        """Load an image vector from a YAML file.

        Raises:
            ValueError: If the file is not a valid image vector
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        try:
            return cls(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid image vector {path}: {e}") from e

    def find(self, name: str, target_version: str) -> ImageSource:
        """Return the first image named ``name`` whose constraint admits the version.

        Raises:
            ImageNotFoundError: If no entry matches
        """
        for image in self.images:
            if image.name == name and matches_constraint(target_version, image.versions):
                return image
        raise ImageNotFoundError(
            f"No image '{name}' found for version {target_version}",
            details=f"Known images: {', '.join(sorted({i.name for i in self.images}))}",
        )


class ImageResolver:
    """Injects resolved image references into chart values."""

    def __init__(self, vector: ImageVector) -> None:
        self.vector = vector

    def resolve(
        self,
        values: dict[str, Any],
        target_version: str,
        name_map: dict[str, str],
    ) -> dict[str, Any]:
        """Return a copy of ``values`` with ``images`` filled in.

        Args:
            values: Chart values (not modified)
            target_version: Kubernetes version used to select image entries
            name_map: Mapping of values key under ``images`` to image vector name

        Returns:
            New values dict with ``images[<key>] = "<repository>:<tag>"``

        Raises:
            ImageNotFoundError: If any image cannot be resolved
        """
        resolved = copy.deepcopy(values)
        images = dict(resolved.get("images") or {})
        for key, image_name in name_map.items():
            images[key] = self.vector.find(image_name, target_version).to_reference(
                target_version
            )
            logger.debug(f"Resolved image {key} -> {images[key]}")
        resolved["images"] = images
        return resolved
