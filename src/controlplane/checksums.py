"""Checksum registry and pod template checksum annotations.

Pods carry ``checksum/<kind>-<artifact>`` annotations whose values are the
content checksums of the secrets and config maps they mount. Any change of a
checksum changes the pod template and makes the deployment roll.

The registry is filled by the artifact generation stages (secret generation,
cloud provider config) and only read while values are synthesized.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, Mapping

from loguru import logger

ANNOTATION_PREFIX = "checksum/"


def compute_checksum(content: str) -> str:
    """SHA-256 hex digest of ``content`` with surrounding whitespace stripped."""
    return hashlib.sha256(content.strip().encode("utf-8")).hexdigest()


class ChecksumMap(Mapping[str, str]):
    """Artifact name to content checksum registry."""

    def __init__(self, checksums: Mapping[str, str] | None = None) -> None:
        self._checksums: dict[str, str] = dict(checksums or {})

    def __getitem__(self, name: str) -> str:
        return self._checksums[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._checksums)

    def __len__(self) -> int:
        return len(self._checksums)

    def __repr__(self) -> str:
        return f"ChecksumMap({self._checksums!r})"

    def record(self, name: str, checksum: str) -> None:
        """Store the checksum of a freshly generated artifact."""
        self._checksums[name] = checksum


def checksum_annotations(
    checksums: Mapping[str, str], refs: Mapping[str, str]
) -> dict[str, str]:
    """Build pod annotations from artifact checksums.

    Args:
        checksums: Registry to read from
        refs: Annotation suffix (e.g. ``secret-etcd-ca``) to artifact name
              (e.g. ``ca-etcd``)

    Returns:
        ``{"checksum/<suffix>": checksum}`` for every artifact with a known
        checksum. Artifacts without a checksum are left out.
    """
    annotations: dict[str, str] = {}
    for suffix, artifact in refs.items():
        checksum = checksums.get(artifact)
        if not checksum:
            logger.debug(f"No checksum for {artifact}, omitting {ANNOTATION_PREFIX}{suffix}")
            continue
        annotations[f"{ANNOTATION_PREFIX}{suffix}"] = checksum
    return annotations
