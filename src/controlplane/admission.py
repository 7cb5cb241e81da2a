"""API server admission plugin defaults and override merging."""

from __future__ import annotations

from collections.abc import Sequence

from src.controlplane.models import AdmissionPlugin
from src.utils.versions import major_minor

_BASE_PLUGINS: tuple[str, ...] = (
    "Priority",
    "NamespaceLifecycle",
    "LimitRanger",
    "ServiceAccount",
    "NodeRestriction",
    "DefaultStorageClass",
    "Initializers",
    "DefaultTolerationSeconds",
    "ResourceQuota",
    "StorageObjectInUseProtection",
    "MutatingAdmissionWebhook",
    "ValidatingAdmissionWebhook",
)

# Default plugin names per Kubernetes minor version, in admission order
_PLUGINS_BY_VERSION: dict[tuple[int, int], tuple[str, ...]] = {
    (1, 10): _BASE_PLUGINS,
    (1, 11): _BASE_PLUGINS,
    (1, 12): _BASE_PLUGINS,
    (1, 13): tuple(p for p in _BASE_PLUGINS if p != "Initializers"),
}


def default_admission_plugins(version: str) -> list[AdmissionPlugin]:
    """Return a fresh list of the default admission plugins for ``version``.

    Versions older than the oldest known minor get the oldest list, newer
    ones get the newest list.

    Raises:
        ValueError: If ``version`` cannot be parsed
    """
    key = major_minor(version)
    known = sorted(_PLUGINS_BY_VERSION)
    if key < known[0]:
        key = known[0]
    elif key > known[-1]:
        key = known[-1]
    return [AdmissionPlugin(name=name) for name in _PLUGINS_BY_VERSION[key]]


def merge_admission_plugins(
    defaults: Sequence[AdmissionPlugin],
    overrides: Sequence[AdmissionPlugin],
) -> list[AdmissionPlugin]:
    """Merge user supplied admission plugins into the defaults.

    An override replaces the first default with the same name at that
    default's position. Overrides without a matching default are appended in
    their original order. Neither input is modified.
    """
    merged = list(defaults)
    unmatched: list[AdmissionPlugin] = []

    for plugin in overrides:
        for i, default in enumerate(merged[: len(defaults)]):
            if default.name == plugin.name:
                merged[i] = plugin
                break
        else:
            unmatched.append(plugin)

    return merged + unmatched
