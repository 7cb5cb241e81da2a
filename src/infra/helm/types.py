"""Result types of helm invocations."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CommandResult",
    "HelmRelease",
]


@dataclass
class CommandResult:
    """Outcome of one subprocess run."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


@dataclass
class HelmRelease:
    """A release as reported by ``helm list``.

    Attributes:
        name: Release name (``etcd-main``, ``kube-apiserver``, ...)
        namespace: Seed namespace
        status: deployed, failed, pending-upgrade, ...
        revision: Revision number as reported by helm
        chart: Chart name and version, e.g. ``etcd-0.1.0``
    """

    name: str
    namespace: str
    status: str
    revision: str
    chart: str = ""
