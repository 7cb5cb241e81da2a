"""Helm CLI invocations used for control plane releases."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .types import CommandResult, HelmRelease

if TYPE_CHECKING:
    from .runner import CommandRunner


class HelmCommands:
    """Builds and runs ``helm`` command lines for one seed cluster."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def upgrade_install(
        self,
        release_name: str,
        chart_path: Path,
        namespace: str,
        *,
        value_files: list[Path] | None = None,
        timeout: str = "10m",
        wait: bool = False,
    ) -> CommandResult:
        """Install the release, or upgrade it if it already exists.

        Args:
            release_name: Release name, e.g. ``etcd-main``
            chart_path: Chart directory
            namespace: Seed namespace of the shoot
            value_files: Values files, lowest precedence first
            timeout: Helm operation timeout
            wait: Block until the release's resources are ready

        Example:
            >>> helm.upgrade_install(
            ...     "kube-apiserver",
            ...     Path("charts/seed-controlplane/charts/kube-apiserver"),
            ...     "shoot--dev--demo",
            ...     value_files=[Path("defaults.yaml"), Path("overrides.yaml")],
            ... )
        """
        args = [
            "helm",
            "upgrade",
            "--install",
            release_name,
            str(chart_path),
            "--namespace",
            namespace,
            "--timeout",
            timeout,
        ]
        if wait:
            args.append("--wait")
        # helm merges -f files left to right
        for path in value_files or []:
            args += ["-f", str(path)]

        return self._runner.run(args, capture_output=True)

    def list_releases(self, namespace: str) -> list[HelmRelease]:
        """Releases installed in ``namespace``; empty when helm fails."""
        result = self._runner.run(["helm", "list", "--namespace", namespace, "--output", "json"])
        if not result.success:
            logger.debug(f"helm list failed in {namespace}: {result.stderr}")
            return []
        if not result.stdout:
            return []

        try:
            entries = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.debug(f"Unparseable helm list output: {result.stdout[:200]}")
            return []

        return [
            HelmRelease(
                name=entry.get("name", ""),
                namespace=entry.get("namespace", namespace),
                status=entry.get("status", ""),
                revision=str(entry.get("revision", "")),
                chart=entry.get("chart", ""),
            )
            for entry in entries
        ]
