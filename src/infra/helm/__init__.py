"""Helm integration for applying control plane charts.

- runner: subprocess execution with structured results
- commands: helm release operations
- chart_applier: two-layer values application (defaults, overrides)

Usage:
    from src.infra.helm import ChartApplier

    applier = ChartApplier()
    applier.apply(chart_path, "kube-scheduler", namespace, values, cloud_values)
"""

from .chart_applier import ChartApplier
from .commands import HelmCommands
from .runner import CommandRunner
from .types import CommandResult, HelmRelease

__all__ = [
    "ChartApplier",
    "HelmCommands",
    "CommandRunner",
    "CommandResult",
    "HelmRelease",
]
