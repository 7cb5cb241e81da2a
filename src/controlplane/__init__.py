"""Shoot control plane value synthesis and deployment.

Usage:
    from src.controlplane.config import load_config
    from src.controlplane.context import build_reconcile_context
    from src.controlplane.deployer import ControlPlaneDeployer

    config = load_config(Path("config.yaml"))
    deployer = ControlPlaneDeployer.from_config(config)
    deployer.reconcile(build_reconcile_context(config))
"""
