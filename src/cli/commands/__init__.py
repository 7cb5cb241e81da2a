"""CLI command modules.

Command Groups:
- controlplane: Shoot control plane reconciliation, rendering and sizing
"""

from .controlplane import app as controlplane_app

__all__ = [
    "controlplane_app",
]
