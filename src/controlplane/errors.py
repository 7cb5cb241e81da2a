"""Error types raised while reconciling a shoot control plane.

Expected absence of cluster resources is signalled separately by
``src.infra.k8s.ResourceNotFoundError`` and is never wrapped in these types.
"""

from __future__ import annotations


class ControlPlaneError(Exception):
    """Raised when a control plane operation fails."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class CollaboratorError(ControlPlaneError):
    """An external collaborator (helm, image vector, provider, cluster) failed."""


class ChartApplyError(CollaboratorError):
    """Raised when a chart could not be rendered or applied."""


class ImageNotFoundError(CollaboratorError):
    """Raised when an image cannot be resolved from the image vector."""


class DNSResolutionTimeout(CollaboratorError):
    """Raised when a hostname does not become resolvable in time."""


class ClusterOperationError(CollaboratorError):
    """Raised when a seed cluster API call fails for a reason other than not found."""


class ProviderError(CollaboratorError):
    """Raised by cloud providers when they cannot generate their values."""
