"""Cloud provider plugins."""

from .base import CloudControlPlaneProvider
from .factory import available_providers, get_cloud_provider
from .local import LocalCloudProvider
from .static import StaticCloudProvider

__all__ = [
    "CloudControlPlaneProvider",
    "LocalCloudProvider",
    "StaticCloudProvider",
    "available_providers",
    "get_cloud_provider",
]
