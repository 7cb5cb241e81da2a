"""Factory for obtaining the configured cloud provider."""

from src.controlplane.config.config_data import CloudProviderConfig
from src.controlplane.providers.base import CloudControlPlaneProvider
from src.controlplane.providers.local import LocalCloudProvider
from src.controlplane.providers.static import StaticCloudProvider

_PROVIDERS: dict[str, type[CloudControlPlaneProvider]] = {
    "local": LocalCloudProvider,
    "static": StaticCloudProvider,
}


def available_providers() -> list[str]:
    return sorted(_PROVIDERS)


def get_cloud_provider(settings: CloudProviderConfig) -> CloudControlPlaneProvider:
    """Instantiate the provider named in configuration.

    Raises:
        ValueError: If no provider is registered under that name
    """
    provider_class = _PROVIDERS.get(settings.name)
    if provider_class is None:
        raise ValueError(
            f"Unknown cloud provider '{settings.name}' "
            f"(available: {', '.join(available_providers())})"
        )
    return provider_class(settings.options)  # type: ignore[call-arg]
