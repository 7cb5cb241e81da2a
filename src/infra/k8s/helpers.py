from __future__ import annotations

from cachetools.func import lru_cache  # type: ignore

from src.infra.k8s.controller import SeedController, SeedControllerSync


@lru_cache(maxsize=1)
def get_seed_controller() -> SeedController:
    """Get an instance of the SeedController.

    Returns:
        An instance of SeedController
    """
    from src.infra.k8s.kr8s_controller import Kr8sSeedController

    return Kr8sSeedController()


@lru_cache(maxsize=1)
def get_seed_controller_sync() -> SeedControllerSync:
    """Get a synchronous wrapper for the SeedController.

    Returns:
        An instance of SeedControllerSync wrapping the async controller
    """
    return SeedControllerSync(get_seed_controller())
