"""Per-component chart value synthesizers."""

from .apiserver import KubeAPIServerSynthesizer
from .base import ComponentSynthesizer
from .cloud_controller_manager import CloudControllerManagerSynthesizer
from .controller_manager import KubeControllerManagerSynthesizer
from .etcd import DISABLED_BACKUP, StoreSynthesizer, store_release_name
from .scheduler import KubeSchedulerSynthesizer

__all__ = [
    "ComponentSynthesizer",
    "KubeAPIServerSynthesizer",
    "KubeControllerManagerSynthesizer",
    "CloudControllerManagerSynthesizer",
    "KubeSchedulerSynthesizer",
    "StoreSynthesizer",
    "DISABLED_BACKUP",
    "store_release_name",
]
