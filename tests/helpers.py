"""Test helpers shared across test modules."""

from src.infra.k8s import ResourceNotFoundError


def not_found(kind: str):
    """side_effect raising ResourceNotFoundError for (namespace, name) calls."""

    def _raise(namespace: str, name: str, *args, **kwargs):
        raise ResourceNotFoundError(kind, name, namespace)

    return _raise
