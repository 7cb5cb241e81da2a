"""API server resource sizing by shoot node count."""

from __future__ import annotations

from src.controlplane.models import ResourceProfile

# (inclusive upper node bound, profile); the last band has no upper bound
_BANDS: tuple[tuple[int | None, ResourceProfile], ...] = (
    (2, ResourceProfile("800m", "600Mi", "1000m", "900Mi")),
    (10, ResourceProfile("1000m", "800Mi", "1200m", "1400Mi")),
    (50, ResourceProfile("1200m", "1200Mi", "1500m", "3000Mi")),
    (100, ResourceProfile("2500m", "4000Mi", "3000m", "4500Mi")),
    (None, ResourceProfile("3000m", "4000Mi", "4000m", "6000Mi")),
)


def size_for(node_count: int) -> ResourceProfile:
    """Return the API server resource profile for a shoot with ``node_count`` nodes.

    Counts at or below zero fall into the smallest band.
    """
    for upper, profile in _BANDS:
        if upper is None or node_count <= upper:
            return profile
    raise AssertionError("unreachable: last band is unbounded")


def band_label(node_count: int) -> str:
    """Human readable node range of the band ``node_count`` falls into."""
    lower = None
    for upper, _ in _BANDS:
        if upper is None:
            return f"> {lower} nodes"
        if node_count <= upper:
            return f"<= {upper} nodes"
        lower = upper
    raise AssertionError("unreachable: last band is unbounded")
