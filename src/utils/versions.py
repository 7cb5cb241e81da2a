"""Kubernetes version string helpers."""

from __future__ import annotations

import re

_VERSION_RE = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:[-+].*)?$")
_CONSTRAINT_RE = re.compile(r"^(>=|<=|==|!=|>|<|=)?\s*(\S+)$")


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``1.11``, ``v1.11.3`` or ``1.12.0-beta.1`` into a comparable tuple.

    Raises:
        ValueError: If the string is not a version
    """
    match = _VERSION_RE.match(version.strip())
    if not match:
        raise ValueError(f"Invalid version: {version!r}")
    major, minor, patch = (int(part) if part else 0 for part in match.groups())
    return major, minor, patch


def major_minor(version: str) -> tuple[int, int]:
    """Return the ``(major, minor)`` pair of a version string."""
    major, minor, _ = parse_version(version)
    return major, minor


def matches_constraint(version: str, constraint: str) -> bool:
    """Check a version against a comma separated constraint like ``>= 1.10, < 1.12``.

    An empty constraint matches every version.
    """
    target = parse_version(version)
    for clause in filter(None, (c.strip() for c in constraint.split(","))):
        match = _CONSTRAINT_RE.match(clause)
        if not match:
            raise ValueError(f"Invalid version constraint: {clause!r}")
        op, bound_str = match.groups()
        bound = parse_version(bound_str)
        satisfied = {
            ">=": target >= bound,
            "<=": target <= bound,
            ">": target > bound,
            "<": target < bound,
            "!=": target != bound,
        }.get(op or "==", target == bound)
        if not satisfied:
            return False
    return True
