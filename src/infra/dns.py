"""Blocking wait for DNS names to become resolvable."""

from __future__ import annotations

import socket
import time

from loguru import logger

from src.controlplane.errors import DNSResolutionTimeout


def wait_until_resolvable(
    hostname: str,
    *,
    timeout: float = 600.0,
    interval: float = 5.0,
) -> str:
    """Wait until ``hostname`` resolves and return its IPv4 address.

    Args:
        hostname: DNS name to resolve
        timeout: Maximum seconds to wait
        interval: Seconds between attempts

    Returns:
        The resolved IP address

    Raises:
        DNSResolutionTimeout: If the name did not resolve within ``timeout``
    """
    deadline = time.monotonic() + timeout
    last_error = ""
    while True:
        try:
            address = socket.gethostbyname(hostname)
            logger.debug(f"{hostname} resolved to {address}")
            return address
        except OSError as e:
            last_error = str(e)
            logger.debug(f"{hostname} not resolvable yet: {e}")

        if time.monotonic() + interval > deadline:
            raise DNSResolutionTimeout(
                f"{hostname} did not become resolvable within {timeout:g}s",
                details=last_error or None,
            )
        time.sleep(interval)
