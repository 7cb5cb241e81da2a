"""Utility functions for the Kubernetes infrastructure layer.

Provides helpers for driving async seed controller calls from the
synchronous reconciliation engine.
"""

from __future__ import annotations

import asyncio
import base64
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine in a blocking sync context.

    Args:
        coro: The coroutine to execute

    Returns:
        The result of the coroutine

    Example:
        controller = SeedControllerSync(Kr8sSeedController())
        info = controller.get_deployment("shoot--dev--demo", "kube-apiserver")
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    # Called from inside an event loop: run on a private loop in a worker thread
    import concurrent.futures

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(asyncio.run, coro)
        return future.result()


def encode_secret_data(data: dict[str, str]) -> dict[str, str]:
    """Base64-encode plain secret values for a Secret ``data`` section."""
    return {
        key: base64.b64encode(value.encode("utf-8")).decode("ascii")
        for key, value in data.items()
    }
