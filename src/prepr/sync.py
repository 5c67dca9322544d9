"""
Sync API wrappers for the async client.
"""

import asyncio
import concurrent.futures
from typing import Any, Coroutine, Mapping, Optional

from .client import PreprClient


def detect_event_loop_state() -> str:
    """Detect current event loop state.

    Returns:
        - "none": No event loop is running in the current thread
        - "running": An event loop is running in the current thread
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return "none"
    return "running"


def run_in_thread_pool(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run coroutine to completion on a fresh loop in a worker thread."""
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result()


def run_sync(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run a coroutine from synchronous code, even inside a running loop."""
    if detect_event_loop_state() == "running":
        return run_in_thread_pool(coro)
    return asyncio.run(coro)


def get_sync(
    client: PreprClient,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    hostname: str = "",
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """Synchronous version of PreprClient.get."""
    return run_sync(client.get(path, params, hostname=hostname, headers=headers))


def post_sync(
    client: PreprClient,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    hostname: str = "",
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """Synchronous version of PreprClient.post."""
    return run_sync(client.post(path, params, hostname=hostname, headers=headers))


def put_sync(
    client: PreprClient,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    hostname: str = "",
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """Synchronous version of PreprClient.put."""
    return run_sync(client.put(path, params, hostname=hostname, headers=headers))
