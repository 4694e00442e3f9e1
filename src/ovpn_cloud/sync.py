"""Thin sync wrappers for async-first APIs.

Lifecycle handlers are coroutines. These wrappers let a synchronous host
call them. They refuse to run inside an active event loop.

Key design:
- All sync calls share one long-lived event loop, so a ``CloudClient``
  session and token lock created by one call stay usable in the next
- Raises RuntimeError if called inside an existing event loop
- ``close_sync`` closes a client or provider on that same loop
"""

from __future__ import annotations

import asyncio
import atexit
import threading
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .diagnostics import Diagnostics
    from .resources.base import Resource
    from .resources.state import ResourceData

T = TypeVar("T")

_runner: asyncio.Runner | None = None
_runner_lock = threading.Lock()


def _get_runner() -> asyncio.Runner:
    global _runner
    if _runner is None:
        _runner = asyncio.Runner()
        atexit.register(shutdown)
    return _runner


def shutdown() -> None:
    """Close the shared event loop. The next sync call starts a fresh one."""
    global _runner
    with _runner_lock:
        if _runner is not None:
            _runner.close()
            _runner = None


def run_sync(coro: Coroutine[Any, Any, T], *, name: str = "operation") -> T:
    """Run a coroutine to completion on the shared loop from synchronous code.

    Raises:
        RuntimeError: If called inside an existing async event loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        with _runner_lock:
            return _get_runner().run(coro)

    coro.close()
    raise RuntimeError(
        f"{name}_sync() cannot be called inside an async context. "
        f"Use 'await resource.{name}(...)' instead."
    )


def create_sync(resource: Resource, data: ResourceData) -> Diagnostics:
    return run_sync(resource.create(data), name="create")


def read_sync(resource: Resource, data: ResourceData) -> Diagnostics:
    return run_sync(resource.read(data), name="read")


def update_sync(resource: Resource, data: ResourceData) -> Diagnostics:
    return run_sync(resource.update(data), name="update")


def delete_sync(resource: Resource, data: ResourceData) -> Diagnostics:
    return run_sync(resource.delete(data), name="delete")


def close_sync(closable: Any) -> None:
    """Close a ``CloudClient`` or ``Provider`` opened through the sync wrappers."""
    run_sync(closable.close(), name="close")


__all__ = [
    "run_sync",
    "create_sync",
    "read_sync",
    "update_sync",
    "delete_sync",
    "close_sync",
    "shutdown",
]
