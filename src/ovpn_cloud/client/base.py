"""
Remote API client protocol.

This module defines the interface the route resource needs from a
management API client, so resources can be exercised against any
implementation (the HTTP client, or a fake in tests).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types import Route, RoutePatch, RouteSpec


@runtime_checkable
class RouteApi(Protocol):
    """
    Protocol for the route endpoints of the management API.

    Every method performs exactly one remote round trip and raises an
    ``ApiError`` subclass on failure.
    """

    async def create_route(self, network_item_id: str, spec: RouteSpec) -> Route:
        """Create a route under a network item and return it as stored remotely."""
        ...

    async def get_route_by_id(self, route_id: str) -> Route | None:
        """Look up a route. Returns None when the route does not exist."""
        ...

    async def update_route(self, network_item_id: str, patch: RoutePatch) -> None:
        """Update the description and value of a route."""
        ...

    async def delete_route(self, network_item_id: str, route_id: str) -> None:
        """Delete a route from its network item."""
        ...


__all__ = ["RouteApi"]
