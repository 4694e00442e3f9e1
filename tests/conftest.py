"""
Shared test fixtures and fakes for ovpn-cloud tests.

This module provides:
- An in-memory RouteApi that records every call
- Route factories
- A silent structured logger
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from ovpn_cloud.client.types import Route, RoutePatch, RouteSpec, RouteType, route_value
from ovpn_cloud.logging import StructuredLogger
from ovpn_cloud.resources.route import ROUTE_SCHEMA, RouteResource
from ovpn_cloud.resources.state import ResourceData

# =============================================================================
# Factories
# =============================================================================


def make_route(
    id: str = "r1",
    type: RouteType | str = RouteType.IP_V4,
    value: str = "10.0.0.0/24",
    network_item_id: str | None = "net1",
    description: str = "Managed by Terraform",
) -> Route:
    """Create a Route as the API would report it."""
    route_type = RouteType(type)
    return Route(
        id=id,
        type=route_type,
        value=route_value(route_type, value),
        network_item_id=network_item_id,
        description=description,
    )


# =============================================================================
# In-Memory Route API (for testing)
# =============================================================================


@dataclass
class FakeRouteApi:
    """RouteApi double backed by a dict. Set ``fail_with`` to make every call raise."""

    routes: dict[str, Route] = field(default_factory=dict)
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    fail_with: Exception | None = None
    canonicalize: dict[str, str] = field(default_factory=dict)
    _next_id: int = 1

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    def calls_to(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    async def create_route(self, network_item_id: str, spec: RouteSpec) -> Route:
        self._record("create_route", network_item_id, spec)
        route_id = f"r{self._next_id}"
        self._next_id += 1
        text = self.canonicalize.get(spec.value, spec.value)
        route = Route(
            id=route_id,
            type=spec.type,
            value=route_value(spec.type, text),
            network_item_id=network_item_id,
            description=spec.description,
        )
        self.routes[route_id] = route
        return route

    async def get_route_by_id(self, route_id: str) -> Route | None:
        self._record("get_route_by_id", route_id)
        return self.routes.get(route_id)

    async def update_route(self, network_item_id: str, patch: RoutePatch) -> None:
        self._record("update_route", network_item_id, patch)
        current = self.routes[patch.id]
        self.routes[patch.id] = Route(
            id=current.id,
            type=current.type,
            value=route_value(current.type, patch.value),
            network_item_id=current.network_item_id,
            description=patch.description,
        )

    async def delete_route(self, network_item_id: str, route_id: str) -> None:
        self._record("delete_route", network_item_id, route_id)
        self.routes.pop(route_id, None)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    return StructuredLogger("ovpn_cloud.tests", level="CRITICAL")


@pytest.fixture
def fake_api() -> FakeRouteApi:
    return FakeRouteApi()


@pytest.fixture
def route_resource(fake_api, quiet_logger) -> RouteResource:
    return RouteResource(fake_api, logger=quiet_logger)


@pytest.fixture
def ipv4_config() -> dict[str, Any]:
    return {"type": "IP_V4", "value": "10.0.0.0/24", "network_item_id": "net1"}


@pytest.fixture
def existing_route_data(fake_api) -> ResourceData:
    """Record for a route r1 that already exists remotely."""
    route = make_route()
    fake_api.routes[route.id] = route
    state = {
        "id": "r1",
        "type": "IP_V4",
        "value": "10.0.0.0/24",
        "network_item_id": "net1",
        "description": "Managed by Terraform",
    }
    return ResourceData.from_state(ROUTE_SCHEMA, state)
