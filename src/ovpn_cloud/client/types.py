"""
Core types for the route endpoints of the management API.

A route's target is either a subnet (for IP routes) or a domain (for domain
routes). The API reports these in different JSON fields; here they are a
tagged variant so a route can never carry the wrong one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import InvalidResponseError


class RouteType(str, Enum):
    """Kinds of route accepted by the API."""

    IP_V4 = "IP_V4"
    IP_V6 = "IP_V6"
    DOMAIN = "DOMAIN"

    @property
    def is_subnet(self) -> bool:
        return self in (RouteType.IP_V4, RouteType.IP_V6)


DEFAULT_ROUTE_DESCRIPTION = "Managed by Terraform"


@dataclass(frozen=True)
class SubnetValue:
    """Target of an IP_V4 or IP_V6 route."""

    subnet: str

    @property
    def text(self) -> str:
        return self.subnet


@dataclass(frozen=True)
class DomainValue:
    """Target of a DOMAIN route."""

    domain: str

    @property
    def text(self) -> str:
        return self.domain


RouteValue = SubnetValue | DomainValue


def route_value(route_type: RouteType | str, text: str) -> RouteValue:
    """Build the variant matching ``route_type``."""
    if RouteType(route_type).is_subnet:
        return SubnetValue(text)
    return DomainValue(text)


@dataclass(frozen=True)
class Route:
    """A route as reported by the API."""

    id: str
    type: RouteType
    value: RouteValue
    network_item_id: str | None = None
    description: str = ""

    @property
    def value_text(self) -> str:
        return self.value.text

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Route:
        """
        Parse a route JSON object.

        IP routes take their value from ``subnet`` and domain routes from
        ``domain``.
        """
        try:
            route_type = RouteType(data["type"])
            route_id = data["id"]
        except (KeyError, ValueError) as e:
            raise InvalidResponseError(f"Malformed route object: {e}", cause=e) from e

        field_name = "subnet" if route_type.is_subnet else "domain"
        text = data.get(field_name) or ""
        return cls(
            id=str(route_id),
            type=route_type,
            value=route_value(route_type, text),
            network_item_id=data.get("networkItemId"),
            description=data.get("description") or "",
        )


@dataclass(frozen=True)
class RouteSpec:
    """Payload for creating a route."""

    type: RouteType
    value: str
    description: str = DEFAULT_ROUTE_DESCRIPTION

    def to_api(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "value": self.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class RoutePatch:
    """Payload for updating a route. Type and network are never patched."""

    id: str
    description: str
    value: str

    def to_api(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "value": self.value,
        }


__all__ = [
    "RouteType",
    "DEFAULT_ROUTE_DESCRIPTION",
    "SubnetValue",
    "DomainValue",
    "RouteValue",
    "route_value",
    "Route",
    "RouteSpec",
    "RoutePatch",
]
