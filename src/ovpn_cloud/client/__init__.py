"""
Management API client for OpenVPN Cloud routes.
"""

from .base import RouteApi
from .http import CloudClient
from .types import (
    DEFAULT_ROUTE_DESCRIPTION,
    DomainValue,
    Route,
    RoutePatch,
    RouteSpec,
    RouteType,
    RouteValue,
    SubnetValue,
    route_value,
)

__all__ = [
    "RouteApi",
    "CloudClient",
    "DEFAULT_ROUTE_DESCRIPTION",
    "RouteType",
    "SubnetValue",
    "DomainValue",
    "RouteValue",
    "route_value",
    "Route",
    "RouteSpec",
    "RoutePatch",
]
