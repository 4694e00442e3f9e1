"""
Top-level package for ovpn-cloud.

Environment variables are loaded from the nearest `.env` so credentials
are available to the default configuration.
"""
from dotenv import find_dotenv, load_dotenv

# Keep side effect so credentials are loaded on import.
_ = load_dotenv(find_dotenv(usecwd=True), override=False)

from .client import CloudClient, Route, RouteApi, RoutePatch, RouteSpec, RouteType
from .config import ClientConfig, Settings
from .diagnostics import Diagnostic, Diagnostics, Severity
from .errors import ApiError, OvpnCloudError
from .provider import Provider
from .resources import ResourceData, ResourceSchema, RouteResource

__all__ = [
    "Provider",
    "RouteResource",
    "ResourceData",
    "ResourceSchema",
    "CloudClient",
    "RouteApi",
    "Route",
    "RouteSpec",
    "RoutePatch",
    "RouteType",
    "ClientConfig",
    "Settings",
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "OvpnCloudError",
    "ApiError",
]
