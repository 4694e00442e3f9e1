"""
Resource lifecycle adapters.
"""

from .base import Resource
from .route import ROUTE_RESOURCE_NAME, ROUTE_SCHEMA, RouteResource
from .schema import FieldSchema, FieldType, ResourceSchema
from .state import ResourceData

__all__ = [
    "Resource",
    "ResourceData",
    "ResourceSchema",
    "FieldSchema",
    "FieldType",
    "RouteResource",
    "ROUTE_RESOURCE_NAME",
    "ROUTE_SCHEMA",
]
