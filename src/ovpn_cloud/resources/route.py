"""
The ``openvpncloud_route`` resource.
"""

from __future__ import annotations

from ..client.base import RouteApi
from ..client.types import DEFAULT_ROUTE_DESCRIPTION, Route, RoutePatch, RouteSpec, RouteType
from ..diagnostics import Diagnostic, Diagnostics, Severity, from_error, warning
from ..logging import StructuredLogger, get_logger
from .base import Resource
from .schema import FieldSchema, ResourceSchema
from .state import ResourceData

ROUTE_RESOURCE_NAME = "openvpncloud_route"

ROUTE_SCHEMA = ResourceSchema(
    name=ROUTE_RESOURCE_NAME,
    description="Use `openvpncloud_route` to create a route on an OpenVPN Cloud network.",
    fields={
        "type": FieldSchema(
            required=True,
            force_new=True,
            allowed_values=tuple(t.value for t in RouteType),
            description="The type of route. Valid values are `IP_V4`, `IP_V6`, and `DOMAIN`.",
        ),
        "value": FieldSchema(
            required=True,
            force_new=True,
            description="The target value of the route: a subnet for IP routes, a domain for domain routes.",
        ),
        "network_item_id": FieldSchema(
            required=True,
            force_new=True,
            description="The id of the network on which to create the route.",
        ),
        "description": FieldSchema(
            default=DEFAULT_ROUTE_DESCRIPTION,
            description="Free-form description of the route.",
        ),
    },
)


class RouteResource(Resource):
    """Maps route lifecycle calls onto a ``RouteApi`` client."""

    schema = ROUTE_SCHEMA

    def __init__(self, client: RouteApi, *, logger: StructuredLogger | None = None) -> None:
        self.client = client
        self._logger = logger or get_logger()

    @staticmethod
    def _apply_remote(data: ResourceData, route: Route) -> None:
        data.set("type", route.type.value)
        data.set("value", route.value_text)
        data.set("description", route.description)
        if route.network_item_id:
            data.set("network_item_id", route.network_item_id)

    async def create(self, data: ResourceData) -> Diagnostics:
        network_item_id = data.get("network_item_id")
        with self._logger.operation_context(self.type_name, "create"):
            try:
                spec = RouteSpec(
                    type=RouteType(data.get("type")),
                    value=data.get("value"),
                    description=data.get("description"),
                )
                route = await self.client.create_route(network_item_id, spec)
            except Exception as e:
                self._logger.log_error(e, "Route create failed", network_item_id=network_item_id)
                return from_error(e)

            data.set_id(route.id)
            # The API may canonicalize the subnet or domain.
            data.set("value", route.value_text)
            self._logger.log_lifecycle("created", resource_id=route.id, network_item_id=network_item_id)
        return []

    async def read(self, data: ResourceData) -> Diagnostics:
        route_id = data.id
        with self._logger.operation_context(self.type_name, "read", route_id):
            try:
                route = await self.client.get_route_by_id(route_id)
            except Exception as e:
                self._logger.log_error(e, "Route read failed")
                return from_error(e)

            if route is None:
                data.set_id("")
                self._logger.log_lifecycle("gone")
                return []

            self._apply_remote(data, route)
            if not data.get("network_item_id"):
                return [_missing_network(route_id)]
            self._logger.debug("Route refreshed", type=route.type.value)
        return []

    async def update(self, data: ResourceData) -> Diagnostics:
        diags: Diagnostics = []
        if not data.has_changes("description", "value"):
            return diags

        for name in ("type", "network_item_id"):
            old, new = data.get_change(name)
            if old is not None and old != new:
                diags.append(warning(f"{name} cannot be changed in place and was not sent", attribute=name))

        # The route still lives under the network it was created in.
        prior_network, network_item_id = data.get_change("network_item_id")
        network_item_id = prior_network or network_item_id
        patch = RoutePatch(
            id=data.id,
            description=data.get("description"),
            value=data.get("value"),
        )
        with self._logger.operation_context(self.type_name, "update", data.id):
            try:
                await self.client.update_route(network_item_id, patch)
            except Exception as e:
                self._logger.log_error(e, "Route update failed", network_item_id=network_item_id)
                return diags + from_error(e)
            self._logger.log_lifecycle("updated", network_item_id=network_item_id)
        return diags

    async def delete(self, data: ResourceData) -> Diagnostics:
        route_id = data.id
        network_item_id = data.get("network_item_id")
        if not network_item_id:
            return [_missing_network(route_id)]
        with self._logger.operation_context(self.type_name, "delete", route_id):
            try:
                await self.client.delete_route(network_item_id, route_id)
            except Exception as e:
                self._logger.log_error(e, "Route delete failed", network_item_id=network_item_id)
                return from_error(e)
            self._logger.log_lifecycle("deleted", network_item_id=network_item_id)
        return []


def _missing_network(route_id: str) -> Diagnostic:
    return Diagnostic(
        Severity.ERROR,
        f"Route {route_id} has no network_item_id",
        "The remote route did not name its network and the record has none.",
        attribute="network_item_id",
    )


__all__ = ["ROUTE_RESOURCE_NAME", "ROUTE_SCHEMA", "RouteResource"]
