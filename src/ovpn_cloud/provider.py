"""
Provider wiring.

Builds the management API client from settings and hands it explicitly to
every resource it registers.
"""

from __future__ import annotations

from typing import Any

from .client.base import RouteApi
from .client.http import CloudClient
from .config import Settings, get_settings
from .logging import StructuredLogger, configure_logging
from .resources.base import Resource
from .resources.route import ROUTE_RESOURCE_NAME, RouteResource


class Provider:
    """
    Registry of resource types sharing one API client.

    Example:
        ```python
        async with Provider() as provider:
            routes = provider.resource("openvpncloud_route")
            data = routes.new_data({"type": "IP_V4", "value": "10.0.0.0/24", "network_item_id": "net1"})
            diags = await routes.create(data)
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: RouteApi | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.logger = logger or configure_logging(
            level=self.settings.logging.level,
            json_output=self.settings.logging.format == "json",
            redact_secrets=self.settings.logging.redact_secrets,
        )
        self._owns_client = client is None
        self.client: RouteApi = client or CloudClient(self.settings.client, logger=self.logger)
        self._resources: dict[str, Resource] = {
            ROUTE_RESOURCE_NAME: RouteResource(self.client, logger=self.logger),
        }

    @property
    def resources(self) -> dict[str, Resource]:
        return dict(self._resources)

    def resource(self, name: str) -> Resource:
        try:
            return self._resources[name]
        except KeyError:
            raise KeyError(f"Unknown resource type: {name}") from None

    def schemas(self) -> dict[str, dict[str, Any]]:
        """JSON schema of every registered resource type."""
        return {name: r.schema.to_json_schema() for name, r in self._resources.items()}

    async def close(self) -> None:
        if self._owns_client and isinstance(self.client, CloudClient):
            await self.client.close()

    async def __aenter__(self) -> Provider:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


__all__ = ["Provider"]
