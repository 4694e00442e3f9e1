"""
Tests for provider wiring.
"""

import pytest

from ovpn_cloud.client.http import CloudClient
from ovpn_cloud.config import ClientConfig, Settings
from ovpn_cloud.provider import Provider
from ovpn_cloud.resources.route import RouteResource


@pytest.fixture
def settings():
    return Settings(client=ClientConfig(cloud_id="acme", client_id="cid", client_secret="s"))


class TestProvider:
    def test_registers_route_resource(self, settings, fake_api, quiet_logger):
        provider = Provider(settings, client=fake_api, logger=quiet_logger)

        resource = provider.resource("openvpncloud_route")

        assert isinstance(resource, RouteResource)
        assert resource.client is fake_api
        assert list(provider.resources) == ["openvpncloud_route"]

    def test_unknown_resource(self, settings, fake_api, quiet_logger):
        provider = Provider(settings, client=fake_api, logger=quiet_logger)

        with pytest.raises(KeyError, match="openvpncloud_host"):
            provider.resource("openvpncloud_host")

    def test_schemas(self, settings, fake_api, quiet_logger):
        provider = Provider(settings, client=fake_api, logger=quiet_logger)

        schemas = provider.schemas()

        assert schemas["openvpncloud_route"]["required"] == ["type", "value", "network_item_id"]

    @pytest.mark.asyncio
    async def test_builds_http_client_from_settings(self, settings, quiet_logger):
        async with Provider(settings, logger=quiet_logger) as provider:
            assert isinstance(provider.client, CloudClient)
            assert provider.client.base_url == "https://acme.api.openvpn.com"
            assert provider.resource("openvpncloud_route").client is provider.client

    @pytest.mark.asyncio
    async def test_full_lifecycle_through_provider(self, settings, fake_api, quiet_logger):
        provider = Provider(settings, client=fake_api, logger=quiet_logger)
        routes = provider.resource("openvpncloud_route")

        data = routes.new_data({"type": "IP_V4", "value": "10.0.0.0/24", "network_item_id": "net1"})
        assert await routes.create(data) == []

        state = data.state()
        assert state == {
            "id": "r1",
            "type": "IP_V4",
            "value": "10.0.0.0/24",
            "network_item_id": "net1",
            "description": "Managed by Terraform",
        }

        assert await routes.delete(data) == []
        refreshed = routes.import_data("r1")
        assert await routes.read(refreshed) == []
        assert refreshed.state() is None
        await provider.close()
