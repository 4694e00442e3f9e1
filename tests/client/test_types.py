"""
Tests for route API types.
"""

import pytest

from ovpn_cloud.client.types import (
    DomainValue,
    Route,
    RoutePatch,
    RouteSpec,
    RouteType,
    SubnetValue,
    route_value,
)
from ovpn_cloud.errors import InvalidResponseError


class TestRouteValue:
    @pytest.mark.parametrize("route_type", ["IP_V4", "IP_V6", RouteType.IP_V4])
    def test_ip_types_are_subnets(self, route_type):
        assert route_value(route_type, "10.0.0.0/8") == SubnetValue("10.0.0.0/8")

    def test_domain_type(self):
        assert route_value("DOMAIN", "example.com") == DomainValue("example.com")

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            route_value("MAC", "aa:bb")


class TestRouteFromApi:
    def test_ipv6_reads_subnet(self):
        route = Route.from_api(
            {"id": "r1", "type": "IP_V6", "subnet": "fd00::/64", "domain": None, "networkItemId": "net1"}
        )

        assert route.value == SubnetValue("fd00::/64")
        assert route.value_text == "fd00::/64"
        assert route.network_item_id == "net1"

    def test_domain_reads_domain(self):
        route = Route.from_api({"id": "r2", "type": "DOMAIN", "subnet": "ignored", "domain": "corp.example"})

        assert route.value == DomainValue("corp.example")
        assert route.description == ""

    def test_malformed(self):
        with pytest.raises(InvalidResponseError):
            Route.from_api({"type": "IP_V4"})

        with pytest.raises(InvalidResponseError):
            Route.from_api({"id": "r1", "type": "SOMETHING"})


class TestPayloads:
    def test_spec_default_description(self):
        spec = RouteSpec(RouteType.DOMAIN, "example.com")

        assert spec.to_api() == {"type": "DOMAIN", "value": "example.com", "description": "Managed by Terraform"}

    def test_patch_excludes_immutable_fields(self):
        payload = RoutePatch(id="r1", description="d", value="v").to_api()

        assert payload == {"description": "d", "value": "v"}
