"""
Tests for ResourceData.
"""

import pytest

from ovpn_cloud.errors import SchemaValidationError
from ovpn_cloud.resources.route import ROUTE_SCHEMA
from ovpn_cloud.resources.state import ResourceData

STATE = {
    "id": "r1",
    "type": "IP_V4",
    "value": "10.0.0.0/24",
    "network_item_id": "net1",
    "description": "Managed by Terraform",
}


class TestResourceData:
    def test_new_record(self):
        data = ResourceData.from_config(ROUTE_SCHEMA, {"type": "IP_V4", "value": "v", "network_item_id": "n"})

        assert data.is_new
        assert data.id == ""
        assert data.state() is None
        assert data.has_change("value")

    def test_from_state_round_trip(self):
        data = ResourceData.from_state(ROUTE_SCHEMA, STATE)

        assert data.id == "r1"
        assert not data.is_new
        assert data.state() == STATE
        assert not data.has_changes("type", "value", "network_item_id", "description")

    def test_get_change(self):
        data = ResourceData.from_state(ROUTE_SCHEMA, STATE)
        data.set("description", "new")

        assert data.get_change("description") == ("Managed by Terraform", "new")
        assert data.has_changes("value", "description")

    def test_default_when_unset(self):
        data = ResourceData(ROUTE_SCHEMA, id="r9")

        assert data.get("description") == "Managed by Terraform"
        assert data.get("value") is None

    def test_set_id_clears(self):
        data = ResourceData.from_state(ROUTE_SCHEMA, STATE)
        data.set_id("")

        assert data.state() is None

    def test_unknown_field(self):
        data = ResourceData(ROUTE_SCHEMA)

        with pytest.raises(SchemaValidationError):
            data.set("resourceRouteRead", "example.com")

        with pytest.raises(SchemaValidationError):
            data.get("subnet")

    def test_from_config_with_prior(self):
        prior = {k: v for k, v in STATE.items() if k != "id"}
        data = ResourceData.from_config(ROUTE_SCHEMA, {**prior, "value": "10.0.1.0/24"}, prior=prior, id="r1")

        assert data.has_change("value")
        assert not data.has_change("description")
