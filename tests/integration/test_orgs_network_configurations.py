"""Integration tests for organization network configurations."""

from datetime import datetime, timezone

from github_binding.orgs_network_configurations import (
    ComputeService,
    NetworkConfiguration,
    NetworkConfigurationRequest,
    NetworkConfigurations,
    NetworkSettingsResource,
)
from github_binding.service import ListOptions
from github_binding.timestamp import Timestamp

CONFIG_JSON = {
    "id": "123456789ABCDEF",
    "name": "configuration_one",
    "compute_service": "actions",
    "network_settings_ids": ["23456789ABDCEF1", "3456789ABDCEF12"],
    "created_on": "2024-04-09T17:30:15Z",
}

CONFIG = NetworkConfiguration(
    id="123456789ABCDEF",
    name="configuration_one",
    compute_service=ComputeService.ACTIONS,
    network_settings_ids=["23456789ABDCEF1", "3456789ABDCEF12"],
    created_on=Timestamp(datetime(2024, 4, 9, 17, 30, 15, tzinfo=timezone.utc)),
)


class TestListNetworkConfigurations:
    def test_pages_and_decodes(self, client, api):
        api.add(
            "GET",
            "/orgs/o/settings/network-configurations",
            {"total_count": 1, "network_configurations": [CONFIG_JSON]},
        )

        configs, _ = client.organizations.list_network_configurations("o", ListOptions(page=1, per_page=10))

        assert dict(api.last.url.params) == {"page": "1", "per_page": "10"}
        assert configs == NetworkConfigurations(total_count=1, network_configurations=[CONFIG])


class TestCreateNetworkConfiguration:
    def test_sends_request_body(self, client, api):
        api.add("POST", "/orgs/o/settings/network-configurations", CONFIG_JSON)
        body = NetworkConfigurationRequest(
            name="configuration_one",
            compute_service=ComputeService.ACTIONS,
            network_settings_ids=["23456789ABDCEF1"],
        )

        config, _ = client.organizations.create_network_configuration("o", body)

        assert api.last_json() == {
            "name": "configuration_one",
            "compute_service": "actions",
            "network_settings_ids": ["23456789ABDCEF1"],
        }
        assert config == CONFIG


class TestGetNetworkConfiguration:
    def test_decodes(self, client, api):
        api.add("GET", "/orgs/o/settings/network-configurations/123456789ABCDEF", CONFIG_JSON)

        config, _ = client.organizations.get_network_configuration("o", "123456789ABCDEF")

        assert config == CONFIG

    def test_keeps_null_creation_time_absent(self, client, api):
        api.add("GET", "/orgs/o/settings/network-configurations/1", {"id": "1", "created_on": None})

        config, _ = client.organizations.get_network_configuration("o", "1")

        assert config.created_on is None


class TestUpdateNetworkConfiguration:
    def test_patches(self, client, api):
        api.add("PATCH", "/orgs/o/settings/network-configurations/123456789ABCDEF", CONFIG_JSON)

        _, resp = client.organizations.update_network_configuration(
            "o", "123456789ABCDEF", NetworkConfigurationRequest(compute_service=ComputeService.NONE)
        )

        assert api.last.method == "PATCH"
        assert api.last_json() == {"compute_service": "none"}
        assert resp.status == 200


class TestDeleteNetworkConfiguration:
    def test_deletes(self, client, api):
        api.add("DELETE", "/orgs/o/settings/network-configurations/123456789ABCDEF", status=204)

        resp = client.organizations.delete_network_configuration("o", "123456789ABCDEF")

        assert resp.status == 204


class TestGetNetworkConfigurationResource:
    def test_decodes(self, client, api):
        api.add(
            "GET",
            "/orgs/o/settings/network-settings/220F78DACB92BBFBC5E6F22DE1CCF52309D",
            {
                "id": "220F78DACB92BBFBC5E6F22DE1CCF52309D",
                "network_configuration_id": "934E208B3EE0BD60CF5F752C426BFB53562",
                "name": "my_network_settings",
                "subnet_id": "/subscriptions/14839728-3ad9-43ab-bd2b-fa6ad0f75e2a/resourceGroups/my-rg/providers/Microsoft.Network/virtualNetworks/my-vnet/subnets/my-subnet",
                "region": "germanywestcentral",
            },
        )

        res, _ = client.organizations.get_network_configuration_resource("o", "220F78DACB92BBFBC5E6F22DE1CCF52309D")

        assert isinstance(res, NetworkSettingsResource)
        assert res.name == "my_network_settings"
        assert res.region == "germanywestcentral"
