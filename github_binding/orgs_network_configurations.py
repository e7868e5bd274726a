"""Hosted compute network configurations for an organization."""

from enum import Enum

from .resource import Resource, json_field
from .service import ListOptions, Response, Service, add_options, escape
from .timestamp import Timestamp


class ComputeService(str, Enum):
    """Hosted compute service a network configuration supports."""

    NONE = "none"
    ACTIONS = "actions"


class NetworkConfiguration(Resource):
    id: str | None = None
    name: str | None = None
    compute_service: ComputeService | str | None = json_field(union_mode="left_to_right")
    network_settings_ids: list[str] | None = None
    created_on: Timestamp | None = json_field(omitempty=False)


class NetworkConfigurations(Resource):
    total_count: int | None = None
    network_configurations: list[NetworkConfiguration] | None = None


class NetworkSettingsResource(Resource):
    """A network settings resource, referenced by id from a configuration."""

    id: str | None = None
    network_configuration_id: str | None = None
    name: str | None = None
    subnet_id: str | None = None
    region: str | None = None


class NetworkConfigurationRequest(Resource):
    """Body for creating or updating a network configuration."""

    name: str | None = None
    compute_service: ComputeService | None = None
    network_settings_ids: list[str] | None = None


class OrganizationsService(Service):
    def list_network_configurations(
        self, org: str, opts: ListOptions | None = None
    ) -> tuple[NetworkConfigurations, Response]:
        """GitHub API docs: https://docs.github.com/rest/orgs/network-configurations#list-hosted-compute-network-configurations-for-an-organization"""
        u = add_options(f"orgs/{escape(org)}/settings/network-configurations", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, NetworkConfigurations)

    def create_network_configuration(
        self, org: str, create_req: NetworkConfigurationRequest
    ) -> tuple[NetworkConfiguration, Response]:
        req = self.client.new_request("POST", f"orgs/{escape(org)}/settings/network-configurations", create_req)
        return self.client.do(req, NetworkConfiguration)

    def get_network_configuration(self, org: str, network_id: str) -> tuple[NetworkConfiguration, Response]:
        req = self.client.new_request("GET", f"orgs/{escape(org)}/settings/network-configurations/{escape(network_id)}")
        return self.client.do(req, NetworkConfiguration)

    def update_network_configuration(
        self, org: str, network_id: str, update_req: NetworkConfigurationRequest
    ) -> tuple[NetworkConfiguration, Response]:
        req = self.client.new_request(
            "PATCH", f"orgs/{escape(org)}/settings/network-configurations/{escape(network_id)}", update_req
        )
        return self.client.do(req, NetworkConfiguration)

    def delete_network_configuration(self, org: str, network_id: str) -> Response:
        u = f"orgs/{escape(org)}/settings/network-configurations/{escape(network_id)}"
        req = self.client.new_request("DELETE", u)
        _, resp = self.client.do(req)
        return resp

    def get_network_configuration_resource(
        self, org: str, network_id: str
    ) -> tuple[NetworkSettingsResource, Response]:
        """Fetch the network settings resource a configuration points at.

        GitHub API docs: https://docs.github.com/rest/orgs/network-configurations#get-a-hosted-compute-network-settings-resource-for-an-organization
        """
        req = self.client.new_request("GET", f"orgs/{escape(org)}/settings/network-settings/{escape(network_id)}")
        return self.client.do(req, NetworkSettingsResource)
