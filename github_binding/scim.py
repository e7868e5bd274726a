"""SCIM user provisioning for organizations.

Field names follow the SCIM schema (camelCase) rather than the REST API's
snake_case.
"""

from typing import Any

from .resource import Resource, json_field
from .service import Response, Service, add_options, escape
from .timestamp import Timestamp


class SCIMUserName(Resource):
    given_name: str = json_field("givenName", omitempty=False, default="")
    family_name: str = json_field("familyName", omitempty=False, default="")
    formatted: str | None = None


class SCIMUserEmail(Resource):
    value: str = json_field(omitempty=False, default="")
    primary: bool | None = None
    type: str | None = None


class SCIMUserAttributes(Resource):
    """Attributes sent when provisioning or replacing a SCIM user.

    user_name, name and emails are required by the API and always encoded.
    """

    # Configured by the admin: an email, login or username.
    user_name: str = json_field("userName", omitempty=False, default="")
    name: SCIMUserName = json_field(omitempty=False, default_factory=SCIMUserName)
    display_name: str | None = json_field("displayName")
    emails: list[SCIMUserEmail] | None = json_field(omitempty=False)
    schemas: list[str] | None = None
    external_id: str | None = json_field("externalId")
    groups: list[str] | None = None
    active: bool | None = None


class SCIMMeta(Resource):
    resource_type: str | None = json_field("resourceType")
    created: Timestamp | None = None
    last_modified: Timestamp | None = json_field("lastModified")
    location: str | None = None


class SCIMUser(SCIMUserAttributes):
    """A provisioned identity: the attributes plus server-assigned id and meta."""

    id: str | None = None
    meta: SCIMMeta | None = None


class ListSCIMProvisionedIdentitiesOptions(Resource):
    # Index of the first result to return.
    start_index: int | None = json_field("startIndex")
    # Number of results to return.
    count: int | None = None
    # Filter on userName, externalId, id or displayName, e.g. userName eq "octocat".
    filter: str | None = None


class ListSCIMProvisionedIdentitiesResult(Resource):
    schemas: list[str] | None = None
    total_results: int | None = json_field("totalResults")
    items_per_page: int | None = json_field("itemsPerPage")
    start_index: int | None = json_field("startIndex")
    resources: list[SCIMUser] | None = json_field("Resources")


class UpdateAttributeForSCIMUserOperations(Resource):
    op: str = json_field(omitempty=False, default="")
    path: str | None = None
    # Raw JSON: a string, object or array depending on op and path.
    value: Any = None


class UpdateAttributeForSCIMUserOptions(Resource):
    schemas: list[str] | None = None
    operations: list[UpdateAttributeForSCIMUserOperations] | None = json_field(
        "Operations", omitempty=False
    )


class SCIMService(Service):
    def list_scim_provisioned_identities(
        self, org: str, opts: ListSCIMProvisionedIdentitiesOptions | None = None
    ) -> tuple[ListSCIMProvisionedIdentitiesResult, Response]:
        """GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/scim/scim#list-scim-provisioned-identities"""
        u = add_options(f"scim/v2/organizations/{escape(org)}/Users", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, ListSCIMProvisionedIdentitiesResult)

    def provision_and_invite_scim_user(
        self, org: str, attributes: SCIMUserAttributes
    ) -> tuple[SCIMUser, Response]:
        """GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/scim/scim#provision-and-invite-a-scim-user"""
        req = self.client.new_request("POST", f"scim/v2/organizations/{escape(org)}/Users", attributes)
        return self.client.do(req, SCIMUser)

    def get_scim_provisioning_info_for_user(self, org: str, scim_user_id: str) -> tuple[SCIMUser, Response]:
        req = self.client.new_request("GET", f"scim/v2/organizations/{escape(org)}/Users/{escape(scim_user_id)}")
        return self.client.do(req, SCIMUser)

    def update_provisioned_org_membership(
        self, org: str, scim_user_id: str, attributes: SCIMUserAttributes
    ) -> Response:
        """Replace every attribute of a provisioned user; omitted optional fields are cleared.

        GitHub API docs: https://docs.github.com/enterprise-cloud@latest/rest/scim/scim#update-a-provisioned-organization-membership
        """
        u = f"scim/v2/organizations/{escape(org)}/Users/{escape(scim_user_id)}"
        req = self.client.new_request("PUT", u, attributes)
        _, resp = self.client.do(req)
        return resp

    def update_attribute_for_scim_user(
        self, org: str, scim_user_id: str, opts: UpdateAttributeForSCIMUserOptions
    ) -> Response:
        u = f"scim/v2/organizations/{escape(org)}/Users/{escape(scim_user_id)}"
        req = self.client.new_request("PATCH", u, opts)
        _, resp = self.client.do(req)
        return resp

    def delete_scim_user_from_org(self, org: str, scim_user_id: str) -> Response:
        req = self.client.new_request("DELETE", f"scim/v2/organizations/{escape(org)}/Users/{escape(scim_user_id)}")
        _, resp = self.client.do(req)
        return resp
