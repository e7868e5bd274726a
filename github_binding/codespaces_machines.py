"""Machine types available for codespaces."""

from enum import Enum

from .resource import Resource, json_field
from .service import Response, Service, add_options, escape


class PrebuildAvailability(str, Enum):
    """Whether a prebuild exists for a machine type.

    NULL means prebuilds are unsupported or their availability is unknown.
    """

    NONE = "none"
    READY = "ready"
    IN_PROGRESS = "in_progress"
    NULL = "null"


class CodespaceMachine(Resource):
    name: str | None = json_field(omitempty=False)
    display_name: str | None = json_field(omitempty=False)
    operating_system: str | None = json_field(omitempty=False)
    storage_in_bytes: int | None = json_field(omitempty=False)
    memory_in_bytes: int | None = json_field(omitempty=False)
    cpus: int | None = json_field(omitempty=False)
    # values this client does not know yet stay plain strings
    prebuild_availability: PrebuildAvailability | str | None = json_field(
        omitempty=False, union_mode="left_to_right"
    )


class CodespaceMachines(Resource):
    total_count: int = json_field(omitempty=False, default=0)
    machines: list[CodespaceMachine] | None = json_field(omitempty=False)


class ListMachinesOptions(Resource):
    """Query parameters for list_machine_types_for_repository."""

    # Branch or commit checked for prebuild availability and devcontainer restrictions.
    ref: str | None = None
    # Location to check; assigned from the caller's IP when absent.
    location: str | None = None
    # IP used for location auto-detection when proxying a request.
    client_ip: str | None = None


class CodespacesService(Service):
    def list_machine_types_for_repository(
        self, owner: str, repo: str, opts: ListMachinesOptions | None = None
    ) -> tuple[CodespaceMachines, Response]:
        """List the machine types a codespace in the repository can use.

        GitHub API docs: https://docs.github.com/rest/codespaces/machines#list-available-machine-types-for-a-repository
        """
        u = add_options(f"repos/{escape(owner)}/{escape(repo)}/codespaces/machines", opts)
        req = self.client.new_request("GET", u)
        return self.client.do(req, CodespaceMachines)

    def list_machine_types_for_codespace(self, codespace_name: str) -> tuple[CodespaceMachines, Response]:
        """List the machine types an existing codespace can transition to.

        GitHub API docs: https://docs.github.com/rest/codespaces/machines#list-machine-types-for-a-codespace
        """
        req = self.client.new_request("GET", f"user/codespaces/{escape(codespace_name)}/machines")
        return self.client.do(req, CodespaceMachines)
