"""Integration tests for codespace machine types."""

from github_binding.codespaces_machines import (
    CodespaceMachine,
    CodespaceMachines,
    ListMachinesOptions,
    PrebuildAvailability,
)

MACHINES_JSON = {
    "total_count": 1,
    "machines": [
        {
            "name": "standardLinux",
            "display_name": "4 cores, 8 GB RAM, 64 GB storage",
            "operating_system": "linux",
            "storage_in_bytes": 68719476736,
            "memory_in_bytes": 17179869184,
            "cpus": 4,
            "prebuild_availability": "ready",
        }
    ],
}

STANDARD_LINUX = CodespaceMachine(
    name="standardLinux",
    display_name="4 cores, 8 GB RAM, 64 GB storage",
    operating_system="linux",
    storage_in_bytes=68719476736,
    memory_in_bytes=17179869184,
    cpus=4,
    prebuild_availability=PrebuildAvailability.READY,
)


class TestListMachineTypesForRepository:
    def test_sends_options_and_decodes(self, client, api):
        api.add("GET", "/repos/owner/repo/codespaces/machines", MACHINES_JSON)
        opts = ListMachinesOptions(ref="main", location="WestUs2", client_ip="1.2.3.4")

        machines, _ = client.codespaces.list_machine_types_for_repository("owner", "repo", opts)

        assert dict(api.last.url.params) == {"ref": "main", "location": "WestUs2", "client_ip": "1.2.3.4"}
        assert machines == CodespaceMachines(total_count=1, machines=[STANDARD_LINUX])

    def test_without_options(self, client, api):
        api.add("GET", "/repos/owner/repo/codespaces/machines", {"total_count": 0, "machines": []})

        machines, _ = client.codespaces.list_machine_types_for_repository("owner", "repo")

        assert api.last.url.query == b""
        assert machines == CodespaceMachines(total_count=0, machines=[])

    def test_renders_for_debugging(self, client, api):
        api.add("GET", "/repos/owner/repo/codespaces/machines", MACHINES_JSON)

        machines, _ = client.codespaces.list_machine_types_for_repository("owner", "repo")

        assert str(machines.machines[0]) == (
            'github.CodespaceMachine{Name:"standardLinux", DisplayName:"4 cores, 8 GB RAM, 64 GB storage", '
            'OperatingSystem:"linux", StorageInBytes:68719476736, MemoryInBytes:17179869184, CPUs:4, '
            'PrebuildAvailability:"ready"}'
        )


class TestListMachineTypesForCodespace:
    def test_decodes(self, client, api):
        api.add("GET", "/user/codespaces/codespace_1/machines", MACHINES_JSON)

        machines, resp = client.codespaces.list_machine_types_for_codespace("codespace_1")

        assert resp.status == 200
        assert machines.total_count == 1
        assert machines.machines == [STANDARD_LINUX]
