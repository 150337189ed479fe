"""Tests for host discovery."""

import pytest
from unittest.mock import Mock

from dockhand.models.host import MachineDetail, MachineInfo
from dockhand.runtime.base import CommandResponse, MachineClient
from dockhand.runtime.probe import RuntimeKind
from dockhand.services.discovery import Hosts


def machine_detail(name, cert_dir):
    return MachineDetail.model_validate({
        "Name": name,
        "DriverName": "virtualbox",
        "HostOptions": {"AuthOptions": {"CertDir": cert_dir}},
    })


@pytest.fixture
def machine_client():
    """Machine client knowing two machines."""
    client = Mock(spec=MachineClient)
    client.is_present.return_value = True
    client.list_machines.return_value = CommandResponse.ok([
        MachineInfo(name="dev", state="Running", url="tcp://192.168.99.100:2376"),
        MachineInfo(name="ci", state="Running", url="tcp://192.168.99.101:2376"),
    ])
    client.inspect.side_effect = lambda name: CommandResponse.ok(
        machine_detail(name, f"/home/user/.docker/machine/machines/{name}")
    )
    return client


class TestHosts:
    """Test Hosts.discover."""

    def test_remote_machines_then_native(self, machine_client):
        """Machines come first in listing order, then the native host."""
        hosts = Hosts(machine_client, RuntimeKind.NATIVE, environ={"DOCKER_CERT_PATH": "/certs"}).discover()

        assert [host.name for host in hosts] == ["dev", "ci", "native"]

        dev = hosts[0]
        assert dev.uri == "tcp://192.168.99.100:2376"
        assert dev.machine_name == "dev"
        assert dev.is_native is False
        assert dev.stop_when_disposed is False
        assert dev.certificate_path == "/home/user/.docker/machine/machines/dev"

        native = hosts[-1]
        assert native.is_native is True
        assert native.uri is None
        assert native.machine_name is None
        assert native.certificate_path == "/certs"

    def test_listing_failure_yields_no_remote_hosts(self, machine_client):
        """A failing machine listing is not an error."""
        machine_client.list_machines.return_value = CommandResponse.failed("docker-machine crashed")

        hosts = Hosts(machine_client, RuntimeKind.EMULATED, environ={}).discover()

        assert [host.name for host in hosts] == ["native"]
        assert hosts[0].certificate_path is None

    def test_machine_inspect_failure_is_skipped(self, machine_client):
        """A machine that cannot be inspected is left out."""
        machine_client.inspect.side_effect = lambda name: (
            CommandResponse.failed("host does not exist") if name == "dev"
            else CommandResponse.ok(machine_detail(name, "/certs/ci"))
        )

        hosts = Hosts(machine_client, RuntimeKind.ABSENT, environ={}).discover()

        assert [host.name for host in hosts] == ["ci"]

    def test_absent_runtime_adds_no_native(self, machine_client):
        """Without a local runtime only machines are returned."""
        hosts = Hosts(machine_client, RuntimeKind.ABSENT, environ={}).discover()

        assert all(not host.is_native for host in hosts)

    def test_machine_tool_missing(self, machine_client):
        """No machine tooling means no listing call."""
        machine_client.is_present.return_value = False

        hosts = Hosts(machine_client, RuntimeKind.NATIVE, environ={}).discover()

        machine_client.list_machines.assert_not_called()
        assert [host.name for host in hosts] == ["native"]

    def test_nothing_found(self, machine_client):
        """No tooling and no runtime gives an empty list."""
        machine_client.is_present.return_value = False

        assert Hosts(machine_client, RuntimeKind.ABSENT, environ={}).discover() == []
