"""
Servers (virtual machines), their NICs and attached volumes.

Usage:
    server = vps.servers.create(ServerCreateRequest(
        name="web-1", flavor_id=flavor.id, image_id=tag.id,
        nics=[ServerNICCreateRequest(network_id=net.id, sg_ids=[sg.id])],
    ))
    for nic in server.nics.list():
        print(nic.addresses)
    vps.servers.action(server.id, ServerActionRequest(action=ServerAction.STOP))
"""

from __future__ import annotations

from cloudsdk.resource import BoundResource, ResourceClient, segment
from cloudsdk.transport import Transport
from cloudsdk.vps.models import (
    FloatingIPInfo,
    MetricInfo,
    Server,
    ServerActionRequest,
    ServerActionResponse,
    ServerConsoleURL,
    ServerCreateRequest,
    ServerList,
    ServerNIC,
    ServerNICAssociateFloatingIPRequest,
    ServerNICCreateRequest,
    ServerNICUpdateRequest,
    ServerUpdateRequest,
    ServerVolume,
    ServerVolumeList,
)


def _path(server_id: str) -> str:
    return f"/servers/{segment(server_id, 'server ID')}"


class ServerNICsClient(ResourceClient):
    """Virtual NICs of one server: ``/servers/{id}/nics``."""

    def __init__(self, transport: Transport, base_path: str, server_id: str) -> None:
        super().__init__(transport, base_path)
        self.server_id = server_id

    @property
    def _path(self) -> str:
        return f"{_path(self.server_id)}/nics"

    def _nic_path(self, nic_id: str) -> str:
        return f"{self._path}/{segment(nic_id, 'NIC ID')}"

    def list(self) -> list[ServerNIC]:
        return self._call("GET", self._path, list[ServerNIC]) or []

    def add(self, request: ServerNICCreateRequest) -> ServerNIC:
        return self._call("POST", self._path, ServerNIC, body=request)

    def update(self, nic_id: str, request: ServerNICUpdateRequest) -> ServerNIC:
        return self._call("PUT", self._nic_path(nic_id), ServerNIC, body=request)

    def delete(self, nic_id: str) -> None:
        self._call("DELETE", self._nic_path(nic_id))

    def associate_floating_ip(self, nic_id: str, fip_id: str | None = None) -> FloatingIPInfo | None:
        """Bind a floating IP to the NIC.

        Without ``fip_id`` the service allocates a new floating IP. Returns the
        bound floating IP when the service reports it.
        """
        body = ServerNICAssociateFloatingIPRequest(fip_id=fip_id)
        path = f"{self._nic_path(nic_id)}/floatingip"
        return self._call("POST", path, FloatingIPInfo, body=body)


class ServerVolumesClient(ResourceClient):
    """Disks attached to one server: ``/servers/{id}/volumes``."""

    def __init__(self, transport: Transport, base_path: str, server_id: str) -> None:
        super().__init__(transport, base_path)
        self.server_id = server_id

    def _volume_path(self, volume_id: str) -> str:
        return f"{_path(self.server_id)}/volumes/{segment(volume_id, 'volume ID')}"

    def list(self) -> list[ServerVolume]:
        return self._list(f"{_path(self.server_id)}/volumes", ServerVolumeList, "disks")

    def attach(self, volume_id: str) -> None:
        self._call("POST", self._volume_path(volume_id))

    def detach(self, volume_id: str) -> None:
        self._call("DELETE", self._volume_path(volume_id))


class ServerResource(BoundResource[Server]):
    def __init__(self, server: Server, transport: Transport, base_path: str) -> None:
        super().__init__(server)
        self.nics = ServerNICsClient(transport, base_path, server.id)
        self.volumes = ServerVolumesClient(transport, base_path, server.id)


class ServersClient(ResourceClient):
    def _bind(self, server: Server) -> ServerResource:
        return ServerResource(server, self._transport, self._base_path)

    def list(
        self,
        *,
        name: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
        flavor_id: str | None = None,
        image_id: str | None = None,
        detail: bool = False,
    ) -> list[Server]:
        params = {
            "name": name,
            "user_id": user_id,
            "status": status,
            "flavor_id": flavor_id,
            "image_id": image_id,
            "detail": True if detail else None,
        }
        return self._list("/servers", ServerList, "servers", params=params)

    def create(self, request: ServerCreateRequest) -> ServerResource:
        return self._bind(self._call("POST", "/servers", Server, body=request))

    def get(self, server_id: str) -> ServerResource:
        return self._bind(self._call("GET", _path(server_id), Server))

    def update(self, server_id: str, request: ServerUpdateRequest) -> Server:
        return self._call("PUT", _path(server_id), Server, body=request)

    def delete(self, server_id: str) -> None:
        self._call("DELETE", _path(server_id))

    def action(self, server_id: str, request: ServerActionRequest) -> ServerActionResponse | None:
        """POST /servers/{id}/action. Only ``get_pwd`` returns a body."""
        path = f"{_path(server_id)}/action"
        return self._call("POST", path, ServerActionResponse, body=request)

    def metrics(
        self,
        server_id: str,
        *,
        type: str | None = None,
        granularity: int | None = None,
        start: int | None = None,
        direction: str | None = None,
        rw: str | None = None,
    ) -> list[MetricInfo]:
        """Monitoring samples for a server.

        ``type`` is one of cpu, memory, disk, net or vgpu; ``start`` is a Unix
        timestamp; ``direction`` (incoming/outgoing) applies to net and ``rw``
        (read/write) to disk.
        """
        params = {
            "type": type,
            "start": start,
            "direction": direction,
            "rw": rw,
            "granularity": granularity,
        }
        path = f"{_path(server_id)}/metric"
        return self._call("GET", path, list[MetricInfo], params=params) or []

    def vnc_url(self, server_id: str) -> str:
        console = self._call("GET", f"{_path(server_id)}/vnc_url", ServerConsoleURL)
        return console.url if console is not None else ""

    def nics(self, server_id: str) -> ServerNICsClient:
        return ServerNICsClient(self._transport, self._base_path, server_id)

    def volumes(self, server_id: str) -> ServerVolumesClient:
        return ServerVolumesClient(self._transport, self._base_path, server_id)
