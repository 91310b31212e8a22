"""Private networks and the ports attached to them."""

from __future__ import annotations

from cloudsdk.resource import BoundResource, ResourceClient, segment
from cloudsdk.transport import Transport
from cloudsdk.vps.models import (
    Network,
    NetworkCreateRequest,
    NetworkList,
    NetworkPort,
    NetworkUpdateRequest,
)


def _path(network_id: str) -> str:
    return f"/networks/{segment(network_id, 'network ID')}"


class NetworkPortsClient(ResourceClient):
    """Ports of one network: ``/networks/{id}/ports``."""

    def __init__(self, transport: Transport, base_path: str, network_id: str) -> None:
        super().__init__(transport, base_path)
        self.network_id = network_id

    def list(self) -> list[NetworkPort]:
        ports = self._call("GET", f"{_path(self.network_id)}/ports", list[NetworkPort])
        return ports or []


class NetworkResource(BoundResource[Network]):
    def __init__(self, network: Network, transport: Transport, base_path: str) -> None:
        super().__init__(network)
        self.ports = NetworkPortsClient(transport, base_path, network.id)


class NetworksClient(ResourceClient):
    def _bind(self, network: Network) -> NetworkResource:
        return NetworkResource(network, self._transport, self._base_path)

    def list(
        self,
        *,
        name: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
        router_id: str | None = None,
        detail: bool = False,
    ) -> list[NetworkResource]:
        params = {
            "name": name,
            "user_id": user_id,
            "status": status,
            "router_id": router_id,
            "detail": True if detail else None,
        }
        networks = self._list("/networks", NetworkList, "networks", params=params)
        return [self._bind(n) for n in networks]

    def create(self, request: NetworkCreateRequest) -> NetworkResource:
        return self._bind(self._call("POST", "/networks", Network, body=request))

    def get(self, network_id: str) -> NetworkResource:
        return self._bind(self._call("GET", _path(network_id), Network))

    def update(self, network_id: str, request: NetworkUpdateRequest) -> NetworkResource:
        return self._bind(self._call("PUT", _path(network_id), Network, body=request))

    def delete(self, network_id: str) -> None:
        self._call("DELETE", _path(network_id))

    def ports(self, network_id: str) -> NetworkPortsClient:
        return NetworkPortsClient(self._transport, self._base_path, network_id)
