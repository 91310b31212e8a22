"""Routers and the networks attached to them."""

from __future__ import annotations

from cloudsdk.resource import BoundResource, ResourceClient, segment
from cloudsdk.transport import Transport
from cloudsdk.vps.models import (
    Router,
    RouterCreateRequest,
    RouterList,
    RouterNetwork,
    RouterSetStateRequest,
    RouterUpdateRequest,
)


def _path(router_id: str) -> str:
    return f"/routers/{segment(router_id, 'router ID')}"


class RouterNetworksClient(ResourceClient):
    """Networks attached to one router: ``/routers/{id}/networks``."""

    def __init__(self, transport: Transport, base_path: str, router_id: str) -> None:
        super().__init__(transport, base_path)
        self.router_id = router_id

    def _network_path(self, network_id: str) -> str:
        return f"{_path(self.router_id)}/networks/{segment(network_id, 'network ID')}"

    def list(self) -> list[RouterNetwork]:
        networks = self._call("GET", f"{_path(self.router_id)}/networks", list[RouterNetwork])
        return networks or []

    def associate(self, network_id: str) -> None:
        self._call("POST", self._network_path(network_id))

    def disassociate(self, network_id: str) -> None:
        self._call("DELETE", self._network_path(network_id))


class RouterResource(BoundResource[Router]):
    def __init__(self, router: Router, transport: Transport, base_path: str) -> None:
        super().__init__(router)
        self.networks = RouterNetworksClient(transport, base_path, router.id)


class RoutersClient(ResourceClient):
    def _bind(self, router: Router) -> RouterResource:
        return RouterResource(router, self._transport, self._base_path)

    def list(
        self,
        *,
        name: str | None = None,
        user_id: str | None = None,
        detail: bool = False,
    ) -> list[Router]:
        params = {"name": name, "user_id": user_id, "detail": True if detail else None}
        return self._list("/routers", RouterList, "routers", params=params)

    def create(self, request: RouterCreateRequest) -> Router:
        return self._call("POST", "/routers", Router, body=request)

    def get(self, router_id: str) -> RouterResource:
        return self._bind(self._call("GET", _path(router_id), Router))

    def update(self, router_id: str, request: RouterUpdateRequest) -> Router:
        return self._call("PUT", _path(router_id), Router, body=request)

    def delete(self, router_id: str) -> None:
        self._call("DELETE", _path(router_id))

    def set_state(self, router_id: str, enabled: bool) -> None:
        """Enable or disable the router (POST /routers/{id}/action)."""
        body = RouterSetStateRequest(state=enabled)
        self._call("POST", f"{_path(router_id)}/action", body=body)

    def networks(self, router_id: str) -> RouterNetworksClient:
        return RouterNetworksClient(self._transport, self._base_path, router_id)
