"""
Floating IPs: public addresses that can be associated with a server NIC.

Allocation may require approval, so a new floating IP can sit in PENDING until
an administrator approves or rejects it.
"""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.vps.models import (
    FloatingIP,
    FloatingIPCreateRequest,
    FloatingIPList,
    FloatingIPUpdateRequest,
)


def _path(fip_id: str) -> str:
    return f"/floatingips/{segment(fip_id, 'floating IP ID')}"


class FloatingIPsClient(ResourceClient):
    def list(
        self,
        *,
        status: str | None = None,
        user_id: str | None = None,
        device_type: str | None = None,
        device_id: str | None = None,
        extnet_id: str | None = None,
        address: str | None = None,
        name: str | None = None,
        detail: bool = False,
    ) -> list[FloatingIP]:
        params = {
            "status": status,
            "user_id": user_id,
            "device_type": device_type,
            "device_id": device_id,
            "extnet_id": extnet_id,
            "address": address,
            "name": name,
            "detail": True if detail else None,
        }
        return self._list("/floatingips", FloatingIPList, "floatingips", params=params)

    def create(self, request: FloatingIPCreateRequest | None = None) -> FloatingIP:
        body = request or FloatingIPCreateRequest()
        return self._call("POST", "/floatingips", FloatingIP, body=body)

    def get(self, fip_id: str) -> FloatingIP:
        return self._call("GET", _path(fip_id), FloatingIP)

    def update(self, fip_id: str, request: FloatingIPUpdateRequest) -> FloatingIP:
        return self._call("PUT", _path(fip_id), FloatingIP, body=request)

    def delete(self, fip_id: str) -> None:
        self._call("DELETE", _path(fip_id))

    def approve(self, fip_id: str) -> None:
        self._call("POST", f"{_path(fip_id)}/approve")

    def reject(self, fip_id: str) -> None:
        self._call("POST", f"{_path(fip_id)}/reject")

    def disassociate(self, fip_id: str) -> None:
        """Detach the floating IP from whatever port it is bound to."""
        self._call("POST", f"{_path(fip_id)}/disassociate")
