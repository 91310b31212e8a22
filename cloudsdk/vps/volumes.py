"""Block storage volumes."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.vps.models import (
    CreateVolumeRequest,
    UpdateVolumeRequest,
    Volume,
    VolumeActionRequest,
    VolumeList,
)


def _path(volume_id: str) -> str:
    return f"/volumes/{segment(volume_id, 'volume ID')}"


class VolumesClient(ResourceClient):
    def list(
        self,
        *,
        name: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
        type: str | None = None,
        detail: bool = False,
    ) -> list[Volume]:
        params = {
            "name": name,
            "user_id": user_id,
            "status": status,
            "type": type,
            "detail": True if detail else None,
        }
        return self._list("/volumes", VolumeList, "volumes", params=params)

    def create(self, request: CreateVolumeRequest) -> Volume:
        return self._call("POST", "/volumes", Volume, body=request)

    def get(self, volume_id: str) -> Volume:
        return self._call("GET", _path(volume_id), Volume)

    def update(self, volume_id: str, request: UpdateVolumeRequest) -> Volume:
        return self._call("PUT", _path(volume_id), Volume, body=request)

    def delete(self, volume_id: str) -> None:
        self._call("DELETE", _path(volume_id))

    def action(self, volume_id: str, request: VolumeActionRequest) -> None:
        """Attach, detach, extend or revert a volume.

        The request validates its own arguments, so a bad combination fails
        before anything is sent.
        """
        self._call("POST", f"{_path(volume_id)}/action", body=request)
