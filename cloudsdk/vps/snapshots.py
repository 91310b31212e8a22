"""Volume snapshots."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.vps.models import CreateSnapshotRequest, Snapshot, SnapshotList, UpdateSnapshotRequest


def _path(snapshot_id: str) -> str:
    return f"/snapshots/{segment(snapshot_id, 'snapshot ID')}"


class SnapshotsClient(ResourceClient):
    def list(
        self,
        *,
        name: str | None = None,
        volume_id: str | None = None,
        user_id: str | None = None,
        status: str | None = None,
    ) -> list[Snapshot]:
        params = {"name": name, "volume_id": volume_id, "user_id": user_id, "status": status}
        return self._list("/snapshots", SnapshotList, "snapshots", params=params)

    def create(self, request: CreateSnapshotRequest) -> Snapshot:
        return self._call("POST", "/snapshots", Snapshot, body=request)

    def get(self, snapshot_id: str) -> Snapshot:
        return self._call("GET", _path(snapshot_id), Snapshot)

    def update(self, snapshot_id: str, request: UpdateSnapshotRequest) -> Snapshot:
        return self._call("PUT", _path(snapshot_id), Snapshot, body=request)

    def delete(self, snapshot_id: str) -> None:
        self._call("DELETE", _path(snapshot_id))
