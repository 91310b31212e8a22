"""
Block until a VPS resource reaches a status.

Each waiter polls the resource's ``get`` through ``cloudsdk.waiter.wait`` with
per-resource defaults; keyword arguments (``interval``, ``max_wait``,
``backoff_multiplier``, ``max_interval``) override them. A resource that lands
in its failure state raises ResourceStateError right away instead of waiting
out the timeout.

Usage:
    server = vps.servers.create(req)
    wait_for_server_active(vps.servers, server.id, max_wait=900)
"""

from __future__ import annotations

from cloudsdk.vps.floatingips import FloatingIPsClient
from cloudsdk.vps.models import FloatingIPStatus, ServerStatus, SnapshotStatus, VolumeStatus
from cloudsdk.vps.servers import ServersClient
from cloudsdk.vps.snapshots import SnapshotsClient
from cloudsdk.vps.volumes import VolumesClient
from cloudsdk.waiter import WaitOptions, wait_for_deleted, wait_for_status

SERVER_WAIT = WaitOptions(interval=5, max_wait=600, backoff_multiplier=1.2, max_interval=30)
SERVER_DELETE_WAIT = WaitOptions(interval=3, max_wait=300)
VOLUME_WAIT = WaitOptions(interval=3, max_wait=600, backoff_multiplier=1.2, max_interval=30)
SNAPSHOT_WAIT = WaitOptions(interval=3, max_wait=600, backoff_multiplier=1.2, max_interval=30)
FLOATING_IP_WAIT = WaitOptions(interval=2, max_wait=300)


# ─── Servers ─────────────────────────────────────────────────────────────


def wait_for_server_status(
    servers: ServersClient, server_id: str, target: str, **options: float
) -> None:
    wait_for_status(
        "server",
        lambda sid: servers.get(sid).status,
        server_id,
        target,
        ServerStatus.ERROR,
        SERVER_WAIT.override(**options),
    )


def wait_for_server_active(servers: ServersClient, server_id: str, **options: float) -> None:
    wait_for_server_status(servers, server_id, ServerStatus.ACTIVE, **options)


def wait_for_server_shutoff(servers: ServersClient, server_id: str, **options: float) -> None:
    wait_for_server_status(servers, server_id, ServerStatus.SHUTOFF, **options)


def wait_for_server_deleted(servers: ServersClient, server_id: str, **options: float) -> None:
    wait_for_deleted("server", servers.get, server_id, SERVER_DELETE_WAIT.override(**options))


# ─── Volumes ─────────────────────────────────────────────────────────────


def wait_for_volume_status(
    volumes: VolumesClient, volume_id: str, target: str, **options: float
) -> None:
    wait_for_status(
        "volume",
        lambda vid: volumes.get(vid).status,
        volume_id,
        target,
        VolumeStatus.ERROR,
        VOLUME_WAIT.override(**options),
    )


def wait_for_volume_available(volumes: VolumesClient, volume_id: str, **options: float) -> None:
    wait_for_volume_status(volumes, volume_id, VolumeStatus.AVAILABLE, **options)


def wait_for_volume_in_use(volumes: VolumesClient, volume_id: str, **options: float) -> None:
    wait_for_volume_status(volumes, volume_id, VolumeStatus.IN_USE, **options)


def wait_for_volume_deleted(volumes: VolumesClient, volume_id: str, **options: float) -> None:
    wait_for_deleted("volume", volumes.get, volume_id, VOLUME_WAIT.override(**options))


# ─── Snapshots ───────────────────────────────────────────────────────────


def wait_for_snapshot_status(
    snapshots: SnapshotsClient, snapshot_id: str, target: str, **options: float
) -> None:
    wait_for_status(
        "snapshot",
        lambda sid: snapshots.get(sid).status,
        snapshot_id,
        target,
        SnapshotStatus.ERROR,
        SNAPSHOT_WAIT.override(**options),
    )


def wait_for_snapshot_available(
    snapshots: SnapshotsClient, snapshot_id: str, **options: float
) -> None:
    wait_for_snapshot_status(snapshots, snapshot_id, SnapshotStatus.AVAILABLE, **options)


def wait_for_snapshot_deleted(
    snapshots: SnapshotsClient, snapshot_id: str, **options: float
) -> None:
    wait_for_deleted("snapshot", snapshots.get, snapshot_id, SNAPSHOT_WAIT.override(**options))


# ─── Floating IPs ────────────────────────────────────────────────────────


def wait_for_floating_ip_status(
    floating_ips: FloatingIPsClient, fip_id: str, target: str, **options: float
) -> None:
    wait_for_status(
        "floating IP",
        lambda fid: floating_ips.get(fid).status,
        fip_id,
        target,
        FloatingIPStatus.REJECTED,
        FLOATING_IP_WAIT.override(**options),
    )


def wait_for_floating_ip_active(
    floating_ips: FloatingIPsClient, fip_id: str, **options: float
) -> None:
    wait_for_floating_ip_status(floating_ips, fip_id, FloatingIPStatus.ACTIVE, **options)
