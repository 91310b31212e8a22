"""
VPS: virtual private servers and the networking and storage around them.

Public API:
    vps.servers / vps.volumes / vps.snapshots / vps.networks / vps.routers
    vps.security_groups / vps.floating_ips / vps.keypairs / vps.flavors
    vps.quotas / vps.volume_types
    wait_for_*(client, id)   → block until a resource reaches a status
"""

from __future__ import annotations

from cloudsdk.vps.client import VPSClient
from cloudsdk.vps.waiters import (
    wait_for_floating_ip_active,
    wait_for_floating_ip_status,
    wait_for_server_active,
    wait_for_server_deleted,
    wait_for_server_shutoff,
    wait_for_server_status,
    wait_for_snapshot_available,
    wait_for_snapshot_deleted,
    wait_for_snapshot_status,
    wait_for_volume_available,
    wait_for_volume_deleted,
    wait_for_volume_in_use,
    wait_for_volume_status,
)

__all__ = [
    "VPSClient",
    "wait_for_floating_ip_active",
    "wait_for_floating_ip_status",
    "wait_for_server_active",
    "wait_for_server_deleted",
    "wait_for_server_shutoff",
    "wait_for_server_status",
    "wait_for_snapshot_available",
    "wait_for_snapshot_deleted",
    "wait_for_snapshot_status",
    "wait_for_volume_available",
    "wait_for_volume_deleted",
    "wait_for_volume_in_use",
    "wait_for_volume_status",
]
