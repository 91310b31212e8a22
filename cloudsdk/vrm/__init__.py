"""VRM: the virtual image repository servers boot from."""

from __future__ import annotations

from cloudsdk.vrm.client import VRMClient
from cloudsdk.vrm.waiters import wait_for_tag_active, wait_for_tag_available, wait_for_tag_status

__all__ = ["VRMClient", "wait_for_tag_active", "wait_for_tag_available", "wait_for_tag_status"]
