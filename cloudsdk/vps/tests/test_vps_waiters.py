"""Tests for cloudsdk.vps.waiters."""

import pytest

from cloudsdk.errors import ResourceStateError, SDKError, WaitTimeoutError
from cloudsdk.vps import (
    wait_for_floating_ip_active,
    wait_for_server_active,
    wait_for_server_deleted,
    wait_for_server_shutoff,
    wait_for_snapshot_available,
    wait_for_snapshot_deleted,
    wait_for_volume_available,
    wait_for_volume_deleted,
    wait_for_volume_in_use,
)
from cloudsdk.vps.waiters import FLOATING_IP_WAIT, SERVER_DELETE_WAIT, SERVER_WAIT

NOT_FOUND = {"errorCode": 404001, "message": "not found"}


class TestDefaults:
    def test_server_schedule(self):
        assert SERVER_WAIT.interval == 5
        assert SERVER_WAIT.max_wait == 600
        assert SERVER_WAIT.backoff_multiplier == 1.2
        assert SERVER_WAIT.max_interval == 30

    def test_server_delete_schedule(self):
        assert SERVER_DELETE_WAIT.interval == 3
        assert SERVER_DELETE_WAIT.max_wait == 300

    def test_floating_ip_schedule(self):
        assert FLOATING_IP_WAIT.interval == 2
        assert FLOATING_IP_WAIT.backoff_multiplier == 1.0


class TestServerWaiters:
    def test_active(self, api, vps, clock, server_json):
        api.vps("GET", "/servers/s1", server_json("s1", "BUILD"))
        api.vps("GET", "/servers/s1", server_json("s1", "BUILD"))
        api.vps("GET", "/servers/s1", server_json("s1", "ACTIVE"))
        wait_for_server_active(vps.servers, "s1")
        assert clock.sleeps == pytest.approx([5, 6])

    def test_error_state(self, api, vps, clock, server_json):
        api.vps("GET", "/servers/s1", server_json("s1", "BUILD"))
        api.vps("GET", "/servers/s1", server_json("s1", "ERROR"))
        with pytest.raises(ResourceStateError, match="server entered ERROR state while waiting for ACTIVE"):
            wait_for_server_active(vps.servers, "s1")

    def test_shutoff(self, api, vps, clock, server_json):
        api.vps("GET", "/servers/s1", server_json("s1", "SHUTOFF"))
        wait_for_server_shutoff(vps.servers, "s1")
        assert clock.sleeps == []

    def test_timeout_override(self, api, vps, clock, server_json):
        api.vps("GET", "/servers/s1", server_json("s1", "BUILD"))
        with pytest.raises(WaitTimeoutError):
            wait_for_server_active(vps.servers, "s1", interval=1, max_wait=3, backoff_multiplier=1)
        assert clock.now <= 3

    def test_get_errors_propagate(self, api, vps, clock):
        api.vps("GET", "/servers/s1", {"errorCode": 403001, "message": "forbidden"}, status=403)
        with pytest.raises(SDKError) as exc_info:
            wait_for_server_active(vps.servers, "s1")
        assert exc_info.value.status_code == 403

    def test_deleted(self, api, vps, clock, server_json):
        api.vps("GET", "/servers/s1", server_json("s1", "ACTIVE"))
        api.vps("GET", "/servers/s1", NOT_FOUND, status=404)
        wait_for_server_deleted(vps.servers, "s1")
        assert clock.sleeps == [3]

    def test_empty_id(self, vps):
        with pytest.raises(ValueError, match="server ID cannot be empty"):
            wait_for_server_active(vps.servers, "")


class TestVolumeWaiters:
    def test_available(self, api, vps, clock, volume_json):
        api.vps("GET", "/volumes/vol-1", volume_json(status="creating"))
        api.vps("GET", "/volumes/vol-1", volume_json(status="available"))
        wait_for_volume_available(vps.volumes, "vol-1")
        assert clock.sleeps == [3]

    def test_in_use(self, api, vps, clock, volume_json):
        api.vps("GET", "/volumes/vol-1", volume_json(status="in-use"))
        wait_for_volume_in_use(vps.volumes, "vol-1")

    def test_error(self, api, vps, clock, volume_json):
        api.vps("GET", "/volumes/vol-1", volume_json(status="error"))
        with pytest.raises(ResourceStateError):
            wait_for_volume_available(vps.volumes, "vol-1")

    def test_deleted(self, api, vps, clock):
        api.vps("GET", "/volumes/vol-1", NOT_FOUND, status=404)
        wait_for_volume_deleted(vps.volumes, "vol-1")


class TestSnapshotWaiters:
    def test_available(self, api, vps, clock):
        api.vps("GET", "/snapshots/snap-1", {"id": "snap-1", "status": "creating"})
        api.vps("GET", "/snapshots/snap-1", {"id": "snap-1", "status": "available"})
        wait_for_snapshot_available(vps.snapshots, "snap-1")

    def test_deleted(self, api, vps, clock):
        api.vps("GET", "/snapshots/snap-1", {"id": "snap-1", "status": "deleting"})
        api.vps("GET", "/snapshots/snap-1", NOT_FOUND, status=404)
        wait_for_snapshot_deleted(vps.snapshots, "snap-1")
        assert api.count("GET", "/snapshots/snap-1") == 2


class TestFloatingIPWaiters:
    def test_active(self, api, vps, clock):
        api.vps("GET", "/floatingips/fip-1", {"id": "fip-1", "status": "PENDING"})
        api.vps("GET", "/floatingips/fip-1", {"id": "fip-1", "status": "ACTIVE"})
        wait_for_floating_ip_active(vps.floating_ips, "fip-1")
        assert clock.sleeps == [2]

    def test_rejected(self, api, vps, clock):
        api.vps("GET", "/floatingips/fip-1", {"id": "fip-1", "status": "REJECTED"})
        with pytest.raises(ResourceStateError) as exc_info:
            wait_for_floating_ip_active(vps.floating_ips, "fip-1")
        assert exc_info.value.meta["status"] == "REJECTED"
