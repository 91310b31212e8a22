"""
VPS Lifecycle Example
=====================

Walks one project through a full server lifecycle and then tears it down:
  - Upload a Cirros image into a new VRM repository
  - Create (or reuse) a security group and keypair
  - Boot a server, attach a data volume and snapshot it
  - Snapshot the server into a VRM repository
  - Associate a floating IP, then delete everything that was created

Prerequisites:
  - A project with a network named "default" and at least one flavor
  - A Cirros image reachable from the image service (IMAGE_SOURCE)

Usage:
  cat > .env <<EOF
  API_PROTOCOL=https
  API_HOST=api.example.com
  API_TOKEN=...
  PROJECT_SYS_CODE=...
  VM_PASSWORD=...
  IMAGE_SOURCE=images/cirros-0.6.2-x86_64-disk.img
  EOF
  python main.py
"""

import base64
import logging
import os
import sys
from datetime import datetime

from dotenv import load_dotenv

from cloudsdk import Client, SDKError
from cloudsdk.config import get_config
from cloudsdk.vps import (
    wait_for_floating_ip_active,
    wait_for_server_active,
    wait_for_snapshot_available,
    wait_for_snapshot_deleted,
    wait_for_volume_available,
    wait_for_volume_deleted,
    wait_for_volume_in_use,
)
from cloudsdk.vps.models import (
    CreateSnapshotRequest,
    CreateVolumeRequest,
    Direction,
    FloatingIPUpdateRequest,
    KeypairCreateRequest,
    Protocol,
    SecurityGroupCreateRequest,
    SecurityGroupRuleCreateRequest,
    ServerCreateRequest,
    ServerNICCreateRequest,
    VolumeAction,
    VolumeActionRequest,
)
from cloudsdk.vrm import wait_for_tag_active
from cloudsdk.vrm.models import SnapshotToNewRepositoryRequest, UploadToNewRepositoryRequest

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

NETWORK_NAME = "default"
SECURITY_GROUP_NAME = "default-sg"
KEYPAIR_NAME = "default"
SERVER_NAME = "default"
VOLUME_NAME = "default"


class Lifecycle:
    def __init__(self, project):
        self.vps = project.vps
        self.vrm = project.vrm
        self.network_id = ""
        self.flavor_id = ""
        self.tag_id = ""
        self.image_repository_id = ""
        self.snapshot_repository_id = ""
        self.security_group_id = ""
        self.keypair = None
        self.server = None
        self.volume = None
        self.floating_ip = None

    # --- Setup ---

    def find_network_and_flavor(self):
        networks = self.vps.networks.list(name=NETWORK_NAME)
        if len(networks) != 1:
            raise RuntimeError(f"network {NETWORK_NAME!r} not found")
        self.network_id = networks[0].id
        logger.info("Network (%s) Found", self.network_id)

        flavors = self.vps.flavors.list()
        if not flavors:
            raise RuntimeError("no flavors found")
        self.flavor_id = flavors[0].id
        logger.info("Flavor (%s) Found", self.flavor_id)

    def upload_image(self, image_url):
        repo = self.vrm.repositories.upload(
            UploadToNewRepositoryRequest(
                name="cirros",
                version="v1",
                disk_format="qcow2",
                container_format="bare",
                operating_system="linux",
                description="Cirros test image",
                filepath=image_url,
            )
        )
        self.image_repository_id = repo.id
        self.tag_id = repo.tags[0].id
        logger.info("Image Repository (%s) Uploaded", self.image_repository_id)
        wait_for_tag_active(self.vrm.tags, self.tag_id)
        logger.info("Image Tag (%s) Active", self.tag_id)

    def ensure_security_group(self):
        existing = self.vps.security_groups.list(name=SECURITY_GROUP_NAME)
        if existing:
            self.security_group_id = existing[0].id
            logger.info("Security group '%s' already exists: %s", SECURITY_GROUP_NAME, self.security_group_id)
            return
        sg = self.vps.security_groups.create(
            SecurityGroupCreateRequest(
                name=SECURITY_GROUP_NAME,
                description="Example security group with SSH and ping access",
                rules=[
                    SecurityGroupRuleCreateRequest(
                        direction=Direction.INGRESS, protocol=Protocol.TCP, port_min=22, port_max=22
                    ),
                    SecurityGroupRuleCreateRequest(direction=Direction.INGRESS, protocol=Protocol.ICMP),
                ],
            )
        )
        self.security_group_id = sg.id
        logger.info("Security group (%s) Created", sg.id)

    def ensure_keypair(self):
        existing = self.vps.keypairs.list(name=KEYPAIR_NAME)
        if existing:
            self.keypair = existing[0]
            logger.info("Keypair '%s' already exists: %s", KEYPAIR_NAME, self.keypair.id)
            return
        self.keypair = self.vps.keypairs.create(KeypairCreateRequest(name=KEYPAIR_NAME))
        logger.info("Keypair (%s) Created", self.keypair.id)

    def create_server(self, password):
        self.server = self.vps.servers.create(
            ServerCreateRequest(
                name=SERVER_NAME,
                flavor_id=self.flavor_id,
                image_id=self.tag_id,
                password=base64.b64encode(password.encode()).decode(),
                keypair_id=self.keypair.id,
                nics=[
                    ServerNICCreateRequest(
                        network_id=self.network_id, sg_ids=[self.security_group_id]
                    )
                ],
            )
        )
        logger.info("Server (%s) Creating", self.server.id)
        wait_for_server_active(self.vps.servers, self.server.id)
        logger.info("Server (%s) Active", self.server.id)

    def create_volume(self):
        volume_types = self.vps.volume_types.list()
        if not volume_types:
            raise RuntimeError("no volume types available")
        logger.info("Volume type (%s) Found", volume_types[0])

        self.volume = self.vps.volumes.create(
            CreateVolumeRequest(name=VOLUME_NAME, type=volume_types[0], size=1)
        )
        logger.info("Non System Volume (%s) Creating", self.volume.id)
        wait_for_volume_available(self.vps.volumes, self.volume.id)

        self.vps.volumes.action(
            self.volume.id,
            VolumeActionRequest(action=VolumeAction.ATTACH, server_id=self.server.id),
        )
        logger.info("Non System Volume (%s) Attaching", self.volume.id)
        wait_for_volume_in_use(self.vps.volumes, self.volume.id)
        logger.info("Non System Volume (%s) In-Use", self.volume.id)

    def snapshot_volume(self):
        snapshot = self.vps.snapshots.create(
            CreateSnapshotRequest(name=f"{self.volume.name}-snapshot", volume_id=self.volume.id)
        )
        logger.info("Volume snapshot (%s) Creating", snapshot.id)
        wait_for_snapshot_available(self.vps.snapshots, snapshot.id)
        logger.info("Volume snapshot (%s) Available", snapshot.id)

    def snapshot_server(self):
        repo = self.vrm.repositories.snapshot(
            self.server.id,
            SnapshotToNewRepositoryRequest(
                name="backup",
                operating_system="linux",
                version=datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
            ),
        )
        self.snapshot_repository_id = repo.id
        logger.info("Server snapshot repository (%s) Available", repo.id)

    def associate_floating_ip(self):
        nic_id = next(
            (n.id for n in self.server.nics.list() if n.network and n.network.name == NETWORK_NAME),
            None,
        )
        if nic_id is None:
            raise RuntimeError(f"server has no NIC on network {NETWORK_NAME!r}")

        fip = self.server.nics.associate_floating_ip(nic_id)
        if fip is None:
            raise RuntimeError("floating IP association returned no floating IP")
        logger.info("Floating IP (%s) Associating", fip.id)
        wait_for_floating_ip_active(self.vps.floating_ips, fip.id)
        logger.info("Floating IP (%s) Active", fip.id)

        matches = self.vps.floating_ips.list(address=fip.address)
        if not matches:
            raise RuntimeError("floating IP not found")
        self.floating_ip = matches[0]

    # --- Teardown ---

    def delete_all(self):
        logger.info("Deleting all resources")

        if self.floating_ip is not None:
            fip_id = self.floating_ip.id
            self.vps.floating_ips.update(fip_id, FloatingIPUpdateRequest(reserved=True))
            logger.info("Floating IP (%s) Reserved", fip_id)
            self.vps.floating_ips.disassociate(fip_id)
            logger.info("Floating IP (%s) Disassociated", fip_id)
            self.vps.floating_ips.delete(fip_id)
            logger.info("Floating IP (%s) Deleted", fip_id)

        if self.volume is not None:
            for snapshot in self.vps.snapshots.list(volume_id=self.volume.id):
                try:
                    self.vps.snapshots.delete(snapshot.id)
                except SDKError as e:
                    logger.warning("Failed to delete snapshot %s: %s", snapshot.id, e)
                    continue
                logger.info("Volume Snapshot (%s) Deleting", snapshot.id)
                wait_for_snapshot_deleted(self.vps.snapshots, snapshot.id)
                logger.info("Volume Snapshot (%s) Deleted", snapshot.id)

        if self.server is not None:
            for disk in self.server.volumes.list():
                if disk.system:
                    continue
                self.server.volumes.detach(disk.volume_id)
                logger.info("Non system volume (%s) Detaching", disk.volume_id)
                wait_for_volume_available(self.vps.volumes, disk.volume_id)
                logger.info("Non system volume (%s) Detached", disk.volume_id)

        if self.volume is not None:
            self.vps.volumes.delete(self.volume.id)
            logger.info("Non system Volume (%s) Deleting", self.volume.id)
            wait_for_volume_deleted(self.vps.volumes, self.volume.id)
            logger.info("Non system Volume (%s) Deleted", self.volume.id)

        if self.server is not None:
            self.vps.servers.delete(self.server.id)
            logger.info("Server (%s) Deleted", self.server.id)

        if self.keypair is not None:
            self.vps.keypairs.delete(self.keypair.id)
            logger.info("Keypair (%s) Deleted", self.keypair.id)

        if self.security_group_id:
            self.vps.security_groups.delete(self.security_group_id)
            logger.info("Security group (%s) Deleted", self.security_group_id)

        for repo_id in (self.snapshot_repository_id, self.image_repository_id):
            if repo_id:
                self.vrm.repositories.delete(repo_id)
                logger.info("Repository (%s) Deleted", repo_id)


def main() -> int:
    load_dotenv()
    cfg = get_config()
    if not cfg.is_complete or not cfg.project:
        logger.error("Set API_HOST, API_TOKEN and PROJECT_SYS_CODE (or the CLOUDSDK_* equivalents)")
        return 1

    image_url = "dss-public://" + os.environ.get("IMAGE_SOURCE", "")
    password = os.environ.get("VM_PASSWORD", "")

    with Client.from_config(cfg) as client:
        app = Lifecycle(client.project(cfg.project))
        try:
            app.find_network_and_flavor()
            app.upload_image(image_url)
            app.ensure_security_group()
            app.ensure_keypair()
            app.create_server(password)
            app.create_volume()
            app.snapshot_volume()
            app.snapshot_server()
            app.associate_floating_ip()
        finally:
            app.delete_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
