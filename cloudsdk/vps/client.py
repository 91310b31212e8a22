"""Project-scoped entry point to the VPS API."""

from __future__ import annotations

from functools import cached_property

from cloudsdk.transport import Transport
from cloudsdk.vps.flavors import FlavorsClient
from cloudsdk.vps.floatingips import FloatingIPsClient
from cloudsdk.vps.keypairs import KeypairsClient
from cloudsdk.vps.networks import NetworksClient
from cloudsdk.vps.quotas import QuotasClient
from cloudsdk.vps.routers import RoutersClient
from cloudsdk.vps.securitygroups import SecurityGroupsClient
from cloudsdk.vps.servers import ServersClient
from cloudsdk.vps.snapshots import SnapshotsClient
from cloudsdk.vps.volumes import VolumesClient
from cloudsdk.vps.volumetypes import VolumeTypesClient


class VPSClient:
    """Resource clients for one project, all sharing the VPS transport."""

    def __init__(self, transport: Transport, project_id: str) -> None:
        self._transport = transport
        self.project_id = project_id
        self.base_path = f"/api/v1/project/{project_id}"

    @cached_property
    def flavors(self) -> FlavorsClient:
        return FlavorsClient(self._transport, self.base_path)

    @cached_property
    def floating_ips(self) -> FloatingIPsClient:
        return FloatingIPsClient(self._transport, self.base_path)

    @cached_property
    def keypairs(self) -> KeypairsClient:
        return KeypairsClient(self._transport, self.base_path)

    @cached_property
    def networks(self) -> NetworksClient:
        return NetworksClient(self._transport, self.base_path)

    @cached_property
    def quotas(self) -> QuotasClient:
        return QuotasClient(self._transport, self.base_path)

    @cached_property
    def routers(self) -> RoutersClient:
        return RoutersClient(self._transport, self.base_path)

    @cached_property
    def security_groups(self) -> SecurityGroupsClient:
        return SecurityGroupsClient(self._transport, self.base_path)

    @cached_property
    def servers(self) -> ServersClient:
        return ServersClient(self._transport, self.base_path)

    @cached_property
    def snapshots(self) -> SnapshotsClient:
        return SnapshotsClient(self._transport, self.base_path)

    @cached_property
    def volumes(self) -> VolumesClient:
        return VolumesClient(self._transport, self.base_path)

    @cached_property
    def volume_types(self) -> VolumeTypesClient:
        return VolumeTypesClient(self._transport, self.base_path)
