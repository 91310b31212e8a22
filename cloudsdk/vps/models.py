"""Pydantic request/response models for the VPS API."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field, model_validator

from cloudsdk.models import APIModel, IDName, Timestamp

# ─── Flavors ─────────────────────────────────────────────────────────────


class GPUInfo(APIModel):
    count: int = 0
    is_vgpu: bool = False
    model: str = ""


class Flavor(APIModel):
    id: str
    name: str = ""
    description: str = ""
    vcpu: int = 0
    memory: int = 0  # MiB
    disk: int = 0  # GiB
    gpu: GPUInfo | None = None
    public: bool = False
    tags: list[str] = []
    project_ids: list[str] = []
    az: str = ""
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")
    deleted_at: Timestamp = Field(default=None, alias="deletedAt")


class FlavorList(APIModel):
    flavors: list[Flavor] = []


# ─── Floating IPs ────────────────────────────────────────────────────────


class FloatingIPStatus(StrEnum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    DOWN = "DOWN"
    REJECTED = "REJECTED"


class FloatingIP(APIModel):
    id: str
    uuid: str = ""
    name: str = ""
    address: str = ""
    description: str = ""
    status: str = ""
    status_reason: str = ""
    reserved: bool = False
    project_id: str = ""
    project: IDName | None = None
    user_id: str = ""
    user: IDName | None = None
    port_id: str = ""
    device_id: str = ""
    device_name: str = ""
    device_type: str = ""
    extnet_id: str = ""
    namespace: str = ""
    approved_at: Timestamp = Field(default=None, alias="approvedAt")
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class FloatingIPList(APIModel):
    floatingips: list[FloatingIP] = []


class FloatingIPCreateRequest(APIModel):
    name: str | None = None
    description: str | None = None


class FloatingIPUpdateRequest(APIModel):
    name: str | None = None
    description: str | None = None
    reserved: bool | None = None


# ─── Keypairs ────────────────────────────────────────────────────────────


class Keypair(APIModel):
    id: str
    name: str = ""
    description: str = ""
    public_key: str = ""
    # Only returned by create when the service generated the key pair.
    private_key: str = ""
    fingerprint: str = ""
    user_id: str = ""
    user: IDName | None = None
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class KeypairList(APIModel):
    keypairs: list[Keypair] = []
    total: int = 0


class KeypairCreateRequest(APIModel):
    name: str = Field(min_length=1)
    description: str | None = None
    # Omit to have the service generate a new key pair.
    public_key: str | None = None


class KeypairUpdateRequest(APIModel):
    description: str | None = None


# ─── Networks ────────────────────────────────────────────────────────────


class ExtNetworkInfo(APIModel):
    id: str
    name: str = ""
    description: str = ""
    cidr: str = ""
    namespace: str = ""
    segment_id: str = ""
    type: str = ""
    is_default: bool = False


class RouterInfo(APIModel):
    id: str
    name: str = ""
    description: str = ""
    bonding: bool = False
    is_default: bool = False
    shared: bool = False
    state: bool = False
    status: str = ""
    status_reason: str = ""
    namespace: str = ""
    project: IDName | None = None
    project_id: str = ""
    user: IDName | None = None
    user_id: str = ""
    extnetwork: ExtNetworkInfo | None = None
    extnetwork_id: str = ""
    gw_addrs: list[str] = []
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class Network(APIModel):
    id: str
    name: str = ""
    description: str = ""
    cidr: str = ""
    bonding: bool = False
    gateway: str = ""
    gw_state: bool = False
    is_default: bool = False
    nameservers: list[str] = []
    namespace: str = ""
    project: IDName | None = None
    project_id: str = ""
    router: RouterInfo | None = None
    router_id: str = ""
    shared: bool = False
    status: str = ""
    status_reason: str = ""
    subnet_id: str = ""
    user: IDName | None = None
    user_id: str = ""
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class NetworkList(APIModel):
    networks: list[Network] = []


class NetworkCreateRequest(APIModel):
    name: str = Field(min_length=1)
    cidr: str = Field(min_length=1)
    description: str | None = None
    gateway: str | None = None
    router_id: str | None = None


class NetworkUpdateRequest(APIModel):
    name: str | None = None
    description: str | None = None


class ServerSummary(APIModel):
    id: str
    name: str = ""
    status: str = ""
    project_id: str = ""
    user_id: str = ""


class NetworkPort(APIModel):
    id: str
    addresses: list[str] = []
    server: ServerSummary | None = None


# ─── Quotas ──────────────────────────────────────────────────────────────


class QuotaDetail(APIModel):
    limit: int = 0  # -1 = unlimited
    usage: int = 0

    @property
    def unlimited(self) -> bool:
        return self.limit == -1

    @property
    def available(self) -> int | None:
        """Remaining capacity, or None when unlimited."""
        if self.unlimited:
            return None
        return max(self.limit - self.usage, 0)


class Quota(APIModel):
    vm: QuotaDetail = QuotaDetail()
    vcpu: QuotaDetail = QuotaDetail()
    ram: QuotaDetail = QuotaDetail()
    gpu: QuotaDetail = QuotaDetail()
    block_size: QuotaDetail = QuotaDetail()
    network: QuotaDetail = QuotaDetail()
    router: QuotaDetail = QuotaDetail()
    floating_ip: QuotaDetail = QuotaDetail()
    share: QuotaDetail = QuotaDetail()
    share_size: QuotaDetail = QuotaDetail()


# ─── Routers ─────────────────────────────────────────────────────────────


class Router(APIModel):
    id: str
    name: str = ""
    description: str = ""
    state: bool = False  # administrative state: True = enabled
    status: str = ""
    project_id: str = ""
    user_id: str = ""
    namespace: str = ""
    extnetwork_id: str = ""
    is_default: bool = False
    shared: bool = False
    bonding: bool = False
    gw_addrs: list[str] = []
    created_at: Timestamp = None
    updated_at: Timestamp = None


class RouterList(APIModel):
    routers: list[Router] = []
    total: int = 0


class RouterCreateRequest(APIModel):
    name: str = Field(min_length=1)
    description: str | None = None
    extnetwork_id: str | None = None


class RouterUpdateRequest(APIModel):
    name: str | None = None
    description: str | None = None


class RouterSetStateRequest(APIModel):
    state: bool


class RouterNetwork(APIModel):
    network_id: str
    network_name: str = ""
    subnet_id: str = ""
    port_id: str = ""


# ─── Security groups ─────────────────────────────────────────────────────


class Protocol(StrEnum):
    TCP = "tcp"
    UDP = "udp"
    ICMP = "icmp"
    ANY = "any"


class Direction(StrEnum):
    INGRESS = "ingress"
    EGRESS = "egress"


class SecurityGroupRule(APIModel):
    id: str
    direction: str = ""
    protocol: str = ""
    port_min: int = 0
    port_max: int = 0
    remote_cidr: str = ""


class SecurityGroupRuleCreateRequest(APIModel):
    direction: Direction
    protocol: Protocol
    port_min: int | None = Field(default=None, ge=0, le=65535)
    port_max: int | None = Field(default=None, ge=0, le=65535)
    remote_cidr: str = "0.0.0.0/0"

    @model_validator(mode="after")
    def _check_port_range(self) -> SecurityGroupRuleCreateRequest:
        if self.port_min is not None and self.port_max is not None:
            if self.port_min > self.port_max:
                raise ValueError("port_min must not exceed port_max")
        return self


class SecurityGroup(APIModel):
    id: str
    name: str = ""
    description: str = ""
    project_id: str = ""
    project: IDName | None = None
    user_id: str = ""
    user: IDName | None = None
    namespace: str = ""
    rules: list[SecurityGroupRule] = []
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class SecurityGroupList(APIModel):
    security_groups: list[SecurityGroup] = []


class SecurityGroupCreateRequest(APIModel):
    name: str = Field(min_length=1)
    description: str | None = None
    rules: list[SecurityGroupRuleCreateRequest] | None = None


class SecurityGroupUpdateRequest(APIModel):
    name: str | None = None
    description: str | None = None


# ─── Servers ─────────────────────────────────────────────────────────────


class ServerStatus(StrEnum):
    ACTIVE = "ACTIVE"
    BUILD = "BUILD"
    SHUTOFF = "SHUTOFF"
    ERROR = "ERROR"
    REBOOT = "REBOOT"
    DELETED = "DELETED"
    SUSPENDED = "SUSPENDED"
    RESIZE = "RESIZE"


class ServerAction(StrEnum):
    STOP = "stop"
    START = "start"
    REBOOT = "reboot"
    RESIZE = "resize"
    APPROVE = "approve"
    REJECT = "reject"
    EXTEND_ROOT = "extend_root"
    GET_PWD = "get_pwd"


class RebootType(StrEnum):
    HARD = "hard"
    SOFT = "soft"


class ImageInfo(APIModel):
    """The VRM repository tag a server was booted from."""

    repository_id: str = ""
    repository_name: str = ""
    tag_id: str = ""
    tag_name: str = ""


class Server(APIModel):
    id: str
    uuid: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
    status_reason: str = ""
    flavor_id: str = ""
    flavor: IDName | None = None
    flavor_detail: Flavor | None = None
    image_id: str = ""
    image: ImageInfo | None = None
    project_id: str = ""
    project: IDName | None = None
    user_id: str = ""
    user: IDName | None = None
    keypair_id: str = ""
    keypair: IDName | None = None
    metadatas: dict[str, str] = {}
    private_ips: list[str] = []
    public_ips: list[str] = []
    az: str = ""
    namespace: str = ""
    root_disk_id: str = ""
    root_disk_size: int = 0
    boot_script: str = ""
    approved_at: Timestamp = Field(default=None, alias="approvedAt")
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class ServerList(APIModel):
    servers: list[Server] = []


class ServerNICCreateRequest(APIModel):
    network_id: str = Field(min_length=1)
    sg_ids: list[str] = []
    fixed_ip: str | None = None


class ServerDiskRequest(APIModel):
    name: str | None = None
    volume_id: str | None = None
    type: str | None = None
    size: int | None = None


class ServerCreateRequest(APIModel):
    name: str = Field(min_length=1)
    flavor_id: str = Field(min_length=1)
    image_id: str = Field(min_length=1)
    nics: list[ServerNICCreateRequest] = []
    description: str | None = None
    sg_ids: list[str] | None = None
    keypair_id: str | None = None
    password: str | None = None  # base64
    boot_script: str | None = None  # base64
    volume_ids: list[str] | None = None
    volumes: list[ServerDiskRequest] | None = None


class ServerUpdateRequest(APIModel):
    name: str | None = None
    description: str | None = None


class ServerActionRequest(APIModel):
    action: ServerAction
    reboot_type: RebootType | None = None  # reboot
    flavor_id: str | None = None  # resize
    root_size: int | None = None  # extend_root
    private_key: str | None = None  # get_pwd, base64


class ServerActionResponse(APIModel):
    password: str = ""


class Measure(APIModel):
    granularity: int = 0
    timestamp: int = 0
    value: float = 0.0


class MetricInfo(APIModel):
    name: str = ""
    measures: list[Measure] = []


class ServerConsoleURL(APIModel):
    url: str = ""


class FloatingIPInfo(APIModel):
    """Floating IP as embedded in a NIC."""

    id: str
    uuid: str = ""
    name: str = ""
    address: str = ""
    description: str = ""
    status: str = ""
    status_reason: str = ""
    reserved: bool = False
    device_id: str = ""
    device_name: str = ""
    device_type: str = ""
    extnet_id: str = ""
    namespace: str = ""
    port_id: str = ""
    project: IDName | None = None
    project_id: str = ""
    user: IDName | None = None
    user_id: str = ""
    approved_at: Timestamp = Field(default=None, alias="approvedAt")
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class ServerNIC(APIModel):
    id: str
    mac: str = ""
    network_id: str = ""
    network: IDName | None = None
    addresses: list[str] = []
    floating_ip: FloatingIPInfo | None = None
    security_groups: list[IDName] = []
    sg_ids: list[str] = []
    is_provider_net: bool = False


class ServerNICUpdateRequest(APIModel):
    sg_ids: list[str] = []


class ServerNICAssociateFloatingIPRequest(APIModel):
    # Omit to allocate a new floating IP.
    fip_id: str | None = None


# ─── Volumes ─────────────────────────────────────────────────────────────


class VolumeStatus(StrEnum):
    CREATING = "creating"
    AVAILABLE = "available"
    IN_USE = "in-use"
    DETACHING = "detaching"
    EXTENDING = "extending"
    DELETING = "deleting"
    DELETED = "deleted"
    ERROR = "error"


class VolumeAction(StrEnum):
    ATTACH = "attach"
    DETACH = "detach"
    EXTEND = "extend"
    REVERT = "revert"


class Volume(APIModel):
    id: str
    name: str = ""
    description: str = ""
    size: int = 0  # GiB
    type: str = ""
    status: str = ""
    status_reason: str = ""
    attachments: list[IDName] = []
    project: IDName | None = None
    project_id: str = ""
    user: IDName | None = None
    user_id: str = ""
    namespace: str = ""
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class VolumeList(APIModel):
    volumes: list[Volume] = []


class CreateVolumeRequest(APIModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    size: int | None = Field(default=None, ge=0)
    description: str | None = None
    snapshot_id: str | None = None


class UpdateVolumeRequest(APIModel):
    name: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _require_one_field(self) -> UpdateVolumeRequest:
        if not self.name and not self.description:
            raise ValueError("at least one field (name or description) must be provided")
        return self


class VolumeActionRequest(APIModel):
    action: VolumeAction
    server_id: str | None = None  # attach, detach
    new_size: int | None = None  # extend

    @model_validator(mode="after")
    def _check_action_arguments(self) -> VolumeActionRequest:
        if self.action in (VolumeAction.ATTACH, VolumeAction.DETACH) and not self.server_id:
            raise ValueError("server_id is required for attach/detach actions")
        if self.action == VolumeAction.EXTEND and (self.new_size is None or self.new_size <= 0):
            raise ValueError("new_size must be positive for extend action")
        return self


class ServerVolume(APIModel):
    """A disk attached to a server. ``system`` marks the root disk."""

    system: bool = False
    volume_id: str = ""
    device: str = ""
    volume: Volume | None = None


class ServerVolumeList(APIModel):
    disks: list[ServerVolume] = []


class VolumeTypeList(APIModel):
    volume_types: list[str] = []


# ─── Snapshots ───────────────────────────────────────────────────────────


class SnapshotStatus(StrEnum):
    CREATING = "creating"
    AVAILABLE = "available"
    DELETING = "deleting"
    DELETED = "deleted"
    ERROR = "error"


class Snapshot(APIModel):
    id: str
    name: str = ""
    volume_id: str = ""
    size: int = 0
    status: str = ""
    status_reason: str = ""
    description: str = ""
    project: IDName | None = None
    project_id: str = ""
    user: IDName | None = None
    user_id: str = ""
    namespace: str = ""
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class SnapshotList(APIModel):
    snapshots: list[Snapshot] = []


class CreateSnapshotRequest(APIModel):
    name: str = Field(min_length=1)
    volume_id: str = Field(min_length=1)


class UpdateSnapshotRequest(APIModel):
    name: str = Field(min_length=1)
    description: str | None = None

