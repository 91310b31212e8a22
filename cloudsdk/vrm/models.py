"""Pydantic request/response models for the VRM (image repository) API."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from cloudsdk.models import APIModel, Timestamp


class OperatingSystem(StrEnum):
    LINUX = "linux"
    WINDOWS = "windows"


class TagType(StrEnum):
    COMMON = "common"
    INCREASE = "increase"


class TagStatus(StrEnum):
    QUEUED = "queued"
    SAVING = "saving"
    IMPORTING = "importing"
    CREATING = "creating"
    RESTORING = "restoring"
    ACTIVE = "active"
    KILLED = "killed"
    PENDING_DELETE = "pending_delete"
    DEACTIVATED = "deactivated"
    AVAILABLE = "available"
    BACKING_UP = "backing-up"
    DELETING = "deleting"
    ERROR = "error"
    UNMANAGING = "unmanaging"
    ERROR_DELETING = "error_deleting"
    DELETED = "deleted"


class DiskFormat(StrEnum):
    AMI = "ami"
    ARI = "ari"
    AKI = "aki"
    VHD = "vhd"
    VMDK = "vmdk"
    RAW = "raw"
    QCOW2 = "qcow2"
    VDI = "vdi"
    ISO = "iso"


class ContainerFormat(StrEnum):
    AMI = "ami"
    ARI = "ari"
    AKI = "aki"
    BARE = "bare"
    OVF = "ovf"


def _not_blank(value: str, field: str) -> str:
    if not value.strip():
        raise ValueError(f"{field} is required and must not be empty")
    return value


# ─── Records ─────────────────────────────────────────────────────────────


class Owner(APIModel):
    """A user or project reference as VRM reports it."""

    id: str = ""
    name: str = ""
    account: str = ""
    display_name: str = Field(default="", alias="displayName")


class Repository(APIModel):
    id: str
    name: str = ""
    namespace: str = ""
    operating_system: str = Field(default="", alias="operatingSystem")
    description: str = ""
    tags: list[Tag] = []
    count: int = 0
    creator: Owner | None = None
    project: Owner | None = None
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


class Tag(APIModel):
    id: str
    name: str = ""
    repository_id: str = Field(default="", alias="repositoryID")
    type: str = ""
    size: int = 0
    status: str = ""
    extra: dict[str, Any] = {}
    repository: Repository | None = None
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")


Repository.model_rebuild()


class RepositoryList(APIModel):
    repositories: list[Repository] = []
    total: int = 0


class TagList(APIModel):
    tags: list[Tag] = []
    total: int = 0


class RepositoryTagResponse(APIModel):
    """Snapshot and upload both answer with the repository and the new tag."""

    repository: Repository | None = None
    tag: Tag | None = None


# ─── Repository requests ─────────────────────────────────────────────────


class CreateRepositoryRequest(APIModel):
    name: str
    operating_system: OperatingSystem = Field(alias="operatingSystem")
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        return _not_blank(v, "name")


class UpdateRepositoryRequest(APIModel):
    description: str | None = None


class SnapshotToNewRepositoryRequest(APIModel):
    """Snapshot a server into a new repository named ``name``."""

    version: str = Field(min_length=1)
    name: str = Field(min_length=1)
    operating_system: OperatingSystem = Field(alias="operatingSystem")
    description: str | None = None


class SnapshotToExistingRepositoryRequest(APIModel):
    """Snapshot a server as a new tag of an existing repository."""

    version: str = Field(min_length=1)
    repository_id: str = Field(min_length=1, alias="repositoryId")


SnapshotRequest = SnapshotToNewRepositoryRequest | SnapshotToExistingRepositoryRequest


class UploadToNewRepositoryRequest(APIModel):
    name: str = Field(min_length=1)
    operating_system: OperatingSystem = Field(alias="operatingSystem")
    version: str = Field(min_length=1)
    type: TagType = TagType.COMMON
    disk_format: DiskFormat = Field(alias="diskFormat")
    container_format: ContainerFormat = Field(alias="containerFormat")
    filepath: str = Field(min_length=1)
    description: str | None = None


class UploadToExistingRepositoryRequest(APIModel):
    repository_id: str = Field(min_length=1, alias="repositoryId")
    version: str = Field(min_length=1)
    type: TagType = TagType.COMMON
    disk_format: DiskFormat = Field(alias="diskFormat")
    container_format: ContainerFormat = Field(alias="containerFormat")
    filepath: str = Field(min_length=1)


class UploadToExistingTagRequest(APIModel):
    """Replace the image behind an existing tag."""

    tag_id: str = Field(min_length=1, alias="tagId")
    filepath: str = Field(min_length=1)


UploadRequest = (
    UploadToNewRepositoryRequest | UploadToExistingRepositoryRequest | UploadToExistingTagRequest
)


# ─── Tag requests ────────────────────────────────────────────────────────


class CreateTagRequest(APIModel):
    name: str = Field(min_length=1)
    type: TagType = TagType.COMMON
    disk_format: DiskFormat = Field(alias="diskFormat")
    container_format: ContainerFormat = Field(alias="containerFormat")


class UpdateTagRequest(APIModel):
    name: str | None = None


class DownloadTagRequest(APIModel):
    filepath: str = Field(min_length=1)
