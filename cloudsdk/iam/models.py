"""Pydantic response models for the IAM API."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from cloudsdk.models import APIModel, Timestamp


class TenantRole(StrEnum):
    MEMBER = "TENANT_MEMBER"
    ADMIN = "TENANT_ADMIN"
    OWNER = "TENANT_OWNER"


class Permission(APIModel):
    id: str = ""
    label: str = ""


class Project(APIModel):
    project_id: str = Field(alias="projectId")
    display_name: str = Field(default="", alias="displayName")
    description: str = ""
    extra: dict[str, Any] = {}
    namespace: str = ""
    frozen: bool = False
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")

    @property
    def sys_code(self) -> str:
        """The short project code from ``extra.iservice.projectSysCode``, if any."""
        iservice = self.extra.get("iservice")
        if not isinstance(iservice, dict):
            return ""
        code = iservice.get("projectSysCode")
        return code if isinstance(code, str) else ""


class ProjectDetail(Project):
    """A single project with the caller's permissions on it."""

    global_permission: Permission | None = Field(default=None, alias="globalPermission")
    user_permission: Permission | None = Field(default=None, alias="userPermission")


class ProjectMembership(APIModel):
    """The caller's membership in one project."""

    project: Project | None = None
    global_permission_id: str = Field(default="", alias="globalPermissionId")
    global_permission: Permission | None = Field(default=None, alias="globalPermission")
    user_permission_id: str = Field(default="", alias="userPermissionId")
    user_permission: Permission | None = Field(default=None, alias="userPermission")
    frozen: bool = False
    tenant_role: str = Field(default="", alias="tenantRole")
    extra: dict[str, Any] = {}


class ProjectList(APIModel):
    projects: list[ProjectMembership] = []
    total: int = 0


class User(APIModel):
    user_id: str = Field(alias="userId")
    account: str = ""
    display_name: str = Field(default="", alias="displayName")
    description: str = ""
    extra: dict[str, Any] = {}
    namespace: str = ""
    email: str = ""
    frozen: bool = False
    mfa: bool = False
    created_at: Timestamp = Field(default=None, alias="createdAt")
    updated_at: Timestamp = Field(default=None, alias="updatedAt")
    last_login_at: Timestamp = Field(default=None, alias="lastLoginAt")
