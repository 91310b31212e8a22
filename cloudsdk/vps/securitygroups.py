"""Security groups and their firewall rules."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.transport import Transport
from cloudsdk.vps.models import (
    SecurityGroup,
    SecurityGroupCreateRequest,
    SecurityGroupList,
    SecurityGroupRule,
    SecurityGroupRuleCreateRequest,
    SecurityGroupUpdateRequest,
)


def _path(security_group_id: str) -> str:
    return f"/security_groups/{segment(security_group_id, 'security group ID')}"


class SecurityGroupRulesClient(ResourceClient):
    def __init__(self, transport: Transport, base_path: str, security_group_id: str) -> None:
        super().__init__(transport, base_path)
        self.security_group_id = security_group_id

    def create(self, request: SecurityGroupRuleCreateRequest) -> SecurityGroupRule:
        path = f"{_path(self.security_group_id)}/rules"
        return self._call("POST", path, SecurityGroupRule, body=request)

    def delete(self, rule_id: str) -> None:
        path = f"{_path(self.security_group_id)}/rules/{segment(rule_id, 'rule ID')}"
        self._call("DELETE", path)


class SecurityGroupsClient(ResourceClient):
    def list(
        self,
        *,
        name: str | None = None,
        user_id: str | None = None,
        detail: bool = False,
    ) -> list[SecurityGroup]:
        params = {"name": name, "user_id": user_id, "detail": True if detail else None}
        return self._list("/security_groups", SecurityGroupList, "security_groups", params=params)

    def create(self, request: SecurityGroupCreateRequest) -> SecurityGroup:
        return self._call("POST", "/security_groups", SecurityGroup, body=request)

    def get(self, security_group_id: str) -> SecurityGroup:
        return self._call("GET", _path(security_group_id), SecurityGroup)

    def update(self, security_group_id: str, request: SecurityGroupUpdateRequest) -> SecurityGroup:
        return self._call("PUT", _path(security_group_id), SecurityGroup, body=request)

    def delete(self, security_group_id: str) -> None:
        self._call("DELETE", _path(security_group_id))

    def rules(self, security_group_id: str) -> SecurityGroupRulesClient:
        return SecurityGroupRulesClient(self._transport, self._base_path, security_group_id)
