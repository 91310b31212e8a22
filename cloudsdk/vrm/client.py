"""Project-scoped entry point to the VRM (image repository) API."""

from __future__ import annotations

from functools import cached_property

from cloudsdk.transport import Transport
from cloudsdk.vrm.repositories import RepositoriesClient
from cloudsdk.vrm.tags import TagsClient


class VRMClient:
    def __init__(self, transport: Transport, project_id: str) -> None:
        self._transport = transport
        self.project_id = project_id
        self.base_path = f"/api/v1/project/{project_id}"

    @cached_property
    def repositories(self) -> RepositoriesClient:
        return RepositoriesClient(self._transport, self.base_path)

    @cached_property
    def tags(self) -> TagsClient:
        return TagsClient(self._transport, self.base_path)
