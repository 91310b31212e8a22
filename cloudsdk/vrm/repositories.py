"""
Image repositories: named collections of image tags (versions).

Usage:
    repo = vrm.repositories.upload(UploadToNewRepositoryRequest(
        name="cirros", operating_system="linux", version="v1",
        disk_format="qcow2", container_format="bare", filepath=url,
    ))
    tag = repo.tags[0]           # the uploaded version
    repo_tags = repo.tag_client.list()
"""

from __future__ import annotations

import logging

from cloudsdk.errors import SDKError
from cloudsdk.resource import BoundResource, segment
from cloudsdk.transport import Transport
from cloudsdk.vrm.base import VRMResourceClient
from cloudsdk.vrm.models import (
    CreateRepositoryRequest,
    CreateTagRequest,
    Repository,
    RepositoryList,
    RepositoryTagResponse,
    SnapshotRequest,
    Tag,
    TagList,
    UpdateRepositoryRequest,
    UploadRequest,
)

logger = logging.getLogger(__name__)


class RepositoryTagsClient(VRMResourceClient):
    """Tags of one repository: ``/repository/{id}/tags``."""

    def __init__(self, transport: Transport, base_path: str, repository_id: str) -> None:
        super().__init__(transport, base_path)
        self.repository_id = repository_id

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        where: list[str] | None = None,
        namespace: str | None = None,
    ) -> list[Tag]:
        path = f"/repository/{segment(self.repository_id, 'repository ID')}/tags"
        return self._list(
            path,
            TagList,
            "tags",
            params=self._page(limit, offset, where),
            headers=self._namespace(namespace),
        )

    def create(self, request: CreateTagRequest, *, namespace: str | None = None) -> Tag:
        path = f"/repository/{segment(self.repository_id, 'repository ID')}/tag"
        return self._call("POST", path, Tag, body=request, headers=self._namespace(namespace))


class RepositoryResource(BoundResource[Repository]):
    """A repository bound to its tag operations.

    ``tags`` still reads the repository's embedded tag list; the tag endpoints
    live under ``tag_client``.
    """

    def __init__(self, repository: Repository, transport: Transport, base_path: str) -> None:
        super().__init__(repository)
        self.tag_client = RepositoryTagsClient(transport, base_path, repository.id)


class RepositoriesClient(VRMResourceClient):
    def _bind(self, repository: Repository) -> RepositoryResource:
        return RepositoryResource(repository, self._transport, self._base_path)

    def _bind_with_tag(self, response: RepositoryTagResponse | None, what: str) -> RepositoryResource:
        if response is None or response.repository is None:
            raise SDKError(message=f"{what} response missing repository data")
        repository = response.repository
        if response.tag is not None:
            repository.tags.append(response.tag)
        return self._bind(repository)

    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        where: list[str] | None = None,
        namespace: str | None = None,
    ) -> list[RepositoryResource]:
        """GET /repositories.

        ``where`` takes filter expressions such as ``"os=linux"``; each is sent
        as its own ``where`` parameter.
        """
        repositories = self._list(
            "/repositories",
            RepositoryList,
            "repositories",
            params=self._page(limit, offset, where),
            headers=self._namespace(namespace),
        )
        return [self._bind(r) for r in repositories]

    def create(
        self, request: CreateRepositoryRequest, *, namespace: str | None = None
    ) -> RepositoryResource:
        repository = self._call(
            "POST", "/repository", Repository, body=request, headers=self._namespace(namespace)
        )
        return self._bind(repository)

    def get(self, repository_id: str, *, namespace: str | None = None) -> RepositoryResource:
        path = f"/repository/{segment(repository_id, 'repository ID')}"
        return self._bind(self._call("GET", path, Repository, headers=self._namespace(namespace)))

    def update(
        self,
        repository_id: str,
        request: UpdateRepositoryRequest,
        *,
        namespace: str | None = None,
    ) -> RepositoryResource:
        path = f"/repository/{segment(repository_id, 'repository ID')}"
        repository = self._call(
            "PUT", path, Repository, body=request, headers=self._namespace(namespace)
        )
        return self._bind(repository)

    def delete(self, repository_id: str, *, namespace: str | None = None) -> None:
        path = f"/repository/{segment(repository_id, 'repository ID')}"
        self._call("DELETE", path, headers=self._namespace(namespace))

    def snapshot(
        self,
        server_id: str,
        request: SnapshotRequest,
        *,
        namespace: str | None = None,
    ) -> RepositoryResource:
        """Capture a server's root disk as a new tag (POST /server/{id}/snapshot).

        The returned repository includes the new tag in ``tags``.
        """
        path = f"/server/{segment(server_id, 'server ID')}/snapshot"
        response = self._call(
            "POST", path, RepositoryTagResponse, body=request, headers=self._namespace(namespace)
        )
        resource = self._bind_with_tag(response, "snapshot")
        logger.info("Snapshot of server %s stored in repository %s", server_id, resource.id)
        return resource

    def upload(self, request: UploadRequest, *, namespace: str | None = None) -> RepositoryResource:
        """Import an image from ``request.filepath`` (POST /upload).

        The request type picks the target: a new repository, a new tag of an
        existing repository, or an existing tag.
        """
        response = self._call(
            "POST", "/upload", RepositoryTagResponse, body=request, headers=self._namespace(namespace)
        )
        resource = self._bind_with_tag(response, "upload")
        logger.info("Uploaded image into repository %s", resource.id)
        return resource

    def tags(self, repository_id: str) -> RepositoryTagsClient:
        return RepositoryTagsClient(self._transport, self._base_path, repository_id)
