"""Image tags: individual image versions inside a repository."""

from __future__ import annotations

from cloudsdk.resource import segment
from cloudsdk.vrm.base import VRMResourceClient
from cloudsdk.vrm.models import DownloadTagRequest, Tag, TagList, UpdateTagRequest


class TagsClient(VRMResourceClient):
    def list(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        where: list[str] | None = None,
        namespace: str | None = None,
    ) -> list[Tag]:
        """GET /tags across every repository in the project."""
        return self._list(
            "/tags",
            TagList,
            "tags",
            params=self._page(limit, offset, where),
            headers=self._namespace(namespace),
        )

    def get(self, tag_id: str, *, namespace: str | None = None) -> Tag:
        path = f"/tag/{segment(tag_id, 'tag ID')}"
        return self._call("GET", path, Tag, headers=self._namespace(namespace))

    def update(self, tag_id: str, request: UpdateTagRequest, *, namespace: str | None = None) -> Tag:
        path = f"/tag/{segment(tag_id, 'tag ID')}"
        return self._call("PUT", path, Tag, body=request, headers=self._namespace(namespace))

    def delete(self, tag_id: str, *, namespace: str | None = None) -> None:
        path = f"/tag/{segment(tag_id, 'tag ID')}"
        self._call("DELETE", path, headers=self._namespace(namespace))

    def download(self, tag_id: str, filepath: str, *, namespace: str | None = None) -> None:
        """Export the image behind a tag to ``filepath`` on external storage."""
        path = f"/tag/{segment(tag_id, 'tag ID')}/download"
        body = DownloadTagRequest(filepath=filepath)
        self._call("POST", path, body=body, headers=self._namespace(namespace))
