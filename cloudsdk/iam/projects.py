"""Projects the authenticated user belongs to."""

from __future__ import annotations

from cloudsdk.iam.models import ProjectDetail, ProjectList, ProjectMembership
from cloudsdk.resource import ResourceClient, require_id


class ProjectsClient(ResourceClient):
    def list(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        order: str | None = None,
    ) -> list[ProjectMembership]:
        """GET /projects. ``order`` is a field name such as ``displayName``."""
        params = {"offset": offset, "limit": limit, "order": order}
        return self._list("projects", ProjectList, "projects", params=params)

    def get(self, project_id: str) -> ProjectDetail:
        require_id(project_id, "project ID")
        return self._call("GET", f"project/{project_id}", ProjectDetail)
