"""Pagination and namespace handling shared by the VRM clients."""

from __future__ import annotations

from typing import Any

from cloudsdk.resource import ResourceClient


class VRMResourceClient(ResourceClient):
    @staticmethod
    def _namespace(namespace: str | None) -> dict[str, str] | None:
        """Every VRM call can be scoped with the X-Namespace header."""
        if not namespace:
            return None
        return {"X-Namespace": namespace}

    @staticmethod
    def _page(
        limit: int | None, offset: int | None, where: list[str] | None
    ) -> dict[str, Any]:
        """Query parameters for a paged list. ``limit=-1`` returns everything."""
        if limit is not None and limit < -1:
            raise ValueError("limit must be >= -1")
        if offset is not None and offset < 0:
            raise ValueError("offset must be >= 0")
        return {"limit": limit, "offset": offset, "where": list(where) if where else None}
