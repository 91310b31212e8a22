"""Project resource quotas."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient
from cloudsdk.vps.models import Quota


class QuotasClient(ResourceClient):
    def get(self) -> Quota:
        """GET /quotas. A limit of -1 means unlimited."""
        return self._call("GET", "/quotas", Quota)
