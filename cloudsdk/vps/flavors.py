"""Flavors: the instance sizes a server can be created with."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.vps.models import Flavor, FlavorList


class FlavorsClient(ResourceClient):
    def list(
        self,
        *,
        name: str | None = None,
        public: bool | None = None,
        tag: str | None = None,
    ) -> list[Flavor]:
        """GET /flavors, optionally filtered by name, visibility or tag."""
        params = {"name": name, "public": public, "tag": tag}
        return self._list("/flavors", FlavorList, "flavors", params=params)

    def get(self, flavor_id: str) -> Flavor:
        return self._call("GET", f"/flavors/{segment(flavor_id, 'flavor ID')}", Flavor)
