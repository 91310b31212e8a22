from __future__ import annotations

from cloudsdk.resource import ResourceClient
from cloudsdk.vps.models import VolumeTypeList


class VolumeTypesClient(ResourceClient):
    def list(self) -> list[str]:
        """Names of the volume types this project can create."""
        return self._list("/volume_types", VolumeTypeList, "volume_types")
