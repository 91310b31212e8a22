"""SSH keypairs used to log in to servers."""

from __future__ import annotations

from cloudsdk.resource import ResourceClient, segment
from cloudsdk.vps.models import Keypair, KeypairCreateRequest, KeypairList, KeypairUpdateRequest


def _path(keypair_id: str) -> str:
    return f"/keypairs/{segment(keypair_id, 'keypair ID')}"


class KeypairsClient(ResourceClient):
    def list(self, *, name: str | None = None) -> list[Keypair]:
        return self._list("/keypairs", KeypairList, "keypairs", params={"name": name})

    def create(self, request: KeypairCreateRequest) -> Keypair:
        """Import ``request.public_key``, or have the service generate a pair.

        A generated pair is the only time ``private_key`` is populated; it cannot
        be fetched again.
        """
        return self._call("POST", "/keypairs", Keypair, body=request)

    def get(self, keypair_id: str) -> Keypair:
        return self._call("GET", _path(keypair_id), Keypair)

    def update(self, keypair_id: str, request: KeypairUpdateRequest) -> Keypair:
        return self._call("PUT", _path(keypair_id), Keypair, body=request)

    def delete(self, keypair_id: str) -> None:
        self._call("DELETE", _path(keypair_id))
