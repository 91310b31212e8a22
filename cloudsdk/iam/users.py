from __future__ import annotations

from cloudsdk.iam.models import User
from cloudsdk.resource import ResourceClient


class UsersClient(ResourceClient):
    def get(self) -> User:
        """The user that owns the API token."""
        return self._call("GET", "user", User)
