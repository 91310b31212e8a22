"""Entry point to the IAM API. Not project-scoped."""

from __future__ import annotations

from functools import cached_property

from cloudsdk.iam.projects import ProjectsClient
from cloudsdk.iam.users import UsersClient
from cloudsdk.transport import Transport

BASE_PATH = "/api/v1/"


class IAMClient:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @cached_property
    def users(self) -> UsersClient:
        return UsersClient(self._transport, BASE_PATH)

    @cached_property
    def projects(self) -> ProjectsClient:
        return ProjectsClient(self._transport, BASE_PATH)
