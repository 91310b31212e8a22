"""
Root client: one authenticated connection to the control plane.

Usage:
    from cloudsdk import Client

    with Client("https://api.example.com", token) as client:
        me = client.iam.users.get()
        project = client.project("my-project-code")
        for server in project.vps.servers.list():
            print(server.name, server.status)
"""

from __future__ import annotations

import logging
from functools import cached_property
from urllib.parse import urlparse

import httpx

from cloudsdk.backoff import RetryStrategy
from cloudsdk.config import CloudConfig
from cloudsdk.errors import ProjectLookupError, SDKError
from cloudsdk.iam import IAMClient
from cloudsdk.transport import Transport
from cloudsdk.vps import VPSClient
from cloudsdk.vrm import VRMClient

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ProjectClient:
    """Service clients scoped to one resolved project."""

    def __init__(self, client: Client, project_id: str) -> None:
        self._client = client
        self.project_id = project_id

    @cached_property
    def vps(self) -> VPSClient:
        return VPSClient(self._client.transport("vps"), self.project_id)

    @cached_property
    def vrm(self) -> VRMClient:
        return VRMClient(self._client.transport("vrm"), self.project_id)

    def __repr__(self) -> str:
        return f"ProjectClient(project_id={self.project_id!r})"


class Client:
    """Holds the base URL, token and HTTP connection pool shared by every service."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
        retry: RetryStrategy | None = None,
    ) -> None:
        parsed = urlparse(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("base URL must include scheme (e.g., https://)")
        if not token:
            raise ValueError("token cannot be empty")

        self.base_url = base_url.rstrip("/")
        self._token = token
        self._owns_http = http_client is None
        self.http_client = http_client or httpx.Client(timeout=timeout)
        self._logger = logger
        self._retry = retry or RetryStrategy()
        self._transports: dict[str, Transport] = {}

    @classmethod
    def from_config(cls, config: CloudConfig, **kwargs) -> Client:
        """Build a client from ``CloudConfig`` (see ``cloudsdk.config.get_config``)."""
        kwargs.setdefault("timeout", config.timeout)
        kwargs.setdefault("retry", RetryStrategy(max_retries=config.max_retries))
        return cls(config.base_url, config.token, **kwargs)

    def transport(self, service: str) -> Transport:
        """The transport for ``{base_url}/{service}``, created on first use."""
        if service not in self._transports:
            self._transports[service] = Transport(
                f"{self.base_url}/{service}",
                self._token,
                self.http_client,
                logger=self._logger,
                retry=self._retry,
            )
        return self._transports[service]

    @cached_property
    def iam(self) -> IAMClient:
        return IAMClient(self.transport("iam"))

    def project(self, id_or_code: str, *, resolve: bool = True) -> ProjectClient:
        """Scope to a project by ID or by its ``projectSysCode``.

        With ``resolve`` (the default) the value is looked up through IAM: first
        as a project ID, then as a system code among the caller's memberships.
        Pass ``resolve=False`` to use a known project ID without a round trip.
        """
        if not id_or_code:
            raise ValueError("project ID or code cannot be empty")
        if not resolve:
            return ProjectClient(self, id_or_code)
        return ProjectClient(self, self._resolve_project_id(id_or_code))

    def _resolve_project_id(self, id_or_code: str) -> str:
        try:
            return self.iam.projects.get(id_or_code).project_id
        except SDKError as e:
            logger.debug("%s is not a project ID (%s), trying as project code", id_or_code, e)

        memberships = self.iam.projects.list()
        matches = [
            m.project.project_id
            for m in memberships
            if m.project is not None and m.project.sys_code == id_or_code
        ]
        if not matches:
            raise ProjectLookupError(
                f"no project found with projectSysCode {id_or_code}, please use projectID instead"
            )
        if len(matches) > 1:
            raise ProjectLookupError(
                f"multiple projects found with projectSysCode {id_or_code}, "
                "please use projectID instead"
            )
        logger.info("Resolved project code %s to %s", id_or_code, matches[0])
        return matches[0]

    def close(self) -> None:
        """Close the HTTP connection pool if this client created it."""
        if self._owns_http:
            self.http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
