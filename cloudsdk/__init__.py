"""
cloudsdk: Python client for the VPS, VRM and IAM control-plane APIs.

Public API:
    Client(base_url, token)       → root client
    client.iam                    → users, projects
    client.project(id_or_code)    → .vps (servers, volumes, ...) and .vrm (images)
    SDKError                      → every failure the SDK raises
"""

__version__ = "0.3.0"

from cloudsdk.client import Client, ProjectClient  # noqa: E402
from cloudsdk.errors import (  # noqa: E402
    ProjectLookupError,
    ResourceStateError,
    SDKError,
    WaitTimeoutError,
)

__all__ = [
    "Client",
    "ProjectClient",
    "ProjectLookupError",
    "ResourceStateError",
    "SDKError",
    "WaitTimeoutError",
    "__version__",
]
