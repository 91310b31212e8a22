"""IAM: the authenticated user and the projects they belong to."""

from __future__ import annotations

from cloudsdk.iam.client import IAMClient

__all__ = ["IAMClient"]
