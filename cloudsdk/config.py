"""
Centralized configuration for cloudsdk.

All configuration is loaded from environment variables with sensible defaults.
The ``API_*`` and ``PROJECT_SYS_CODE`` names are accepted as fallbacks so that
existing ``.env`` files keep working.

Usage:
    from cloudsdk.config import get_config
    cfg = get_config()
    print(cfg.base_url)      # "https://api.example.com"
    print(cfg.project)       # "$CLOUDSDK_PROJECT" or "$PROJECT_SYS_CODE"
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CloudConfig:
    """Connection settings for the control plane."""

    base_url: str = ""
    token: str = ""
    project: str = ""  # project ID or system code
    timeout: float = 30.0
    max_retries: int = 3

    @property
    def is_complete(self) -> bool:
        return bool(self.base_url and self.token)


# Singleton
_config: CloudConfig | None = None


def get_config() -> CloudConfig:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _base_url_from_env() -> str:
    base_url = os.environ.get("CLOUDSDK_BASE_URL", "")
    if base_url:
        return base_url.rstrip("/")
    host = os.environ.get("API_HOST", "")
    if not host:
        return ""
    protocol = os.environ.get("API_PROTOCOL", "https")
    return f"{protocol}://{host}".rstrip("/")


def _load_from_env() -> CloudConfig:
    """Load configuration from environment variables."""
    return CloudConfig(
        base_url=_base_url_from_env(),
        token=os.environ.get("CLOUDSDK_TOKEN", os.environ.get("API_TOKEN", "")),
        project=os.environ.get("CLOUDSDK_PROJECT", os.environ.get("PROJECT_SYS_CODE", "")),
        timeout=float(os.environ.get("CLOUDSDK_TIMEOUT", "30")),
        max_retries=int(os.environ.get("CLOUDSDK_MAX_RETRIES", "3")),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
