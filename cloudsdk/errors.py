"""
Error types raised by the SDK.

Every failure that comes back from the control plane, or that happens on the
way there, surfaces as an ``SDKError``. HTTP failures carry the status code and
the service's numeric error code; client-side failures (network errors and
timeouts) use status 0 and record a ``category`` in ``meta``.

Usage:
    from cloudsdk.errors import SDKError

    try:
        vps.servers.get("srv-1")
    except SDKError as e:
        if e.is_not_found:
            ...
"""

from __future__ import annotations

from typing import Any


class SDKError(Exception):
    """An error returned by the control plane or raised by the transport."""

    def __init__(
        self,
        status_code: int = 0,
        error_code: int = 0,
        message: str = "",
        meta: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.meta = meta or {}
        self.cause = cause
        super().__init__(str(self))
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.status_code == 0:
            return f"SDK error: {self.message}"
        if self.error_code != 0:
            return f"HTTP {self.status_code} (code {self.error_code}): {self.message}"
        return f"HTTP {self.status_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"error_code={self.error_code}, message={self.message!r})"
        )

    def matches(self, other: object) -> bool:
        """True when ``other`` is an SDKError with the same status and error code."""
        if not isinstance(other, SDKError):
            return False
        return self.status_code == other.status_code and self.error_code == other.error_code

    @property
    def category(self) -> str | None:
        return self.meta.get("category")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class WaitTimeoutError(SDKError):
    """A waiter exceeded its maximum wait duration."""

    def __init__(self, message: str = "wait timeout: maximum wait duration exceeded") -> None:
        super().__init__(message=message, meta={"category": "timeout"})


class ResourceStateError(SDKError):
    """A waited-on resource reached a failure state instead of the target."""

    def __init__(self, message: str, status: str = "") -> None:
        super().__init__(message=message, meta={"category": "state", "status": status})


class ProjectLookupError(SDKError):
    """A project ID or system code could not be resolved to exactly one project."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, meta={"category": "lookup"})


def network_error(message: str, cause: BaseException | None = None) -> SDKError:
    return SDKError(
        message=f"network error: {message}",
        meta={"category": "network"},
        cause=cause,
    )


def timeout_error(cause: BaseException | None = None) -> SDKError:
    return SDKError(message="request timeout", meta={"category": "timeout"}, cause=cause)


def http_error(status_code: int, raw_body: str) -> SDKError:
    """Build an error for a failed response whose body is not a structured error."""
    return SDKError(
        status_code=status_code,
        message=f"HTTP {status_code}",
        meta={"raw": raw_body},
    )
