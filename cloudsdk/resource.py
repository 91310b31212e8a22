"""
Base classes shared by the per-resource clients.

``ResourceClient`` turns one method call into one ``Transport.do`` call under a
fixed path prefix. ``BoundResource`` pairs a decoded record with the clients of
its sub-resources, so ``server.nics.list()`` works on the value returned by
``servers.get()`` while ``server.status`` still reads the record.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from cloudsdk.transport import Request, Transport

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_id(value: str, what: str) -> str:
    """Reject empty identifiers before they turn into a malformed URL."""
    if not value or not value.strip():
        raise ValueError(f"{what} cannot be empty")
    return value


def segment(value: str, what: str) -> str:
    """Validate and escape an ID used as a path segment."""
    return quote(require_id(value, what), safe="")


class ResourceClient:
    """A thin client for one resource type under one path prefix."""

    def __init__(self, transport: Transport, base_path: str) -> None:
        self._transport = transport
        self._base_path = base_path

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def base_path(self) -> str:
        return self._base_path

    def _call(
        self,
        method: str,
        path: str,
        result: Any = None,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        request = Request(method, self._base_path + path, body, params, headers)
        return self._transport.do(request, result)

    def _list(self, path: str, envelope: type[BaseModel], key: str, **kwargs: Any) -> list[Any]:
        """GET a list endpoint and unwrap the items under ``key``."""
        response = self._call("GET", path, envelope, **kwargs)
        if response is None:
            return []
        return list(getattr(response, key))


class BoundResource(Generic[ModelT]):
    """A decoded record bound to operations on its sub-resources.

    Attribute reads fall through to the wrapped record.
    """

    def __init__(self, model: ModelT) -> None:
        self.model = model

    def __getattr__(self, name: str) -> Any:
        if name == "model":
            raise AttributeError(name)
        return getattr(self.model, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.model!r})"
