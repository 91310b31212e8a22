"""
Shared HTTP transport used by every resource client.

Builds the request (bearer auth, JSON headers, JSON body), sends it through an
``httpx.Client``, retries idempotent requests on transient status codes, and
turns the response into either a validated pydantic value or an ``SDKError``.

Usage:
    transport = Transport("https://api.example.com/vps", token, httpx.Client())
    flavors = transport.do(Request("GET", "/api/v1/project/p1/flavors"), FlavorList)
"""

from __future__ import annotations

import functools
import json
import logging
import time
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_jsonable_python

from cloudsdk import __version__
from cloudsdk.backoff import RetryStrategy, is_retryable_method, is_retryable_status_code
from cloudsdk.errors import SDKError, http_error, network_error, timeout_error

USER_AGENT = f"cloudsdk-python/{__version__}"


@dataclass
class Request:
    """One HTTP call: method, path relative to the transport's base URL, and payload."""

    method: str
    path: str
    body: Any = None
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None


@functools.lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def encode_body(body: Any) -> bytes:
    """Serialize a request body, using wire aliases and omitting unset fields."""
    data = to_jsonable_python(body, by_alias=True, exclude_none=True)
    return json.dumps(data).encode()


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop unset query parameters and render booleans the way the API expects."""
    if not params:
        return {}
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


def parse_error(response: httpx.Response) -> SDKError:
    """Translate a failed response into an SDKError.

    The control plane answers with ``{"errorCode", "message", "meta"}``. Anything
    else (HTML from a proxy, an empty body) becomes a plain HTTP error that keeps
    the raw text in ``meta["raw"]``.
    """
    raw = response.text
    try:
        data = response.json()
    except ValueError:
        return http_error(response.status_code, raw)
    if not isinstance(data, dict):
        return http_error(response.status_code, raw)

    error_code = data.get("errorCode") or 0
    if not isinstance(error_code, int):
        return http_error(response.status_code, raw)
    meta = data.get("meta")
    return SDKError(
        status_code=response.status_code,
        error_code=error_code,
        message=str(data.get("message") or ""),
        meta=meta if isinstance(meta, dict) else None,
    )


class Transport:
    """Sends requests to one service base URL on behalf of the resource clients."""

    def __init__(
        self,
        base_url: str,
        token: str,
        http_client: httpx.Client,
        logger: logging.Logger | None = None,
        retry: RetryStrategy | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._http = http_client
        self._log = logger or logging.getLogger(__name__)
        self._retry = retry or RetryStrategy()

    @property
    def retry(self) -> RetryStrategy:
        return self._retry

    def do(self, request: Request, result: Any = None) -> Any:
        """Send ``request`` and decode the response body into ``result``.

        Returns the validated value, or None when ``result`` is None or the
        body is empty. Raises SDKError on any failure.
        """
        attempt = 0
        while True:
            try:
                return self._do_once(request, result)
            except SDKError as e:
                if not self._should_retry(request, e, attempt):
                    raise
                delay = self._retry.duration(attempt)
                self._log.debug(
                    "Retrying %s %s after HTTP %d (attempt %d/%d, sleeping %.2fs)",
                    request.method,
                    request.path,
                    e.status_code,
                    attempt + 1,
                    self._retry.max_retries,
                    delay,
                )
                time.sleep(delay)
                attempt += 1

    def _should_retry(self, request: Request, error: SDKError, attempt: int) -> bool:
        return (
            self._retry.should_retry(attempt)
            and is_retryable_status_code(error.status_code)
            and is_retryable_method(request.method)
        )

    def _headers(self, extra: dict[str, str] | None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if extra:
            headers.update(extra)
        return headers

    def _do_once(self, request: Request, result: Any) -> Any:
        content = encode_body(request.body) if request.body is not None else None
        start = time.monotonic()
        try:
            response = self._http.request(
                request.method,
                self.base_url + request.path,
                params=clean_params(request.params),
                headers=self._headers(request.headers),
                content=content,
            )
        except httpx.TimeoutException as e:
            raise timeout_error(e) from e
        except httpx.TransportError as e:
            raise network_error(str(e), e) from e

        elapsed_ms = (time.monotonic() - start) * 1000
        self._log.debug(
            "%s %s -> %d (%.0fms)", request.method, request.path, response.status_code, elapsed_ms
        )

        if response.status_code >= 400:
            raise parse_error(response)

        if result is None or not response.content:
            return None
        try:
            return _adapter(result).validate_json(response.content)
        except ValidationError as e:
            raise SDKError(
                status_code=response.status_code,
                message="failed to parse response",
                cause=e,
            ) from e
