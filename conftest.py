"""
Root-level shared test fixtures.

Inherited by tests/ and the per-service suites under cloudsdk/*/tests. No test
talks to a real control plane: ``api`` is an in-process fake served through
``httpx.MockTransport``, and ``clock`` replaces sleeping with a virtual clock.
"""

from __future__ import annotations

import json

import httpx
import pytest

import cloudsdk.transport
import cloudsdk.waiter
from cloudsdk.client import Client

PROJECT_ID = "proj-123"


class FakeAPI:
    """Canned responses keyed by (method, URL path).

    Adding several responses for one route serves them in order; the last one
    keeps being served. Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[tuple]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, body=None, *, status=200, text=None, error=None):
        self.routes.setdefault((method, path), []).append((status, body, text, error))

    def vps(self, method, path, body=None, **kwargs):
        self.add(method, f"/vps/api/v1/project/{PROJECT_ID}{path}", body, **kwargs)

    def vrm(self, method, path, body=None, **kwargs):
        self.add(method, f"/vrm/api/v1/project/{PROJECT_ID}{path}", body, **kwargs)

    def iam(self, method, path, body=None, **kwargs):
        self.add(method, f"/iam/api/v1/{path}", body, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responses = self.routes.get((request.method, request.url.path))
        if not responses:
            return httpx.Response(
                404,
                json={"errorCode": 404000, "message": f"no route {request.url.path}"},
            )
        status, body, text, error = responses.pop(0) if len(responses) > 1 else responses[0]
        if error is not None:
            raise error
        if text is not None:
            return httpx.Response(status, text=text)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)

    def count(self, method, path_suffix) -> int:
        return sum(
            1
            for r in self.requests
            if r.method == method and r.url.path.endswith(path_suffix)
        )


class FakeClock:
    """Stands in for the ``time`` module: sleeping advances ``now``."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clean_env(monkeypatch):
    """Remove connection env vars that leak between tests."""
    for key in [
        "CLOUDSDK_BASE_URL",
        "CLOUDSDK_TOKEN",
        "CLOUDSDK_PROJECT",
        "CLOUDSDK_TIMEOUT",
        "CLOUDSDK_MAX_RETRIES",
        "API_PROTOCOL",
        "API_HOST",
        "API_TOKEN",
        "PROJECT_SYS_CODE",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(cloudsdk.waiter, "time", fake)
    monkeypatch.setattr(cloudsdk.transport, "time", fake)
    return fake


@pytest.fixture
def api():
    return FakeAPI()


@pytest.fixture
def client(api, clock):
    http = httpx.Client(transport=httpx.MockTransport(api.handler))
    with Client("https://api.test", "test-token", http_client=http) as c:
        yield c
    http.close()


@pytest.fixture
def project(client):
    return client.project(PROJECT_ID, resolve=False)


@pytest.fixture
def vps(project):
    return project.vps


@pytest.fixture
def vrm(project):
    return project.vrm
