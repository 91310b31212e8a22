"""Tests for cloudsdk.cli: command line interface."""

import json

import pytest

from cloudsdk.cli import LISTABLE, main
from cloudsdk.client import Client
from cloudsdk.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(clean_env):
    reset_config()
    yield
    reset_config()


@pytest.fixture
def configured(monkeypatch, client):
    """Point the CLI at the fake API."""
    monkeypatch.setenv("CLOUDSDK_BASE_URL", "https://api.test")
    monkeypatch.setenv("CLOUDSDK_TOKEN", "test-token")
    monkeypatch.setattr(Client, "from_config", classmethod(lambda cls, cfg, **kwargs: client))
    return client


class TestCli:
    def test_version(self, capsys):
        rc = main(["version"])
        assert rc == 0
        out = capsys.readouterr().out
        assert "cloudsdk" in out
        assert "0.3.0" in out

    def test_version_flag(self, capsys):
        rc = main(["--version"])
        assert rc == 0
        assert "cloudsdk" in capsys.readouterr().out

    def test_no_args(self, capsys):
        rc = main([])
        assert rc == 0

    def test_missing_config(self, capsys):
        rc = main(["whoami"])
        assert rc == 1
        assert "CLOUDSDK_TOKEN" in capsys.readouterr().err

    def test_base_url_without_scheme(self, capsys, monkeypatch):
        monkeypatch.setenv("CLOUDSDK_BASE_URL", "api.example.com")
        monkeypatch.setenv("CLOUDSDK_TOKEN", "tok")
        rc = main(["whoami"])
        assert rc == 1
        assert "Error: base URL must include scheme" in capsys.readouterr().err

    def test_listable_resources(self):
        assert "servers" in LISTABLE
        assert LISTABLE["repositories"][0] == "vrm"


class TestCommands:
    def test_whoami(self, api, configured, capsys):
        api.iam("GET", "user", {"userId": "u1", "account": "alice@example.com"})
        rc = main(["whoami"])
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert out["userId"] == "u1"
        assert out["account"] == "alice@example.com"

    def test_projects(self, api, configured, capsys):
        api.iam("GET", "projects", {"projects": [{"project": {"projectId": "p1"}}], "total": 1})
        rc = main(["projects", "--limit", "5"])
        assert rc == 0
        assert api.last.url.params["limit"] == "5"
        out = json.loads(capsys.readouterr().out)
        assert out[0]["project"]["projectId"] == "p1"

    def test_list_servers(self, api, configured, capsys):
        api.iam("GET", "project/proj-123", {"projectId": "proj-123"})
        api.vps("GET", "/servers", {"servers": [{"id": "s1", "name": "web", "status": "ACTIVE"}]})
        rc = main(["list", "servers", "--project", "proj-123"])
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert [s["id"] for s in out] == ["s1"]

    def test_list_networks_unwraps_bound_resources(self, api, configured, capsys):
        api.iam("GET", "project/proj-123", {"projectId": "proj-123"})
        api.vps("GET", "/networks", {"networks": [{"id": "n1", "name": "default", "cidr": "10.0.0.0/24"}]})
        rc = main(["list", "networks", "-p", "proj-123"])
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert out[0]["cidr"] == "10.0.0.0/24"

    def test_list_volume_types(self, api, configured, capsys):
        api.iam("GET", "project/proj-123", {"projectId": "proj-123"})
        api.vps("GET", "/volume_types", {"volume_types": ["SSD", "HDD"]})
        rc = main(["list", "volume-types", "-p", "proj-123"])
        assert rc == 0
        assert json.loads(capsys.readouterr().out) == ["SSD", "HDD"]

    def test_project_from_env(self, api, configured, capsys, monkeypatch):
        monkeypatch.setenv("CLOUDSDK_PROJECT", "proj-123")
        api.iam("GET", "project/proj-123", {"projectId": "proj-123"})
        api.vps("GET", "/quotas", {"vm": {"limit": 10, "usage": 2}})
        rc = main(["quotas"])
        assert rc == 0
        out = json.loads(capsys.readouterr().out)
        assert out["vm"] == {"limit": 10, "usage": 2}

    def test_missing_project(self, configured, capsys):
        rc = main(["quotas"])
        assert rc == 1
        assert "--project" in capsys.readouterr().err

    def test_api_error(self, api, configured, capsys):
        api.iam("GET", "user", {"errorCode": 401001, "message": "invalid token"}, status=401)
        rc = main(["whoami"])
        assert rc == 1
        assert "HTTP 401 (code 401001): invalid token" in capsys.readouterr().err

    def test_env_file(self, api, client, capsys, monkeypatch, tmp_path):
        # registered so monkeypatch restores them after load_dotenv overrides
        monkeypatch.setenv("CLOUDSDK_BASE_URL", "")
        monkeypatch.setenv("CLOUDSDK_TOKEN", "")
        monkeypatch.setattr(Client, "from_config", classmethod(lambda cls, cfg, **kwargs: client))
        env_file = tmp_path / ".env"
        env_file.write_text("CLOUDSDK_BASE_URL=https://api.test\nCLOUDSDK_TOKEN=from-file\n")
        api.iam("GET", "user", {"userId": "u1"})
        rc = main(["--env-file", str(env_file), "whoami"])
        assert rc == 0
        assert json.loads(capsys.readouterr().out)["userId"] == "u1"
