"""
cloudsdk CLI: quick read-only access to the control plane.

Usage:
    cloudsdk version                 # Show version
    cloudsdk whoami                  # Show the user that owns the token
    cloudsdk projects                # List project memberships
    cloudsdk quotas -p CODE          # Show project quotas
    cloudsdk list servers -p CODE    # List a resource type as JSON

Connection settings come from the environment (see cloudsdk.config); use
``--env-file`` to load them from a dotenv file first.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel

from cloudsdk.errors import SDKError

# resource name -> (service, function returning the records)
LISTABLE: dict[str, tuple[str, Callable[[Any], list[Any]]]] = {
    "flavors": ("vps", lambda vps: vps.flavors.list()),
    "floating-ips": ("vps", lambda vps: vps.floating_ips.list()),
    "keypairs": ("vps", lambda vps: vps.keypairs.list()),
    "networks": ("vps", lambda vps: vps.networks.list()),
    "routers": ("vps", lambda vps: vps.routers.list()),
    "security-groups": ("vps", lambda vps: vps.security_groups.list()),
    "servers": ("vps", lambda vps: vps.servers.list()),
    "snapshots": ("vps", lambda vps: vps.snapshots.list()),
    "volumes": ("vps", lambda vps: vps.volumes.list()),
    "volume-types": ("vps", lambda vps: vps.volume_types.list()),
    "repositories": ("vrm", lambda vrm: vrm.repositories.list()),
    "tags": ("vrm", lambda vrm: vrm.tags.list()),
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cloudsdk",
        description="cloudsdk: command-line access to the VPS, VRM and IAM APIs.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--env-file", type=str, help="Load settings from a dotenv file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("version", help="Show version")
    subparsers.add_parser("whoami", help="Show the authenticated user")

    projects_parser = subparsers.add_parser("projects", help="List project memberships")
    projects_parser.add_argument("--limit", type=int, help="Maximum number of projects")
    projects_parser.add_argument("--order", type=str, help="Sort field, e.g. displayName")

    quotas_parser = subparsers.add_parser("quotas", help="Show project quotas")
    quotas_parser.add_argument("--project", "-p", type=str, help="Project ID or code")

    list_parser = subparsers.add_parser("list", help="List resources in a project")
    list_parser.add_argument("resource", choices=sorted(LISTABLE), help="Resource type")
    list_parser.add_argument("--project", "-p", type=str, help="Project ID or code")

    args = parser.parse_args(argv)

    if args.version or args.command == "version":
        from cloudsdk import __version__

        print(f"cloudsdk {__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if args.env_file:
        load_dotenv(args.env_file, override=True)

    try:
        if args.command == "whoami":
            return _cmd_whoami()
        elif args.command == "projects":
            return _cmd_projects(args)
        elif args.command == "quotas":
            return _cmd_quotas(args)
        elif args.command == "list":
            return _cmd_list(args)
    except (SDKError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def _client():
    from cloudsdk.client import Client
    from cloudsdk.config import get_config, reset_config

    # pick up anything --env-file just loaded
    reset_config()
    cfg = get_config()
    if not cfg.is_complete:
        return None, cfg
    return Client.from_config(cfg), cfg


def _missing_config() -> int:
    print(
        "Error: set CLOUDSDK_BASE_URL (or API_PROTOCOL/API_HOST) and CLOUDSDK_TOKEN (or API_TOKEN).",
        file=sys.stderr,
    )
    return 1


def _dump(value: Any) -> None:
    def to_plain(item: Any) -> Any:
        if isinstance(item, BaseModel):
            return item.model_dump(mode="json", by_alias=True)
        if hasattr(item, "model") and isinstance(item.model, BaseModel):
            return to_plain(item.model)
        return item

    if isinstance(value, list):
        data = [to_plain(v) for v in value]
    else:
        data = to_plain(value)
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _cmd_whoami() -> int:
    client, _ = _client()
    if client is None:
        return _missing_config()
    with client:
        _dump(client.iam.users.get())
    return 0


def _cmd_projects(args: argparse.Namespace) -> int:
    client, _ = _client()
    if client is None:
        return _missing_config()
    with client:
        _dump(client.iam.projects.list(limit=args.limit, order=args.order))
    return 0


def _project(client, args: argparse.Namespace, cfg):
    project = args.project or cfg.project
    if not project:
        print("Error: pass --project or set CLOUDSDK_PROJECT (or PROJECT_SYS_CODE).", file=sys.stderr)
        return None
    return client.project(project)


def _cmd_quotas(args: argparse.Namespace) -> int:
    client, cfg = _client()
    if client is None:
        return _missing_config()
    with client:
        project = _project(client, args, cfg)
        if project is None:
            return 1
        _dump(project.vps.quotas.get())
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    client, cfg = _client()
    if client is None:
        return _missing_config()
    with client:
        project = _project(client, args, cfg)
        if project is None:
            return 1
        service, fetch = LISTABLE[args.resource]
        _dump(fetch(getattr(project, service)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
