"""Tests for networks, routers, security groups, floating IPs, keypairs, flavors and quotas."""

import pytest
from pydantic import ValidationError

from cloudsdk.vps.models import (
    Direction,
    FloatingIPCreateRequest,
    FloatingIPUpdateRequest,
    KeypairCreateRequest,
    KeypairUpdateRequest,
    NetworkCreateRequest,
    NetworkUpdateRequest,
    Protocol,
    QuotaDetail,
    RouterCreateRequest,
    RouterUpdateRequest,
    SecurityGroupCreateRequest,
    SecurityGroupRuleCreateRequest,
    SecurityGroupUpdateRequest,
)
from cloudsdk.vps.networks import NetworkResource
from cloudsdk.vps.routers import RouterResource


class TestNetworks:
    def test_list_binds_ports(self, api, vps):
        api.vps("GET", "/networks", {"networks": [{"id": "net-1", "cidr": "10.0.0.0/24"}]})
        networks = vps.networks.list(router_id="rt-1")
        assert isinstance(networks[0], NetworkResource)
        assert networks[0].cidr == "10.0.0.0/24"
        assert networks[0].ports.network_id == "net-1"
        assert api.last.url.params["router_id"] == "rt-1"

    def test_create(self, api, vps):
        api.vps("POST", "/networks", {"id": "net-2", "name": "backend", "cidr": "10.1.0.0/24"})
        network = vps.networks.create(NetworkCreateRequest(name="backend", cidr="10.1.0.0/24"))
        assert network.id == "net-2"
        assert api.last_json() == {"name": "backend", "cidr": "10.1.0.0/24"}

    def test_create_needs_cidr(self):
        with pytest.raises(ValidationError):
            NetworkCreateRequest(name="backend", cidr="")

    def test_update_and_delete(self, api, vps):
        api.vps("PUT", "/networks/net-1", {"id": "net-1", "description": "frontend"})
        api.vps("DELETE", "/networks/net-1", status=204)
        network = vps.networks.update("net-1", NetworkUpdateRequest(description="frontend"))
        assert network.description == "frontend"
        vps.networks.delete("net-1")

    def test_ports(self, api, vps):
        api.vps("GET", "/networks/net-1", {"id": "net-1"})
        api.vps(
            "GET",
            "/networks/net-1/ports",
            [{"id": "port-1", "addresses": ["10.0.0.5"], "server": {"id": "s1", "name": "web-1"}}],
        )
        ports = vps.networks.get("net-1").ports.list()
        assert ports[0].server.name == "web-1"

    def test_ports_without_body(self, api, vps):
        api.vps("GET", "/networks/net-1/ports", status=204)
        assert vps.networks.ports("net-1").list() == []


class TestRouters:
    def test_list(self, api, vps):
        api.vps("GET", "/routers", {"routers": [{"id": "rt-1", "state": True}], "total": 1})
        routers = vps.routers.list()
        assert routers[0].state is True

    def test_get_binds_networks(self, api, vps):
        api.vps("GET", "/routers/rt-1", {"id": "rt-1", "name": "edge"})
        router = vps.routers.get("rt-1")
        assert isinstance(router, RouterResource)
        assert router.networks.router_id == "rt-1"

    def test_create_and_update(self, api, vps):
        api.vps("POST", "/routers", {"id": "rt-2", "name": "edge"})
        api.vps("PUT", "/routers/rt-2", {"id": "rt-2", "name": "edge-2"})
        assert vps.routers.create(RouterCreateRequest(name="edge")).id == "rt-2"
        assert vps.routers.update("rt-2", RouterUpdateRequest(name="edge-2")).name == "edge-2"

    @pytest.mark.parametrize("enabled", [True, False])
    def test_set_state(self, api, vps, enabled):
        api.vps("POST", "/routers/rt-1/action", status=202)
        vps.routers.set_state("rt-1", enabled)
        assert api.last_json() == {"state": enabled}

    def test_router_networks(self, api, vps):
        api.vps("GET", "/routers/rt-1/networks", [{"network_id": "net-1", "network_name": "default"}])
        api.vps("POST", "/routers/rt-1/networks/net-2", status=202)
        api.vps("DELETE", "/routers/rt-1/networks/net-1", status=202)
        networks = vps.routers.networks("rt-1")
        assert networks.list()[0].network_name == "default"
        networks.associate("net-2")
        networks.disassociate("net-1")
        assert [r.method for r in api.requests] == ["GET", "POST", "DELETE"]

    def test_delete(self, api, vps):
        api.vps("DELETE", "/routers/rt-1", status=204)
        vps.routers.delete("rt-1")
        assert api.count("DELETE", "/routers/rt-1") == 1


class TestSecurityGroups:
    def test_create_with_rules(self, api, vps):
        api.vps("POST", "/security_groups", {"id": "sg-1", "name": "web", "rules": []})
        rule = SecurityGroupRuleCreateRequest(
            direction=Direction.INGRESS, protocol=Protocol.TCP, port_min=22, port_max=22
        )
        sg = vps.security_groups.create(SecurityGroupCreateRequest(name="web", rules=[rule]))
        assert sg.id == "sg-1"
        assert api.last_json()["rules"] == [
            {
                "direction": "ingress",
                "protocol": "tcp",
                "port_min": 22,
                "port_max": 22,
                "remote_cidr": "0.0.0.0/0",
            }
        ]

    def test_rule_port_range(self):
        with pytest.raises(ValidationError):
            SecurityGroupRuleCreateRequest(
                direction=Direction.INGRESS, protocol=Protocol.TCP, port_min=70000
            )

    def test_rule_min_above_max(self):
        with pytest.raises(ValidationError):
            SecurityGroupRuleCreateRequest(
                direction=Direction.EGRESS, protocol=Protocol.UDP, port_min=90, port_max=80
            )

    def test_list_get_update_delete(self, api, vps):
        api.vps("GET", "/security_groups", {"security_groups": [{"id": "sg-1"}]})
        api.vps("GET", "/security_groups/sg-1", {"id": "sg-1", "rules": [{"id": "r1", "port_min": 80}]})
        api.vps("PUT", "/security_groups/sg-1", {"id": "sg-1", "name": "renamed"})
        api.vps("DELETE", "/security_groups/sg-1", status=204)
        assert vps.security_groups.list()[0].id == "sg-1"
        assert vps.security_groups.get("sg-1").rules[0].port_min == 80
        assert vps.security_groups.update("sg-1", SecurityGroupUpdateRequest(name="renamed")).name == "renamed"
        vps.security_groups.delete("sg-1")

    def test_rules(self, api, vps):
        api.vps("POST", "/security_groups/sg-1/rules", {"id": "r2", "protocol": "icmp"})
        api.vps("DELETE", "/security_groups/sg-1/rules/r2", status=204)
        rules = vps.security_groups.rules("sg-1")
        rule = rules.create(SecurityGroupRuleCreateRequest(direction="ingress", protocol="icmp"))
        assert rule.protocol == "icmp"
        rules.delete("r2")
        assert api.count("DELETE", "/rules/r2") == 1


class TestFloatingIPs:
    def test_create_without_request(self, api, vps):
        api.vps("POST", "/floatingips", {"id": "fip-1", "status": "PENDING"})
        assert vps.floating_ips.create().status == "PENDING"
        assert api.last_json() == {}

    def test_create_named(self, api, vps):
        api.vps("POST", "/floatingips", {"id": "fip-1"})
        vps.floating_ips.create(FloatingIPCreateRequest(name="public"))
        assert api.last_json() == {"name": "public"}

    def test_list(self, api, vps):
        api.vps("GET", "/floatingips", {"floatingips": [{"id": "fip-1", "address": "203.0.113.7"}]})
        fips = vps.floating_ips.list(status="ACTIVE")
        assert fips[0].address == "203.0.113.7"
        assert api.last.url.params["status"] == "ACTIVE"
        assert "detail" not in api.last.url.params

    def test_update(self, api, vps):
        api.vps("PUT", "/floatingips/fip-1", {"id": "fip-1", "reserved": True})
        fip = vps.floating_ips.update("fip-1", FloatingIPUpdateRequest(reserved=True))
        assert fip.reserved

    @pytest.mark.parametrize("operation", ["approve", "reject", "disassociate"])
    def test_actions(self, api, vps, operation):
        api.vps("POST", f"/floatingips/fip-1/{operation}", status=202)
        getattr(vps.floating_ips, operation)("fip-1")
        assert api.last.url.path.endswith(f"/floatingips/fip-1/{operation}")

    def test_get_and_delete(self, api, vps):
        api.vps("GET", "/floatingips/fip-1", {"id": "fip-1"})
        api.vps("DELETE", "/floatingips/fip-1", status=204)
        assert vps.floating_ips.get("fip-1").id == "fip-1"
        vps.floating_ips.delete("fip-1")


class TestKeypairs:
    def test_create_generated(self, api, vps):
        api.vps("POST", "/keypairs", {"id": "kp-1", "name": "ops", "private_key": "-----BEGIN"})
        keypair = vps.keypairs.create(KeypairCreateRequest(name="ops"))
        assert keypair.private_key.startswith("-----BEGIN")
        assert api.last_json() == {"name": "ops"}

    def test_create_requires_name(self):
        with pytest.raises(ValidationError):
            KeypairCreateRequest(name="")

    def test_list_get_update_delete(self, api, vps):
        api.vps("GET", "/keypairs", {"keypairs": [{"id": "kp-1"}], "total": 1})
        api.vps("GET", "/keypairs/kp-1", {"id": "kp-1", "fingerprint": "aa:bb"})
        api.vps("PUT", "/keypairs/kp-1", {"id": "kp-1", "description": "ops key"})
        api.vps("DELETE", "/keypairs/kp-1", status=204)
        assert len(vps.keypairs.list(name="ops")) == 1
        assert vps.keypairs.get("kp-1").fingerprint == "aa:bb"
        assert vps.keypairs.update("kp-1", KeypairUpdateRequest(description="ops key")).description == "ops key"
        vps.keypairs.delete("kp-1")


class TestFlavorsAndQuotas:
    def test_flavors(self, api, vps):
        api.vps(
            "GET",
            "/flavors",
            {"flavors": [{"id": "flv-1", "name": "small", "vcpu": 2, "memory": 4096, "public": True}]},
        )
        flavors = vps.flavors.list(public=True)
        assert flavors[0].vcpu == 2
        assert api.last.url.params["public"] == "true"

    def test_flavor_get(self, api, vps):
        api.vps("GET", "/flavors/flv-1", {"id": "flv-1", "gpu": {"count": 1, "model": "A100"}})
        assert vps.flavors.get("flv-1").gpu.count == 1

    def test_quotas(self, api, vps):
        api.vps("GET", "/quotas", {"vm": {"limit": 10, "usage": 4}, "gpu": {"limit": -1, "usage": 2}})
        quota = vps.quotas.get()
        assert quota.vm.available == 6
        assert quota.gpu.unlimited
        assert quota.gpu.available is None
        assert quota.network.limit == 0

    def test_quota_never_negative(self):
        assert QuotaDetail(limit=2, usage=5).available == 0
