"""
Test fixtures for the VPS clients.

``api``, ``vps`` and ``clock`` are inherited from the root conftest.py; the
helpers here build service-shaped JSON records.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def server_json():
    def make(server_id="srv-1", status="ACTIVE", **fields):
        record = {
            "id": server_id,
            "name": "web-1",
            "status": status,
            "flavor_id": "flv-1",
            "image_id": "tag-1",
            "private_ips": ["10.0.0.5"],
            "createdAt": "2024-05-01T10:00:00Z",
            "updatedAt": "",
        }
        record.update(fields)
        return record

    return make


@pytest.fixture
def volume_json():
    def make(volume_id="vol-1", status="available", **fields):
        record = {"id": volume_id, "name": "data", "size": 20, "type": "SSD", "status": status}
        record.update(fields)
        return record

    return make
