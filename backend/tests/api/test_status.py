"""Tests for the status API endpoint."""

from datetime import datetime

import pytest
from fastapi import status


class TestStatusAPI:
    """Test suite for GET /status."""

    @pytest.mark.parametrize("path", ["/api/status", "/api/v0/status"])
    async def test_status_online(self, client, path):
        """Test status endpoint is public and reports the fixed fields."""
        response = await client.get(path)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert set(data) == {"status", "version", "uptime", "timestamp"}
        assert data["status"] == "online"
        assert data["version"] == "1.0.0"
        assert data["uptime"].endswith("s")
        assert int(data["uptime"][:-1]) >= 0
        assert data["timestamp"].endswith("Z")
        datetime.fromisoformat(data["timestamp"])

    async def test_status_uses_injected_start(self, client, override_process_start):
        """Test uptime is measured from the injected process start."""
        common = await client.get("/api/status")
        v0 = await client.get("/api/v0/status")

        assert common.json()["uptime"] == "5s"
        assert v0.json()["uptime"] == "5s"

    async def test_status_uptime_non_decreasing(self, client):
        """Test successive calls never report a smaller uptime."""
        first = await client.get("/api/status")
        second = await client.get("/api/status")

        assert int(second.json()["uptime"][:-1]) >= int(first.json()["uptime"][:-1])
        assert first.json()["version"] == second.json()["version"]

    async def test_root_ok(self, client):
        """Test the root endpoint answers."""
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == "OK"
