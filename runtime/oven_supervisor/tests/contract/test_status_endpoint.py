"""
Contract tests for the status, health and fault endpoints.
"""

import inspect

import pytest
from httpx import ASGITransport, AsyncClient

from oven_supervisor.domain.value_objects import HardwareCommand
from oven_supervisor.interfaces.http.rest import create_app

from doubles import FailingOvenHardware, ManualScheduler


pytestmark = pytest.mark.contract


STATUS_FIELDS = {
    "is_door_open",
    "is_heater_running",
    "is_light_on",
    "remaining_cooking_time_seconds",
    "message",
    "degraded",
    "fault_reason",
}


@pytest.mark.asyncio
async def test_initial_status(client):
    response = await client.get("/api/microwaveoven/status")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == STATUS_FIELDS
    assert body == {
        "is_door_open": False,
        "is_heater_running": False,
        "is_light_on": False,
        "remaining_cooking_time_seconds": 0,
        "message": "Current Microwave Oven Status",
        "degraded": False,
        "fault_reason": None,
    }


@pytest.mark.asyncio
async def test_status_reflects_countdown(client, hardware, scheduler):
    hardware.simulate_start_pressed()
    scheduler.advance(5)

    response = await client.get("/api/microwaveoven/status")

    body = response.json()
    assert body["is_heater_running"] is True
    assert body["remaining_cooking_time_seconds"] == 55


@pytest.mark.asyncio
async def test_health_reports_heater_state(client, hardware):
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"
    assert body["heater_state"] == "idle"
    assert body["uptime_seconds"] >= 0

    hardware.simulate_start_pressed()

    body = (await client.get("/health")).json()
    assert body["heater_state"] == "heating"


@pytest.mark.asyncio
async def test_root_lists_endpoints(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "/api/microwaveoven/status"


@pytest.fixture
async def failing_client(settings):
    hardware = FailingOvenHardware(fail_on={HardwareCommand.HEATER_ON})
    application = create_app(settings=settings, hardware=hardware, scheduler=ManualScheduler())
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac, hardware
    application.state.supervisor.close()


@pytest.mark.asyncio
async def test_reset_fault_after_command_failure(failing_client):
    client, hardware = failing_client

    await client.post("/api/microwaveoven/pressStart")

    status = (await client.get("/api/microwaveoven/status")).json()
    assert status["degraded"] is True
    assert status["is_heater_running"] is False
    assert status["remaining_cooking_time_seconds"] == 0
    assert "heater_on failed" in status["fault_reason"]

    health = (await client.get("/health")).json()
    assert health["status"] == "degraded"
    assert health["degraded"] is True

    hardware.fail_on.clear()
    response = await client.post("/api/microwaveoven/resetFault")

    assert response.status_code == 200
    assert response.json()["degraded"] is False
    assert response.json()["fault_reason"] is None

    await client.post("/api/microwaveoven/pressStart")

    status = (await client.get("/api/microwaveoven/status")).json()
    assert status["is_heater_running"] is True
    assert status["remaining_cooking_time_seconds"] == 60


@pytest.mark.parametrize(
    "path",
    [
        "/health",
        "/api/microwaveoven/status",
        "/api/microwaveoven/resetFault",
        "/api/microwaveoven/openDoor",
        "/api/microwaveoven/closeDoor",
        "/api/microwaveoven/pressStart",
    ],
)
def test_locking_routes_run_in_threadpool(app, path):
    """Routes that take the supervisor lock are plain functions."""
    endpoints = [route.endpoint for route in app.routes if getattr(route, "path", None) == path]

    assert endpoints
    assert not any(inspect.iscoroutinefunction(endpoint) for endpoint in endpoints)
