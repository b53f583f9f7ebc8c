"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from oven_supervisor.application.services.oven_supervisor import OvenSupervisor
from oven_supervisor.infrastructure.config import Settings
from oven_supervisor.infrastructure.hardware import SimulatedOvenHardware
from oven_supervisor.interfaces.http.rest import create_app

from doubles import ManualScheduler, RealOvenHardware


@pytest.fixture
def hardware() -> SimulatedOvenHardware:
    """Simulated oven with the door closed."""
    return SimulatedOvenHardware()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Scheduler driven by the test."""
    return ManualScheduler()


@pytest.fixture
def supervisor(hardware, scheduler):
    """Supervisor wired to the simulated oven and the manual scheduler."""
    sup = OvenSupervisor(hardware=hardware, scheduler=scheduler)
    yield sup
    sup.close()


@pytest.fixture
def real_hardware() -> RealOvenHardware:
    """Hardware without the simulation capability."""
    return RealOvenHardware()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings, hardware, scheduler):
    """FastAPI app backed by the simulated oven."""
    application = create_app(settings=settings, hardware=hardware, scheduler=scheduler)
    yield application
    application.state.supervisor.close()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Get test HTTP client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
