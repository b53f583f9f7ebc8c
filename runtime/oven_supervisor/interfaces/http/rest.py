"""
REST API Interface

FastAPI application serving status queries and simulation triggers for the
supervised oven.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from oven_supervisor import __version__
from oven_supervisor.application.commands.simulate_signal import SimulateSignalCommand
from oven_supervisor.application.services.oven_supervisor import OvenSupervisor
from oven_supervisor.domain.errors import SimulationUnsupportedError
from oven_supervisor.domain.ports import IOvenHardwarePort, ISchedulerPort
from oven_supervisor.domain.value_objects import (
    HeaterState,
    SimulationTrigger,
    StatusSnapshot,
)
from oven_supervisor.infrastructure.config import Settings, get_settings
from oven_supervisor.infrastructure.hardware import SimulatedOvenHardware
from oven_supervisor.infrastructure.logging import configure_logging, get_logger
from oven_supervisor.infrastructure.scheduling import ThreadedScheduler


logger = get_logger("http")


API_PREFIX = "/api/microwaveoven"


# Request/Response Models
class StatusResponse(BaseModel):
    """Flat status record of the oven."""

    is_door_open: bool = Field(..., description="Last known door state")
    is_heater_running: bool = Field(..., description="Whether the heater is on")
    is_light_on: bool = Field(..., description="Whether the interior light is on")
    remaining_cooking_time_seconds: int = Field(
        ..., ge=0, description="Seconds left in the active cook session"
    )
    message: str = Field(..., description="Human-readable description")
    degraded: bool = Field(default=False, description="True after a hardware command failure")
    fault_reason: Optional[str] = Field(default=None, description="Failure description while degraded")

    @classmethod
    def from_snapshot(cls, snapshot: StatusSnapshot) -> "StatusResponse":
        return cls(
            is_door_open=snapshot.door_open,
            is_heater_running=snapshot.heater_running,
            is_light_on=snapshot.light_on,
            remaining_cooking_time_seconds=snapshot.remaining_seconds,
            message=snapshot.message,
            degraded=snapshot.degraded,
            fault_reason=snapshot.fault_reason,
        )


class MessageResponse(BaseModel):
    """Acknowledgement of a fire-and-forget trigger."""

    message: str


class ErrorResponse(BaseModel):
    """Error response model."""

    error_code: str
    description: str
    error_detail: Optional[str] = None
    solution: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str = __version__
    uptime_seconds: Optional[float] = None
    heater_state: Optional[HeaterState] = None
    degraded: bool = False


TRIGGER_MESSAGES = {
    SimulationTrigger.DOOR_OPEN: "Door opened simulation triggered.",
    SimulationTrigger.DOOR_CLOSE: "Door closed simulation triggered.",
    SimulationTrigger.START_PRESS: "Start button pressed simulation triggered.",
}


def get_supervisor(request: Request) -> OvenSupervisor:
    """Get the supervisor bound to the application."""
    return request.app.state.supervisor


def get_simulate_command(request: Request) -> SimulateSignalCommand:
    """Get the simulation command bound to the application."""
    return request.app.state.simulate_command


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On shutdown the supervisor turns the heater off, cancels the countdown
    and unsubscribes from the hardware.
    """
    logger.info(
        "Oven supervisor API starting",
        version=__version__,
        hardware=type(app.state.hardware).__name__,
        simulation_supported=app.state.simulate_command.is_supported,
    )

    yield

    logger.info("Oven supervisor API shutting down")
    app.state.supervisor.close()
    logger.info("Oven supervisor API shutdown complete")


def create_app(
    settings: Optional[Settings] = None,
    hardware: Optional[IOvenHardwarePort] = None,
    scheduler: Optional[ISchedulerPort] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The supervisor is built here rather than in the lifespan so that it
    exists for the whole lifetime of the app object.

    Args:
        settings: Settings to use (defaults to environment settings)
        hardware: Hardware adapter (defaults to SimulatedOvenHardware)
        scheduler: Scheduler adapter (defaults to ThreadedScheduler)

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    hardware = hardware if hardware is not None else SimulatedOvenHardware()
    scheduler = scheduler if scheduler is not None else ThreadedScheduler()

    app = FastAPI(
        title="Microwave Oven Supervisor API",
        description="Status and simulation endpoints for a supervised microwave oven",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.hardware = hardware
    app.state.supervisor = OvenSupervisor(
        hardware=hardware,
        scheduler=scheduler,
        cook_increment_seconds=settings.cook_increment_seconds,
        tick_interval_seconds=settings.tick_interval_seconds,
    )
    app.state.simulate_command = SimulateSignalCommand(hardware)
    app.state.startup_time = time.time()

    # Exception handlers
    @app.exception_handler(SimulationUnsupportedError)
    async def simulation_unsupported_handler(request: Request, exc: SimulationUnsupportedError):
        """Reject simulation triggers against real hardware."""
        logger.warning(
            "Simulation trigger rejected",
            path=request.url.path,
            **exc.details,
        )
        error_response = ErrorResponse(
            error_code="Oven.SimulationUnsupported",
            description=exc.message,
            error_detail=f"{exc.details.get('hardware')} does not support simulation",
            solution="Use simulated hardware to trigger signals",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response.model_dump(),
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        """Handle Pydantic validation errors."""
        logger.warning(
            "Request validation failed",
            errors=exc.errors(),
            path=request.url.path,
        )
        error_response = ErrorResponse(
            error_code="Oven.ValidationError",
            description="Request validation failed",
            error_detail=str(exc.errors()),
            solution="Check request format and required fields",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response.model_dump(),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle ValueError exceptions."""
        logger.warning("Value error", error=str(exc), path=request.url.path)
        error_response = ErrorResponse(
            error_code="Oven.ValidationError",
            description="Invalid value provided",
            error_detail=str(exc),
            solution="Check request parameters",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response.model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        error_response = ErrorResponse(
            error_code="Oven.InternalError",
            description="Oven supervisor encountered an unexpected error",
            error_detail=str(exc),
            solution="Check supervisor logs for details",
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(),
        )

    @app.get(
        "/",
        include_in_schema=False,
    )
    async def root():
        """Root endpoint with API information."""
        return {
            "service": "oven-supervisor",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "status": f"{API_PREFIX}/status",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health check",
        tags=["health"],
    )
    def health_check(
        request: Request,
        supervisor: OvenSupervisor = Depends(get_supervisor),
    ) -> HealthResponse:
        """Report liveness, uptime and the heater sub-state."""
        snapshot = supervisor.get_status()
        return HealthResponse(
            status="degraded" if snapshot.degraded else "healthy",
            uptime_seconds=time.time() - request.app.state.startup_time,
            heater_state=snapshot.heater_state,
            degraded=snapshot.degraded,
        )

    @app.get(
        f"{API_PREFIX}/status",
        response_model=StatusResponse,
        summary="Current oven status",
        tags=["oven"],
    )
    def get_status(
        supervisor: OvenSupervisor = Depends(get_supervisor),
    ) -> StatusResponse:
        """Return the current status of the microwave oven."""
        return StatusResponse.from_snapshot(supervisor.get_status())

    @app.post(
        f"{API_PREFIX}/resetFault",
        response_model=StatusResponse,
        summary="Clear a hardware fault",
        tags=["oven"],
    )
    def reset_fault(
        supervisor: OvenSupervisor = Depends(get_supervisor),
    ) -> StatusResponse:
        """Clear the degraded flag so heating can start again."""
        return StatusResponse.from_snapshot(supervisor.clear_fault())

    def _trigger(command: SimulateSignalCommand, trigger: SimulationTrigger) -> MessageResponse:
        command.execute(trigger)
        return MessageResponse(message=TRIGGER_MESSAGES[trigger])

    simulation_responses = {
        400: {"model": ErrorResponse, "description": "Hardware cannot simulate"},
    }

    @app.post(
        f"{API_PREFIX}/openDoor",
        response_model=MessageResponse,
        responses=simulation_responses,
        summary="Simulate opening the door",
        tags=["simulation"],
    )
    def simulate_open_door(
        command: SimulateSignalCommand = Depends(get_simulate_command),
    ) -> MessageResponse:
        return _trigger(command, SimulationTrigger.DOOR_OPEN)

    @app.post(
        f"{API_PREFIX}/closeDoor",
        response_model=MessageResponse,
        responses=simulation_responses,
        summary="Simulate closing the door",
        tags=["simulation"],
    )
    def simulate_close_door(
        command: SimulateSignalCommand = Depends(get_simulate_command),
    ) -> MessageResponse:
        return _trigger(command, SimulationTrigger.DOOR_CLOSE)

    @app.post(
        f"{API_PREFIX}/pressStart",
        response_model=MessageResponse,
        responses=simulation_responses,
        summary="Simulate pressing the start button",
        tags=["simulation"],
    )
    def simulate_press_start(
        command: SimulateSignalCommand = Depends(get_simulate_command),
    ) -> MessageResponse:
        return _trigger(command, SimulationTrigger.START_PRESS)

    return app


# CLI entry point
def main():
    """Main entry point for running the oven supervisor."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
