"""
Domain Errors

Error types raised across the oven supervisor.
"""

from typing import Any, Optional

from oven_supervisor.domain.value_objects import HardwareCommand, SimulationTrigger


class OvenError(Exception):
    """Base class for oven supervisor errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class SimulationUnsupportedError(OvenError):
    """A simulation trigger was invoked on hardware that cannot simulate."""

    def __init__(self, trigger: SimulationTrigger, hardware_type: str):
        self.trigger = trigger
        super().__init__(
            "Hardware not available for this operation.",
            details={"trigger": trigger.value, "hardware": hardware_type},
        )


class HardwareCommandError(OvenError):
    """A heater or light command did not complete."""

    def __init__(
        self,
        command: HardwareCommand,
        message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.command = command
        self.original_error = original_error
        super().__init__(
            message or f"Hardware command {command.value} failed",
            details={"command": command.value},
        )
