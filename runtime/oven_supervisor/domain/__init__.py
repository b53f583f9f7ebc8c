"""
Oven Supervisor Domain Layer

Core domain model for the supervised oven: session state, status
snapshots, errors, and the ports to hardware and scheduling.
"""

from .entities import OvenState
from .errors import HardwareCommandError, OvenError, SimulationUnsupportedError
from .value_objects import (
    HardwareCommand,
    HeaterState,
    SimulationTrigger,
    StatusSnapshot,
)

__all__ = [
    "OvenState",
    "StatusSnapshot",
    "HeaterState",
    "HardwareCommand",
    "SimulationTrigger",
    "OvenError",
    "HardwareCommandError",
    "SimulationUnsupportedError",
]
