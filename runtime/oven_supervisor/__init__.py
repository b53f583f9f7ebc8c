"""
Microwave Oven Supervisor

Hexagonal architecture implementation of a single-oven supervisor.
"""

__version__ = "1.0.0"

from .domain.entities import OvenState
from .domain.errors import HardwareCommandError, OvenError, SimulationUnsupportedError
from .domain.value_objects import (
    HardwareCommand,
    HardwareSignalHandlers,
    HeaterState,
    SimulationTrigger,
    StatusSnapshot,
)

__all__ = [
    "OvenState",
    "StatusSnapshot",
    "HeaterState",
    "HardwareCommand",
    "HardwareSignalHandlers",
    "SimulationTrigger",
    "OvenError",
    "HardwareCommandError",
    "SimulationUnsupportedError",
]
