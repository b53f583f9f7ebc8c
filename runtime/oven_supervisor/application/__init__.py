"""
Application Layer

Orchestrates domain objects to execute use cases.
Contains commands and services.
"""

from .commands.simulate_signal import SimulateSignalCommand
from .services.oven_supervisor import OvenSupervisor

__all__ = [
    # Commands
    "SimulateSignalCommand",
    # Services
    "OvenSupervisor",
]
