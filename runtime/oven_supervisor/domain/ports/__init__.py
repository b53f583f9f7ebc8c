"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on external systems are abstracted through ports.
"""

from .hardware_port import IOvenHardwarePort
from .simulation_port import ISimulatableHardwarePort
from .scheduler_port import ISchedulerPort, IScheduledTask
# Value objects are exported from value_objects module
from ..value_objects import HardwareSignalHandlers

__all__ = [
    # Hardware
    "IOvenHardwarePort",
    "ISimulatableHardwarePort",
    # Scheduling
    "ISchedulerPort",
    "IScheduledTask",
    # Value objects (for convenience)
    "HardwareSignalHandlers",
]
