"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .hardware.simulated_oven import SimulatedOvenHardware
from .scheduling.periodic import ThreadedScheduler

__all__ = ["SimulatedOvenHardware", "ThreadedScheduler"]
