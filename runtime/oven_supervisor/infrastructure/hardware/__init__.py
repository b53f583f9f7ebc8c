"""
Hardware Adapters

Implementations of the oven hardware port.
"""

from .simulated_oven import SimulatedOvenHardware

__all__ = ["SimulatedOvenHardware"]
