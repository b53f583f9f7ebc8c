"""
Application Services

Service classes for handling use cases.
"""

from .oven_supervisor import (
    DEFAULT_COOK_INCREMENT_SECONDS,
    DEFAULT_TICK_INTERVAL_SECONDS,
    OvenSupervisor,
)

__all__ = [
    "OvenSupervisor",
    "DEFAULT_COOK_INCREMENT_SECONDS",
    "DEFAULT_TICK_INTERVAL_SECONDS",
]
