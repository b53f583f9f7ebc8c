"""
Oven Value Objects

Immutable value objects describing oven status, commands and signals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


STATUS_MESSAGE = "Current Microwave Oven Status"


class HeaterState(str, Enum):
    """Heater sub-state of the supervisor."""

    IDLE = "idle"
    HEATING = "heating"


class HardwareCommand(str, Enum):
    """One-way instructions issued to the oven hardware."""

    HEATER_ON = "heater_on"
    HEATER_OFF = "heater_off"
    LIGHT_ON = "light_on"
    LIGHT_OFF = "light_off"


class SimulationTrigger(str, Enum):
    """Driver-only triggers that synthesize hardware signals."""

    DOOR_OPEN = "door_open"
    DOOR_CLOSE = "door_close"
    START_PRESS = "start_press"


@dataclass(frozen=True)
class HardwareSignalHandlers:
    """
    Callbacks a consumer subscribes to the hardware with.

    Attributes:
        on_door_changed: Invoked with the new door state (True = open)
        on_start_pressed: Invoked when the start button is pressed
    """

    on_door_changed: Callable[[bool], None]
    on_start_pressed: Callable[[], None]


@dataclass(frozen=True)
class StatusSnapshot:
    """
    Read-only projection of the oven state at query time.

    Attributes:
        door_open: Last known door state
        heater_running: Whether the heater is commanded on
        light_on: Whether the interior light is on
        remaining_seconds: Seconds left in the active cook session
        message: Human-readable description
        degraded: True after a hardware command failure
        fault_reason: Description of the failure while degraded
    """

    door_open: bool
    heater_running: bool
    light_on: bool
    remaining_seconds: int
    message: str = STATUS_MESSAGE
    degraded: bool = False
    fault_reason: Optional[str] = None

    def __post_init__(self):
        if self.remaining_seconds < 0:
            raise ValueError("remaining_seconds cannot be negative")

    @property
    def heater_state(self) -> HeaterState:
        return HeaterState.HEATING if self.heater_running else HeaterState.IDLE
