"""
Simulatable Hardware Port Interface

Optional capability for hardware that can synthesize its own signals.
Real hardware adapters do not implement it.
"""

from abc import ABC, abstractmethod


class ISimulatableHardwarePort(ABC):
    """
    Port interface for driver-only simulation triggers.

    Each trigger produces the corresponding IOvenHardwarePort signal.
    """

    @abstractmethod
    def simulate_door_open(self) -> None:
        """Simulate the user opening the door."""
        pass

    @abstractmethod
    def simulate_door_close(self) -> None:
        """Simulate the user closing the door."""
        pass

    @abstractmethod
    def simulate_start_pressed(self) -> None:
        """Simulate the user pressing the start button."""
        pass
