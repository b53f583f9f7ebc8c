"""
Hardware Port Interface

Defines the contract for the oven hardware boundary.
This is an output port - implemented by infrastructure adapters.
"""

from abc import ABC, abstractmethod

from oven_supervisor.domain.value_objects import HardwareSignalHandlers


class IOvenHardwarePort(ABC):
    """
    Port interface for the microwave oven hardware.

    Commands are one-way and synchronous. Signals (door changed, start
    pressed) are delivered to every subscribed HardwareSignalHandlers.
    Adapters for real hardware raise HardwareCommandError when a command
    does not complete.
    """

    @abstractmethod
    def turn_heater_on(self) -> None:
        """Turn the heating element on."""
        pass

    @abstractmethod
    def turn_heater_off(self) -> None:
        """Turn the heating element off."""
        pass

    @abstractmethod
    def turn_light_on(self) -> None:
        """Turn the interior light on."""
        pass

    @abstractmethod
    def turn_light_off(self) -> None:
        """Turn the interior light off."""
        pass

    @abstractmethod
    def is_door_open(self) -> bool:
        """
        Query the physical door state.

        Returns:
            True if the door is open, False otherwise
        """
        pass

    @abstractmethod
    def subscribe(self, handlers: HardwareSignalHandlers) -> None:
        """
        Register callbacks for door and start-button signals.

        Args:
            handlers: Callbacks to invoke when a signal is emitted
        """
        pass

    @abstractmethod
    def unsubscribe(self, handlers: HardwareSignalHandlers) -> None:
        """
        Remove previously registered callbacks.

        Args:
            handlers: Callbacks passed to subscribe()
        """
        pass
