"""
Simulated Oven Hardware

In-memory oven that implements both the hardware port and the simulation
capability. Used as the default hardware for local runs and as the test
double for the supervisor.
"""

import threading
from typing import List

import structlog

from oven_supervisor.domain.ports import (
    HardwareSignalHandlers,
    IOvenHardwarePort,
    ISimulatableHardwarePort,
)
from oven_supervisor.domain.value_objects import HardwareCommand


logger = structlog.get_logger(__name__)


class SimulatedOvenHardware(IOvenHardwarePort, ISimulatableHardwarePort):
    """
    Simulated microwave oven.

    Commands only flip in-memory flags and are appended to a command log.
    Signals are delivered synchronously on the caller's thread, outside the
    internal lock, so subscribers may issue commands from their handlers.
    """

    def __init__(self, door_open: bool = False):
        self._door_open = door_open
        self._heater_on = False
        self._light_on = False
        self._commands: List[HardwareCommand] = []
        self._subscribers: List[HardwareSignalHandlers] = []
        self._lock = threading.Lock()

    # ------- Commands ------- #

    def turn_heater_on(self) -> None:
        self._record(HardwareCommand.HEATER_ON)
        with self._lock:
            self._heater_on = True

    def turn_heater_off(self) -> None:
        self._record(HardwareCommand.HEATER_OFF)
        with self._lock:
            self._heater_on = False

    def turn_light_on(self) -> None:
        self._record(HardwareCommand.LIGHT_ON)
        with self._lock:
            self._light_on = True

    def turn_light_off(self) -> None:
        self._record(HardwareCommand.LIGHT_OFF)
        with self._lock:
            self._light_on = False

    # ------- Queries ------- #

    def is_door_open(self) -> bool:
        with self._lock:
            return self._door_open

    @property
    def is_heater_on(self) -> bool:
        with self._lock:
            return self._heater_on

    @property
    def is_light_on(self) -> bool:
        with self._lock:
            return self._light_on

    @property
    def commands(self) -> List[HardwareCommand]:
        """Copy of every command received, oldest first."""
        with self._lock:
            return list(self._commands)

    def command_count(self, command: HardwareCommand) -> int:
        with self._lock:
            return self._commands.count(command)

    def clear_commands(self) -> None:
        with self._lock:
            self._commands.clear()

    # ------- Subscriptions ------- #

    def subscribe(self, handlers: HardwareSignalHandlers) -> None:
        with self._lock:
            if handlers not in self._subscribers:
                self._subscribers.append(handlers)

    def unsubscribe(self, handlers: HardwareSignalHandlers) -> None:
        with self._lock:
            if handlers in self._subscribers:
                self._subscribers.remove(handlers)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    # ------- Simulation triggers ------- #

    def simulate_door_open(self) -> None:
        self._set_door(True)

    def simulate_door_close(self) -> None:
        self._set_door(False)

    def simulate_start_pressed(self) -> None:
        logger.info("Start button pressed")
        for handlers in self._snapshot_subscribers():
            handlers.on_start_pressed()

    # ------- Internal ------- #

    def _set_door(self, is_open: bool) -> None:
        with self._lock:
            if self._door_open == is_open:
                return
            self._door_open = is_open
            subscribers = list(self._subscribers)

        logger.info("Door status changed", door="open" if is_open else "closed")
        for handlers in subscribers:
            handlers.on_door_changed(is_open)

    def _snapshot_subscribers(self) -> List[HardwareSignalHandlers]:
        with self._lock:
            return list(self._subscribers)

    def _record(self, command: HardwareCommand) -> None:
        with self._lock:
            self._commands.append(command)
        logger.debug("Hardware command", command=command.value)
