"""
Simulate Signal Command

Use case behind the simulation triggers exposed to collaborators.
Checks the hardware for the simulation capability instead of for a
concrete hardware type.
"""

import structlog

from oven_supervisor.domain.errors import SimulationUnsupportedError
from oven_supervisor.domain.ports import IOvenHardwarePort, ISimulatableHardwarePort
from oven_supervisor.domain.value_objects import SimulationTrigger


logger = structlog.get_logger(__name__)


class SimulateSignalCommand:
    """
    Command handler for simulation triggers.

    Fire-and-forget: the synthesized signal is handled by whoever is
    subscribed to the hardware (normally the oven supervisor).
    """

    def __init__(self, hardware: IOvenHardwarePort):
        """
        Initialize the simulate signal command.

        Args:
            hardware: Hardware the triggers are sent to
        """
        self._hardware = hardware

    @property
    def is_supported(self) -> bool:
        """True if the hardware can synthesize signals."""
        return isinstance(self._hardware, ISimulatableHardwarePort)

    def execute(self, trigger: SimulationTrigger) -> None:
        """
        Produce the hardware signal matching a trigger.

        Args:
            trigger: Which signal to simulate

        Raises:
            SimulationUnsupportedError: If the hardware cannot simulate
        """
        hardware = self._hardware
        if not isinstance(hardware, ISimulatableHardwarePort):
            logger.warning(
                "Simulation not supported by hardware",
                trigger=trigger.value,
                hardware=type(hardware).__name__,
            )
            raise SimulationUnsupportedError(trigger, type(hardware).__name__)

        logger.info("Simulation triggered", trigger=trigger.value)

        if trigger is SimulationTrigger.DOOR_OPEN:
            hardware.simulate_door_open()
        elif trigger is SimulationTrigger.DOOR_CLOSE:
            hardware.simulate_door_close()
        elif trigger is SimulationTrigger.START_PRESS:
            hardware.simulate_start_pressed()
        else:
            raise ValueError(f"Unknown simulation trigger: {trigger}")
