"""
Oven Supervisor Service

Owns the oven session state and serializes every mutation of it.

Door signals, start presses, countdown ticks and status queries arrive from
different threads (hardware callbacks, the countdown thread, HTTP handlers);
all of them go through a single lock. Hardware commands are issued while the
lock is held and are expected to return quickly.
"""

import threading
from typing import Callable, Optional

import structlog

from oven_supervisor.domain.entities import OvenState
from oven_supervisor.domain.errors import HardwareCommandError
from oven_supervisor.domain.ports import (
    HardwareSignalHandlers,
    IOvenHardwarePort,
    ISchedulerPort,
    IScheduledTask,
)
from oven_supervisor.domain.value_objects import HardwareCommand, StatusSnapshot


logger = structlog.get_logger(__name__)


DEFAULT_COOK_INCREMENT_SECONDS = 60
DEFAULT_TICK_INTERVAL_SECONDS = 1.0


class OvenSupervisor:
    """
    Supervisor state machine for a single microwave oven.

    Heater sub-states are Idle and Heating:
    - Idle --(start, door closed)--> Heating
    - Heating --(start)--> Heating, with the cook time extended
    - Heating --(door opens | countdown reaches 0)--> Idle

    A hardware command failure forces Idle and marks the oven degraded;
    start presses are ignored until clear_fault() is called.
    """

    def __init__(
        self,
        hardware: IOvenHardwarePort,
        scheduler: ISchedulerPort,
        cook_increment_seconds: int = DEFAULT_COOK_INCREMENT_SECONDS,
        tick_interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
    ):
        """
        Initialize the supervisor and subscribe to hardware signals.

        Args:
            hardware: Port to the oven hardware
            scheduler: Port used to arm the countdown
            cook_increment_seconds: Time added by each start press
            tick_interval_seconds: Countdown cadence
        """
        if cook_increment_seconds <= 0:
            raise ValueError("cook_increment_seconds must be positive")
        if tick_interval_seconds <= 0:
            raise ValueError("tick_interval_seconds must be positive")

        self._hardware = hardware
        self._scheduler = scheduler
        self._cook_increment = cook_increment_seconds
        self._tick_interval = tick_interval_seconds
        self._state = OvenState()
        self._countdown: Optional[IScheduledTask] = None
        self._lock = threading.Lock()
        self._closed = False

        self._handlers = HardwareSignalHandlers(
            on_door_changed=self.handle_door_changed,
            on_start_pressed=self.handle_start_pressed,
        )
        self._hardware.subscribe(self._handlers)

        # The door may already be open when the supervisor comes up.
        if self._hardware.is_door_open():
            self.handle_door_changed(True)

        logger.info(
            "Oven supervisor started",
            cook_increment_seconds=self._cook_increment,
            tick_interval_seconds=self._tick_interval,
        )

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------

    def handle_door_changed(self, is_open: bool) -> None:
        """
        Handle a door-state signal.

        Opening the door turns the light on and preempts heating.
        Closing it turns the light off and leaves the heater alone.

        Args:
            is_open: True if the door is now open
        """
        with self._lock:
            if self._closed:
                return
            self._state.set_door(is_open)
            if is_open:
                if self._state.heater_running:
                    self._stop_heating(reason="door_opened")
                self._issue(HardwareCommand.LIGHT_ON, self._hardware.turn_light_on)
            else:
                self._issue(HardwareCommand.LIGHT_OFF, self._hardware.turn_light_off)

            logger.info(
                "Door changed",
                door_open=is_open,
                light_on=self._state.light_on,
                heater_running=self._state.heater_running,
            )

    def handle_start_pressed(self) -> None:
        """
        Handle a start-button signal.

        Ignored while the door is open or the oven is degraded. Starts a
        fresh session when idle, otherwise extends the running one.
        """
        with self._lock:
            if self._closed:
                logger.info("Start pressed after close, ignoring")
                return

            if self._state.door_open or self._hardware.is_door_open():
                logger.info("Start pressed with door open, ignoring")
                return

            if self._state.degraded:
                logger.warning(
                    "Start pressed while degraded, ignoring",
                    fault_reason=self._state.fault_reason,
                )
                return

            if not self._state.heater_running:
                self._state.start_session(self._cook_increment)
                if not self._start_heating():
                    return
                logger.info(
                    "Cooking started",
                    remaining_seconds=self._state.remaining_seconds,
                )
            else:
                self._state.extend_session(self._cook_increment)
                logger.info(
                    "Cooking extended",
                    added_seconds=self._cook_increment,
                    remaining_seconds=self._state.remaining_seconds,
                )

    def _on_tick(self, task: IScheduledTask) -> None:
        """Countdown callback, invoked from the scheduler's thread."""
        with self._lock:
            if (
                self._closed
                or task is not self._countdown
                or not self._state.heater_running
            ):
                logger.debug("Ignoring stale countdown tick")
                return

            remaining = self._state.tick()
            logger.debug("Countdown tick", remaining_seconds=remaining)

            if remaining <= 0:
                logger.info("Cooking time elapsed")
                self._stop_heating(reason="countdown_elapsed")

    # ------------------------------------------------------------------
    # Queries and maintenance
    # ------------------------------------------------------------------

    def get_status(self) -> StatusSnapshot:
        """Return a snapshot of the settled oven state."""
        with self._lock:
            return self._state.snapshot()

    def clear_fault(self) -> StatusSnapshot:
        """
        Clear the degraded flag so heating can be started again.

        Returns:
            Status snapshot after the reset
        """
        with self._lock:
            if self._state.degraded:
                logger.info("Clearing fault", fault_reason=self._state.fault_reason)
                self._state.clear_fault()
            return self._state.snapshot()

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Unsubscribe from hardware, stop heating and release the countdown."""
        with self._lock:
            if self._closed:
                return
            # Handlers return early from here on.
            self._closed = True

        self._hardware.unsubscribe(self._handlers)

        with self._lock:
            if self._state.heater_running:
                self._stop_heating(reason="shutdown")
            self._cancel_countdown()

        logger.info("Oven supervisor closed")

    # ------------------------------------------------------------------
    # Sequences (caller holds the lock)
    # ------------------------------------------------------------------

    def _start_heating(self) -> bool:
        if not self._issue(HardwareCommand.HEATER_ON, self._hardware.turn_heater_on):
            return False

        # A timer from an earlier session must never drive this one.
        self._cancel_countdown()
        self._countdown = self._scheduler.schedule_periodic(
            self._tick_interval, self._on_tick
        )
        logger.debug("Countdown armed", interval=self._tick_interval)
        return True

    def _stop_heating(self, reason: str) -> None:
        # Runs at most once per session.
        if not self._state.heater_running:
            return

        self._state.end_session()
        self._cancel_countdown()
        self._issue(HardwareCommand.HEATER_OFF, self._hardware.turn_heater_off)
        logger.info("Heating stopped", reason=reason)

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _issue(self, command: HardwareCommand, action: Callable[[], None]) -> bool:
        """
        Issue a hardware command; a failure ends the session and degrades the oven.

        Returns:
            True if the command completed, False otherwise
        """
        try:
            action()
            return True
        except HardwareCommandError as e:
            self._handle_command_failure(command, e)
            return False
        except Exception as e:
            self._handle_command_failure(
                command, HardwareCommandError(command, str(e) or None, original_error=e)
            )
            return False

    def _handle_command_failure(
        self, command: HardwareCommand, error: HardwareCommandError
    ) -> None:
        logger.error(
            "Hardware command failed",
            command=command.value,
            error=str(error),
            heater_running=self._state.heater_running,
        )
        self._state.mark_degraded(f"{command.value} failed: {error.message}")

        was_heating = self._state.heater_running
        self._state.end_session()
        self._cancel_countdown()

        # A failed heater-off needs no second attempt; otherwise make sure
        # the element is off before reporting idle.
        if command is not HardwareCommand.HEATER_OFF and (
            was_heating or command is HardwareCommand.HEATER_ON
        ):
            try:
                self._hardware.turn_heater_off()
            except Exception as e:
                logger.error(
                    "Heater off failed during fault handling",
                    error=str(e),
                )
