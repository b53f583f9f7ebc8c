"""
Oven Entities

Mutable session state owned by the oven supervisor.
"""

from dataclasses import dataclass
from typing import List, Optional

from oven_supervisor.domain.value_objects import StatusSnapshot


@dataclass
class OvenState:
    """
    State of the single supervised oven.

    Only the supervisor mutates this entity, and only while holding its lock.
    The transition methods below keep the fields jointly consistent; callers
    are responsible for issuing the matching hardware commands.
    """

    door_open: bool = False
    heater_running: bool = False
    light_on: bool = False
    remaining_seconds: int = 0
    degraded: bool = False
    fault_reason: Optional[str] = None

    def set_door(self, is_open: bool) -> None:
        """Record a door signal; the light follows the door."""
        self.door_open = is_open
        self.light_on = is_open

    def start_session(self, seconds: int) -> None:
        """Begin a fresh cook session."""
        if seconds <= 0:
            raise ValueError("Cook session must be at least one second")
        self.remaining_seconds = seconds
        self.heater_running = True

    def extend_session(self, seconds: int) -> None:
        """Add time to the running session."""
        if not self.heater_running:
            raise ValueError("Cannot extend an idle session")
        self.remaining_seconds += seconds

    def end_session(self) -> None:
        """Return to idle."""
        self.heater_running = False
        self.remaining_seconds = 0

    def tick(self) -> int:
        """Consume one second of the session and return what is left."""
        if self.remaining_seconds > 0:
            self.remaining_seconds -= 1
        return self.remaining_seconds

    def mark_degraded(self, reason: str) -> None:
        self.degraded = True
        self.fault_reason = reason

    def clear_fault(self) -> None:
        self.degraded = False
        self.fault_reason = None

    def invariant_violations(self) -> List[str]:
        """List every broken invariant (empty when the state is consistent)."""
        violations = []
        if self.door_open and self.heater_running:
            violations.append("heater running with door open")
        if self.heater_running and self.remaining_seconds <= 0:
            violations.append("heater running with no time remaining")
        if self.remaining_seconds < 0:
            violations.append("negative remaining time")
        if self.degraded and self.heater_running:
            violations.append("heater running while degraded")
        if self.light_on != self.door_open:
            violations.append("light does not follow door")
        return violations

    def snapshot(self) -> StatusSnapshot:
        """Produce an immutable projection of the current state."""
        return StatusSnapshot(
            door_open=self.door_open,
            heater_running=self.heater_running,
            light_on=self.light_on,
            remaining_seconds=self.remaining_seconds,
            degraded=self.degraded,
            fault_reason=self.fault_reason,
        )
