"""
Unit tests for the OvenState entity.
"""

import pytest

from oven_supervisor.domain.entities import OvenState
from oven_supervisor.domain.value_objects import HeaterState, StatusSnapshot


pytestmark = pytest.mark.unit


class TestOvenState:
    """Tests for OvenState transitions."""

    def test_defaults(self):
        state = OvenState()

        assert state.door_open is False
        assert state.heater_running is False
        assert state.light_on is False
        assert state.remaining_seconds == 0
        assert state.degraded is False
        assert state.fault_reason is None
        assert state.snapshot().heater_state is HeaterState.IDLE
        assert state.invariant_violations() == []

    @pytest.mark.parametrize("is_open", [True, False])
    def test_light_follows_door(self, is_open):
        state = OvenState()

        state.set_door(is_open)

        assert state.door_open is is_open
        assert state.light_on is is_open

    def test_start_session(self):
        state = OvenState()

        state.start_session(60)

        assert state.heater_running is True
        assert state.remaining_seconds == 60
        assert state.snapshot().heater_state is HeaterState.HEATING

    def test_start_session_rejects_zero(self):
        with pytest.raises(ValueError):
            OvenState().start_session(0)

    def test_extend_session(self):
        state = OvenState()
        state.start_session(60)

        state.extend_session(60)

        assert state.remaining_seconds == 120

    def test_extend_idle_session_rejected(self):
        with pytest.raises(ValueError, match="idle"):
            OvenState().extend_session(60)

    def test_tick_stops_at_zero(self):
        state = OvenState()
        state.start_session(1)

        assert state.tick() == 0
        assert state.tick() == 0
        assert state.remaining_seconds == 0

    def test_end_session(self):
        state = OvenState()
        state.start_session(30)

        state.end_session()

        assert state.heater_running is False
        assert state.remaining_seconds == 0

    def test_degraded_and_clear(self):
        state = OvenState()

        state.mark_degraded("heater_on failed")
        assert state.degraded is True
        assert state.fault_reason == "heater_on failed"

        state.clear_fault()
        assert state.degraded is False
        assert state.fault_reason is None


class TestInvariantViolations:
    """Tests for the consistency check."""

    def test_heater_with_door_open(self):
        state = OvenState(door_open=True, light_on=True, heater_running=True, remaining_seconds=5)

        assert "heater running with door open" in state.invariant_violations()

    def test_heater_without_time(self):
        state = OvenState(heater_running=True, remaining_seconds=0)

        assert "heater running with no time remaining" in state.invariant_violations()

    def test_light_mismatch(self):
        state = OvenState(door_open=True, light_on=False)

        assert state.invariant_violations() == ["light does not follow door"]

    def test_heater_while_degraded(self):
        state = OvenState(heater_running=True, remaining_seconds=10, degraded=True)

        assert "heater running while degraded" in state.invariant_violations()


class TestSnapshot:
    """Tests for StatusSnapshot projection."""

    def test_snapshot_copies_fields(self):
        state = OvenState()
        state.start_session(42)

        snapshot = state.snapshot()

        assert isinstance(snapshot, StatusSnapshot)
        assert snapshot.heater_running is True
        assert snapshot.remaining_seconds == 42
        assert snapshot.message == "Current Microwave Oven Status"

    def test_snapshot_is_detached_from_state(self):
        state = OvenState()
        state.start_session(42)
        snapshot = state.snapshot()

        state.tick()

        assert snapshot.remaining_seconds == 42

    def test_snapshot_is_immutable(self):
        snapshot = OvenState().snapshot()

        with pytest.raises(AttributeError):
            snapshot.remaining_seconds = 10

    def test_snapshot_rejects_negative_time(self):
        with pytest.raises(ValueError):
            StatusSnapshot(door_open=False, heater_running=False, light_on=False, remaining_seconds=-1)

    def test_snapshot_carries_fault(self):
        state = OvenState()
        state.set_door(True)
        state.mark_degraded("light_on failed")

        snapshot = state.snapshot()

        assert snapshot.door_open is True
        assert snapshot.light_on is True
        assert snapshot.message == "Current Microwave Oven Status"
        assert snapshot.degraded is True
        assert snapshot.fault_reason == "light_on failed"
