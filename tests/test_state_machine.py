# Area: Round Tests
"""Tests for the round state machine."""

import pytest

from tx_battle._round.enums import RoundEvent, RoundStatus
from tx_battle._round.state_machine import TRANSITIONS, RoundStateMachine
from tx_battle.errors import InvalidStateError


class TestRoundStateMachine:
    """Tests for RoundStateMachine."""

    def test_starts_idle(self):
        assert RoundStateMachine().current_status == RoundStatus.IDLE

    def test_full_cycle(self):
        sm = RoundStateMachine()
        assert sm.transition(RoundEvent.START) == RoundStatus.ACTIVE
        assert sm.transition(RoundEvent.RESOLVE) == RoundStatus.RESOLVED
        assert sm.transition(RoundEvent.RESET) == RoundStatus.IDLE

    def test_abandon_from_active(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.START)
        assert sm.transition(RoundEvent.RESET) == RoundStatus.IDLE

    @pytest.mark.parametrize("status,event", [
        (RoundStatus.IDLE, RoundEvent.RESOLVE),
        (RoundStatus.IDLE, RoundEvent.RESET),
        (RoundStatus.ACTIVE, RoundEvent.START),
        (RoundStatus.RESOLVED, RoundEvent.START),
        (RoundStatus.RESOLVED, RoundEvent.RESOLVE),
    ])
    def test_invalid_transitions_raise(self, status, event):
        sm = RoundStateMachine()
        sm.current_status = status
        assert sm.can_transition(event) is False
        with pytest.raises(InvalidStateError) as exc_info:
            sm.transition(event)
        assert exc_info.value.status == status.value
        assert sm.current_status == status

    def test_error_names_operation(self):
        sm = RoundStateMachine()
        with pytest.raises(InvalidStateError) as exc_info:
            sm.transition(RoundEvent.RESOLVE, "resolve")
        assert exc_info.value.operation == "resolve"
        assert "idle" in str(exc_info.value)

    def test_every_status_has_transitions(self):
        assert set(TRANSITIONS) == set(RoundStatus)
