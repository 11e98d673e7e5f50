# Area: Core Tests
"""Tests for the round state machine and its enums."""

import pytest

from rps_referee._core.enums import RoundEvent, RoundState
from rps_referee._core.state_machine import TRANSITIONS, RoundStateMachine
from rps_referee.errors import ProtocolOrderError


class TestRoundEnums:
    """Tests for RoundState and RoundEvent."""

    def test_state_values(self):
        assert RoundState.INITIALIZED.value == "INITIALIZED"
        assert RoundState.OPPONENT_COMMITTED.value == "OPPONENT_COMMITTED"
        assert RoundState.AWAITING_HUMAN_MOVE.value == "AWAITING_HUMAN_MOVE"
        assert RoundState.RESOLVED.value == "RESOLVED"
        assert RoundState.ABORTED.value == "ABORTED"

    def test_state_count(self):
        assert len(RoundState) == 5

    def test_every_state_has_a_transition_entry(self):
        assert set(TRANSITIONS) == set(RoundState)

    def test_event_count(self):
        assert len(RoundEvent) == 4


class TestRoundStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state(self):
        sm = RoundStateMachine()
        assert sm.current_state == RoundState.INITIALIZED
        assert sm.is_terminal is False

    def test_can_transition(self):
        sm = RoundStateMachine()
        assert sm.can_transition(RoundEvent.COMMIT) is True
        assert sm.can_transition(RoundEvent.RESOLVE) is False

    def test_invalid_transition_raises(self):
        sm = RoundStateMachine()
        with pytest.raises(ProtocolOrderError):
            sm.transition(RoundEvent.RESOLVE)
        assert sm.current_state == RoundState.INITIALIZED


class TestRoundStateMachineTransitions:
    """Tests for specific transitions."""

    def test_happy_path(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.COMMIT)
        assert sm.current_state == RoundState.OPPONENT_COMMITTED
        sm.transition(RoundEvent.PUBLISH)
        assert sm.current_state == RoundState.AWAITING_HUMAN_MOVE
        sm.transition(RoundEvent.RESOLVE)
        assert sm.current_state == RoundState.RESOLVED
        assert sm.is_terminal

    def test_abort_from_initialized(self):
        sm = RoundStateMachine()
        assert sm.transition(RoundEvent.ABORT) == RoundState.ABORTED

    def test_abort_while_awaiting(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.COMMIT)
        sm.transition(RoundEvent.PUBLISH)
        assert sm.transition(RoundEvent.ABORT) == RoundState.ABORTED

    def test_no_abort_between_commit_and_publish(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.COMMIT)
        with pytest.raises(ProtocolOrderError):
            sm.transition(RoundEvent.ABORT)

    @pytest.mark.parametrize("event", list(RoundEvent))
    def test_terminal_states_accept_nothing(self, event):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.ABORT)
        with pytest.raises(ProtocolOrderError):
            sm.transition(event)

    def test_transition_logged(self, caplog):
        sm = RoundStateMachine(round_id="r1")
        with caplog.at_level("INFO", logger="rps_referee"):
            sm.transition(RoundEvent.COMMIT)
        assert any("INITIALIZED → OPPONENT_COMMITTED" in r.message for r in caplog.records)
