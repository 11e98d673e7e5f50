# Area: Core
"""
rps_referee._core.state_machine — Round State Machine
=====================================================

Tracks one round from set-up to its terminal state. Every transition
is one-way; a resolved or aborted round accepts no further events.
"""

import logging

from .enums import RoundState, RoundEvent
from ..errors import ProtocolOrderError

logger = logging.getLogger("rps_referee.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RoundState.INITIALIZED: {
        RoundEvent.COMMIT: RoundState.OPPONENT_COMMITTED,
        RoundEvent.ABORT: RoundState.ABORTED,
    },
    RoundState.OPPONENT_COMMITTED: {
        RoundEvent.PUBLISH: RoundState.AWAITING_HUMAN_MOVE,
    },
    RoundState.AWAITING_HUMAN_MOVE: {
        RoundEvent.RESOLVE: RoundState.RESOLVED,
        RoundEvent.ABORT: RoundState.ABORTED,
    },
    RoundState.RESOLVED: {},
    RoundState.ABORTED: {},
}

TERMINAL_STATES = frozenset({RoundState.RESOLVED, RoundState.ABORTED})


class RoundStateMachine:
    """
    State machine for a single round.

    Attributes:
        current_state: The current state of the round
        round_id: Label used in log lines
    """

    def __init__(self, round_id: str = "round"):
        """Initialize state machine in INITIALIZED."""
        self.current_state = RoundState.INITIALIZED
        self.round_id = round_id

    @property
    def is_terminal(self) -> bool:
        return self.current_state in TERMINAL_STATES

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RoundEvent) -> RoundState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ProtocolOrderError: If the event is not allowed in the current state
        """
        if not self.can_transition(event):
            raise ProtocolOrderError(event.value.lower(), self.current_state.value)

        next_state = TRANSITIONS[self.current_state][event]
        logger.info(
            f"[{self.round_id}] State: {self.current_state.value} → {next_state.value}",
            extra={"round_id": self.round_id},
        )
        self.current_state = next_state
        return next_state
