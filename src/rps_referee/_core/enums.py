# Area: Core
"""
rps_referee._core.enums — Round State Machine Enums
===================================================

Defines the states and events of a single referee round.
"""

from enum import Enum


class RoundState(Enum):
    """
    States of one round.

    State transitions:
    INITIALIZED -> OPPONENT_COMMITTED (on COMMIT)
    OPPONENT_COMMITTED -> AWAITING_HUMAN_MOVE (on PUBLISH)
    AWAITING_HUMAN_MOVE -> RESOLVED (on RESOLVE)
    INITIALIZED -> ABORTED (on ABORT)
    AWAITING_HUMAN_MOVE -> ABORTED (on ABORT)
    RESOLVED and ABORTED are terminal.
    """
    INITIALIZED = "INITIALIZED"
    OPPONENT_COMMITTED = "OPPONENT_COMMITTED"
    AWAITING_HUMAN_MOVE = "AWAITING_HUMAN_MOVE"
    RESOLVED = "RESOLVED"
    ABORTED = "ABORTED"


class RoundEvent(Enum):
    """
    Events that drive a round forward.

    - COMMIT: opponent move picked and commitment built
    - PUBLISH: digest handed to the human
    - RESOLVE: valid human move received, key revealed
    - ABORT: human left, or the round could not start
    """
    COMMIT = "COMMIT"
    PUBLISH = "PUBLISH"
    RESOLVE = "RESOLVE"
    ABORT = "ABORT"
