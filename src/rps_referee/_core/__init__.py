# Area: Core
"""
Core - Single-round game logic.

This package handles:
- Move list validation
- Win/lose/draw relation building
- Commit-reveal of the opponent's move
- Round state tracking and resolution
"""

from .moves import Move, MoveSet, validate_moves
from .relation import Outcome, RelationMatrix, build_relation_matrix
from .commitment import Commitment, compute_digest, generate_key, verify_commitment
from .enums import RoundState, RoundEvent
from .state_machine import RoundStateMachine
from .round_result import RoundResult
from .engine import GameEngine, parse_selection

__all__ = [
    "Move",
    "MoveSet",
    "validate_moves",
    "Outcome",
    "RelationMatrix",
    "build_relation_matrix",
    "Commitment",
    "compute_digest",
    "generate_key",
    "verify_commitment",
    "RoundState",
    "RoundEvent",
    "RoundStateMachine",
    "RoundResult",
    "GameEngine",
    "parse_selection",
]
