"""
rps_referee — Provably fair generalized rock-paper-scissors
===========================================================

Play any odd number (3 or more) of distinct moves against a computer
opponent that commits to its move before you choose yours.

Quick Start (command line):
    python -m rps_referee play rock paper scissors

Library use:
    from rps_referee import GameEngine, validate_moves
    engine = GameEngine(validate_moves(["rock", "paper", "scissors"]))
    digest = engine.start()           # published before you move
    result = engine.submit_selection("1")
    assert result.verify()            # key + opponent move reproduce the digest

Each move beats the half of the list that follows it (wrapping around)
and loses to the half that precedes it.
"""

from ._core import (
    Move,
    MoveSet,
    validate_moves,
    Outcome,
    RelationMatrix,
    build_relation_matrix,
    Commitment,
    compute_digest,
    verify_commitment,
    RoundState,
    RoundResult,
    GameEngine,
)
from ._runner_config import GameConfig, load_config
from .runner import RoundRunner
from .errors import (
    RPSRefereeError,
    MoveSetIssue,
    InvalidMoveSetError,
    InvalidSelectionError,
    RandomSourceUnavailableError,
    ProtocolOrderError,
    ConfigurationError,
)
from .types import MovePayload, RoundResultPayload, RelationTablePayload

__all__ = [
    # Core
    "Move",
    "MoveSet",
    "validate_moves",
    "Outcome",
    "RelationMatrix",
    "build_relation_matrix",
    "Commitment",
    "compute_digest",
    "verify_commitment",
    "RoundState",
    "RoundResult",
    "GameEngine",
    # Running
    "GameConfig",
    "load_config",
    "RoundRunner",
    # Errors
    "RPSRefereeError",
    "MoveSetIssue",
    "InvalidMoveSetError",
    "InvalidSelectionError",
    "RandomSourceUnavailableError",
    "ProtocolOrderError",
    "ConfigurationError",
    # Payload types
    "MovePayload",
    "RoundResultPayload",
    "RelationTablePayload",
]
__version__ = "1.0.0"
