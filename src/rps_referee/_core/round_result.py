# Area: Core
"""
rps_referee._core.round_result — Round Result Dataclass
=======================================================

Defines the RoundResult that GameEngine returns once the human has
moved. It carries everything needed to check the opponent's honesty
after the fact.
"""

from dataclasses import dataclass

from .commitment import verify_commitment
from .moves import Move
from .relation import Outcome
from ..types import RoundResultPayload


@dataclass(frozen=True)
class RoundResult:
    """
    Complete result of one round.

    Attributes:
        human_move: The human's move
        opponent_move: The opponent's committed move
        outcome: Outcome from the human's side (WIN means the human won)
        revealed_key: Secret key, disclosed only after the human moved (hex)
        digest: HMAC published before the human moved (hex)
        digest_algorithm: hashlib name used for the HMAC
    """

    human_move: Move
    opponent_move: Move
    outcome: Outcome
    revealed_key: str
    digest: str
    digest_algorithm: str

    def verify(self) -> bool:
        """Recompute the digest from the revealed key and opponent move."""
        return verify_commitment(
            expected_digest=self.digest,
            key=self.revealed_key,
            move_name=self.opponent_move.name,
            algorithm=self.digest_algorithm,
        )

    def to_dict(self) -> RoundResultPayload:
        return {
            "human_move": {"name": self.human_move.name, "ordinal": self.human_move.ordinal},
            "opponent_move": {
                "name": self.opponent_move.name,
                "ordinal": self.opponent_move.ordinal,
            },
            "outcome": self.outcome.value,
            "digest": self.digest,
            "revealed_key": self.revealed_key,
            "digest_algorithm": self.digest_algorithm,
        }
