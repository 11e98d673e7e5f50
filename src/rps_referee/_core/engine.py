# Area: Core
"""
rps_referee._core.engine — One round of the game
================================================

GameEngine runs a single round against the automated opponent:

1. ``start()`` picks the opponent's move with the CSPRNG, commits to it
   and returns the digest, before the human is asked anything.
2. ``submit_human_move()`` / ``submit_selection()`` take the human's
   move, look up the outcome and reveal the key.

Invalid selections raise InvalidSelectionError and leave the round
waiting for another try. The interactive loop lives in the runner.
"""

from __future__ import annotations
import logging
import secrets
import uuid
from typing import Any, Optional

from .commitment import (
    Commitment,
    DEFAULT_DIGEST_ALGORITHM,
    DEFAULT_KEY_BYTES,
    check_key_bytes,
    normalize_digest_algorithm,
)
from .enums import RoundEvent, RoundState
from .moves import Move, MoveSet
from .relation import RelationMatrix, build_relation_matrix
from .round_result import RoundResult
from .state_machine import RoundStateMachine
from ..errors import InvalidSelectionError, ProtocolOrderError, RandomSourceUnavailableError

logger = logging.getLogger("rps_referee.engine")


def pick_opponent_ordinal(move_count: int) -> int:
    """Uniform ordinal in [0, move_count) from the CSPRNG."""
    try:
        return secrets.randbelow(move_count)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailableError("opponent move selection", exc) from exc


def parse_selection(raw: Any, move_count: int) -> int:
    """
    Convert a 1-based selection as typed by a human into an ordinal.

    Parameters
    ----------
    raw : Any
        Text such as "2", or an int. Surrounding whitespace is ignored.
    move_count : int
        Number of moves on offer.

    Returns
    -------
    int
        Zero-based ordinal.

    Raises
    ------
    InvalidSelectionError
        If ``raw`` is not a whole number from 1 to ``move_count``.
    """
    if isinstance(raw, bool):
        raise InvalidSelectionError(raw, move_count)
    if isinstance(raw, int):
        number = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        number = int(raw.strip())
    else:
        raise InvalidSelectionError(raw, move_count)

    if not 1 <= number <= move_count:
        raise InvalidSelectionError(raw, move_count)
    return number - 1


class GameEngine:
    """
    Orchestrates one commit-reveal round.

    Usage
    -----
        move_set = validate_moves(["rock", "paper", "scissors"])
        engine = GameEngine(move_set)
        digest = engine.start()          # show this to the human first
        result = engine.submit_selection("2")
        assert result.verify()

    A key length outside 16..1024 bytes or an unsupported digest
    algorithm raises ValueError here, before the round has any state.
    """

    def __init__(
        self,
        move_set: MoveSet,
        key_bytes: int = DEFAULT_KEY_BYTES,
        digest_algorithm: str = DEFAULT_DIGEST_ALGORITHM,
        round_id: Optional[str] = None,
    ):
        self.round_id = round_id or uuid.uuid4().hex[:8]
        self._log_context = {"round_id": self.round_id}
        self._move_set = move_set
        self._matrix = build_relation_matrix(move_set)
        self._key_bytes = check_key_bytes(key_bytes)
        self._digest_algorithm = normalize_digest_algorithm(digest_algorithm)
        self._commitment: Optional[Commitment] = None
        self._result: Optional[RoundResult] = None
        self._sm = RoundStateMachine(round_id=self.round_id)
        logger.info(
            f"[{self.round_id}] Round initialized with {len(move_set)} moves",
            extra=self._log_context,
        )

    # ── Read-only views ──────────────────────────────────────

    @property
    def state(self) -> RoundState:
        return self._sm.current_state

    @property
    def move_set(self) -> MoveSet:
        return self._move_set

    @property
    def matrix(self) -> RelationMatrix:
        return self._matrix

    @property
    def digest(self) -> Optional[str]:
        """Published digest, or None before ``start()``."""
        return self._commitment.digest if self._commitment else None

    @property
    def digest_algorithm(self) -> str:
        return self._digest_algorithm

    @property
    def result(self) -> Optional[RoundResult]:
        return self._result

    # ── Protocol steps ───────────────────────────────────────

    def start(self) -> str:
        """Commit to the opponent's move and return the digest to publish."""
        if self.state is not RoundState.INITIALIZED:
            raise ProtocolOrderError("start the round", self.state.value)

        try:
            opponent = self._move_set[pick_opponent_ordinal(len(self._move_set))]
            self._commitment = Commitment(
                opponent,
                key_bytes=self._key_bytes,
                algorithm=self._digest_algorithm,
            )
        except RandomSourceUnavailableError:
            logger.error(
                f"[{self.round_id}] Secure random source unavailable",
                extra=self._log_context,
            )
            self._sm.transition(RoundEvent.ABORT)
            raise
        self._sm.transition(RoundEvent.COMMIT)

        self._sm.transition(RoundEvent.PUBLISH)
        logger.info(
            f"[{self.round_id}] Published digest {self._commitment.digest}",
            extra=self._log_context,
        )
        return self._commitment.digest

    def submit_selection(self, raw: Any) -> RoundResult:
        """Resolve the round from a 1-based selection such as "3"."""
        self._require_awaiting("submit a move")
        return self.submit_human_move(parse_selection(raw, len(self._move_set)))

    def submit_human_move(self, ordinal: int) -> RoundResult:
        """Resolve the round with the human's zero-based ordinal."""
        self._require_awaiting("submit a move")
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise InvalidSelectionError(ordinal, len(self._move_set))
        if not 0 <= ordinal < len(self._move_set):
            raise InvalidSelectionError(ordinal + 1, len(self._move_set))

        commitment: Commitment = self._commitment  # set by start()
        human: Move = self._move_set[ordinal]
        opponent = commitment.move
        outcome = self._matrix.outcome(human.ordinal, opponent.ordinal)

        commitment.close()
        self._result = RoundResult(
            human_move=human,
            opponent_move=opponent,
            outcome=outcome,
            revealed_key=commitment.reveal(),
            digest=commitment.digest,
            digest_algorithm=self._digest_algorithm,
        )
        self._sm.transition(RoundEvent.RESOLVE)
        logger.info(
            f"[{self.round_id}] Resolved: {human.name} vs {opponent.name} → {outcome.value}",
            extra=self._log_context,
        )
        return self._result

    def request_help(self) -> RelationMatrix:
        """Return the outcome table; allowed in any state."""
        return self._matrix

    def abort(self) -> None:
        """End the round without a result. The key is never revealed."""
        self._sm.transition(RoundEvent.ABORT)
        logger.info(
            f"[{self.round_id}] Round aborted",
            extra=self._log_context,
        )

    def _require_awaiting(self, operation: str) -> None:
        if self.state is not RoundState.AWAITING_HUMAN_MOVE:
            raise ProtocolOrderError(operation, self.state.value)
