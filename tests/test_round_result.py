# Area: Core Tests
"""Tests for RoundResult."""

from dataclasses import replace

from rps_referee._core.commitment import compute_digest
from rps_referee._core.moves import Move
from rps_referee._core.relation import Outcome
from rps_referee._core.round_result import RoundResult

KEY = bytes(range(32))


def _result(**changes):
    result = RoundResult(
        human_move=Move("rock", 0),
        opponent_move=Move("scissors", 2),
        outcome=Outcome.LOSE,
        revealed_key=KEY.hex(),
        digest=compute_digest(KEY, "scissors"),
        digest_algorithm="sha3_256",
    )
    return replace(result, **changes)


class TestRoundResultVerify:
    """Tests for RoundResult.verify()."""

    def test_honest_result_verifies(self):
        assert _result().verify() is True

    def test_swapped_opponent_move_fails(self):
        assert _result(opponent_move=Move("paper", 1)).verify() is False

    def test_other_key_fails(self):
        assert _result(revealed_key=bytes(32).hex()).verify() is False


class TestRoundResultExport:
    """Tests for RoundResult.to_dict()."""

    def test_to_dict(self):
        data = _result().to_dict()
        assert data == {
            "human_move": {"name": "rock", "ordinal": 0},
            "opponent_move": {"name": "scissors", "ordinal": 2},
            "outcome": "Lose",
            "digest": compute_digest(KEY, "scissors"),
            "revealed_key": KEY.hex(),
            "digest_algorithm": "sha3_256",
        }
