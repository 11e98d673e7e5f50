# Area: Core Tests
"""Tests for move list validation."""

import pytest

from rps_referee._core.moves import Move, MoveSet, find_duplicates, validate_moves
from rps_referee.errors import InvalidMoveSetError, MoveSetIssue


class TestValidateMovesAccepts:
    """Odd-sized, duplicate-free lists of 3+ are accepted."""

    @pytest.mark.parametrize("size", [3, 5, 7, 9, 21])
    def test_odd_sizes_accepted(self, size):
        names = [f"m{i}" for i in range(size)]
        move_set = validate_moves(names)
        assert len(move_set) == size

    def test_ordinals_follow_input_order(self):
        move_set = validate_moves(["rock", "paper", "scissors"])
        assert move_set[0] == Move(name="rock", ordinal=0)
        assert move_set[2] == Move(name="scissors", ordinal=2)
        assert move_set.names == ["rock", "paper", "scissors"]

    def test_names_are_case_sensitive(self):
        """Exact string equality: 'Rock' and 'rock' are different moves."""
        move_set = validate_moves(["Rock", "rock", "ROCK"])
        assert len(move_set) == 3

    def test_move_set_is_immutable(self):
        move_set = validate_moves(["a", "b", "c"])
        assert isinstance(move_set.moves, tuple)
        with pytest.raises(AttributeError):
            move_set.moves = ()  # type: ignore[misc]

    def test_accepts_any_sequence(self):
        move_set = validate_moves(("a", "b", "c"))
        assert isinstance(move_set, MoveSet)


class TestValidateMovesRejects:
    """Even, too short, or duplicated lists are rejected with a reason."""

    def test_two_moves_rejected(self):
        with pytest.raises(InvalidMoveSetError) as exc_info:
            validate_moves(["Rock", "Paper"])
        assert exc_info.value.reason is MoveSetIssue.EVEN_OR_TOO_SHORT

    @pytest.mark.parametrize("size", [0, 1, 2, 4, 6])
    def test_bad_counts_rejected(self, size):
        with pytest.raises(InvalidMoveSetError) as exc_info:
            validate_moves([f"m{i}" for i in range(size)])
        assert exc_info.value.reason is MoveSetIssue.EVEN_OR_TOO_SHORT

    def test_duplicates_rejected(self):
        with pytest.raises(InvalidMoveSetError) as exc_info:
            validate_moves(["Rock", "Rock", "Paper"])
        assert exc_info.value.reason is MoveSetIssue.DUPLICATE_ENTRIES
        assert exc_info.value.duplicates == ["Rock"]

    def test_count_checked_before_duplicates(self):
        """An even list with duplicates reports the count problem."""
        with pytest.raises(InvalidMoveSetError) as exc_info:
            validate_moves(["a", "a", "b", "c"])
        assert exc_info.value.reason is MoveSetIssue.EVEN_OR_TOO_SHORT

    def test_error_keeps_moves(self):
        with pytest.raises(InvalidMoveSetError) as exc_info:
            validate_moves(["x", "y"])
        assert exc_info.value.moves == ["x", "y"]


class TestFindDuplicates:
    """Tests for find_duplicates()."""

    def test_no_duplicates(self):
        assert find_duplicates(["a", "b", "c"]) == []

    def test_each_duplicate_reported_once(self):
        assert find_duplicates(["a", "b", "a", "a", "b"]) == ["a", "b"]
