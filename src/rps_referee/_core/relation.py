# Area: Core
"""
rps_referee._core.relation — Win/lose/draw relation
===================================================

Builds the full outcome table for a MoveSet. The table depends only on
the number of moves and their ordinals: each move beats the H moves
that follow it (wrapping around) and loses to the H moves before it,
where H = N // 2. With N odd, those two groups cover every other move
exactly once.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .moves import MoveSet
from ..types import RelationTablePayload


class Outcome(Enum):
    """Result of a move against another, from the first move's side."""
    DRAW = "Draw"
    WIN = "Win"
    LOSE = "Lose"


@dataclass(frozen=True)
class RelationMatrix:
    """
    N x N outcome table over ordinals.

    ``cells[i][j]`` is the outcome of move ``i`` played against move ``j``.

    Attributes:
        move_set: The moves the table was built for
        cells: Row-major outcomes, one row per move
    """

    move_set: MoveSet
    cells: Tuple[Tuple[Outcome, ...], ...]

    def outcome(self, ordinal: int, against: int) -> Outcome:
        return self.cells[ordinal][against]

    def row(self, ordinal: int) -> Tuple[Outcome, ...]:
        return self.cells[ordinal]

    def to_dict(self) -> RelationTablePayload:
        return {
            "moves": self.move_set.names,
            "rows": [[o.value for o in row] for row in self.cells],
        }


def build_relation_matrix(move_set: MoveSet) -> RelationMatrix:
    """Build the outcome table for a validated move set."""
    size = len(move_set)
    half = size // 2
    rows = [[Outcome.DRAW] * size for _ in range(size)]

    for i in range(size):
        for offset in range(1, half + 1):
            rows[i][(i + offset) % size] = Outcome.WIN
            rows[i][(i - offset + size) % size] = Outcome.LOSE

    return RelationMatrix(move_set=move_set, cells=tuple(tuple(row) for row in rows))
