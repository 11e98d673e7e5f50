# Area: Core
"""
rps_referee._core.moves — Move list validation
==============================================

Turns a caller-supplied list of move names into an immutable MoveSet.
A usable list has an odd number of entries, at least three, and no
two entries that compare equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple
import logging

from ..errors import InvalidMoveSetError, MoveSetIssue

logger = logging.getLogger("rps_referee.moves")

MIN_MOVES = 3


@dataclass(frozen=True)
class Move:
    """A move name and its zero-based position in the configured list."""
    name: str
    ordinal: int

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MoveSet:
    """Ordered, duplicate-free, odd-sized sequence of moves for one round."""
    moves: Tuple[Move, ...]

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __getitem__(self, ordinal: int) -> Move:
        return self.moves[ordinal]

    @property
    def names(self) -> List[str]:
        return [move.name for move in self.moves]


def is_odd_and_large_enough(names: Sequence[str]) -> bool:
    return len(names) >= MIN_MOVES and len(names) % 2 == 1


def find_duplicates(names: Sequence[str]) -> List[str]:
    """Return each repeated name once, in order of first repetition."""
    seen = set()
    duplicates: List[str] = []
    for name in names:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates


def validate_moves(names: Sequence[str]) -> MoveSet:
    """
    Validate a candidate move list and build its MoveSet.

    Parameters
    ----------
    names : Sequence[str]
        Move names in the order given by the caller. The order defines
        each move's ordinal and therefore the whole win/lose relation.

    Returns
    -------
    MoveSet
        The validated, immutable move set.

    Raises
    ------
    InvalidMoveSetError
        With reason EVEN_OR_TOO_SHORT when the count is even or below 3,
        or DUPLICATE_ENTRIES when a name appears more than once. The
        count is checked first.
    """
    names = list(names)

    if not is_odd_and_large_enough(names):
        logger.info(f"Rejected move list with {len(names)} entries")
        raise InvalidMoveSetError(MoveSetIssue.EVEN_OR_TOO_SHORT, names)

    duplicates = find_duplicates(names)
    if duplicates:
        logger.info(f"Rejected move list with duplicates: {duplicates}")
        raise InvalidMoveSetError(MoveSetIssue.DUPLICATE_ENTRIES, names, duplicates)

    return MoveSet(moves=tuple(Move(name=name, ordinal=i) for i, name in enumerate(names)))
