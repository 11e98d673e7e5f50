"""
rps_referee.types — TypedDict schemas for exported payloads
===========================================================

Documents the exact structure of the dictionaries the package hands
out, so callers can consume them without importing internal classes.

    from rps_referee import RoundResultPayload, MovePayload
"""

from typing import List, TypedDict


class MovePayload(TypedDict):
    """A move as exported in results.

    Fields
    ------
    name : str
        The move name as configured, e.g. "rock".
    ordinal : int
        Zero-based position of the move in the configured list.
    """
    name: str
    ordinal: int


class RoundResultPayload(TypedDict):
    """Result of a resolved round, from the human's point of view.

    Fields
    ------
    human_move : MovePayload
    opponent_move : MovePayload
    outcome : str
        "Win", "Lose" or "Draw".
    digest : str
        HMAC published before the human moved (hex).
    revealed_key : str
        Secret key disclosed after the human moved (hex).
    digest_algorithm : str
        hashlib name of the HMAC hash, e.g. "sha3_256".
    """
    human_move: MovePayload
    opponent_move: MovePayload
    outcome: str
    digest: str
    revealed_key: str
    digest_algorithm: str


class RelationTablePayload(TypedDict):
    """The outcome table exported for help screens.

    Fields
    ------
    moves : List[str]
        Move names in ordinal order.
    rows : List[List[str]]
        ``rows[i][j]`` is the outcome of move i against move j.
    """
    moves: List[str]
    rows: List[List[str]]
