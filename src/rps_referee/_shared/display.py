# Area: Shared
"""
rps_referee._shared.display — Text rendering for the prompt loop
================================================================

Prompt texts and renderers for the move menu, the outcome table
and the round result. Nothing here touches the terminal directly;
the runner decides where the strings go.
"""

from __future__ import annotations
from typing import List

from tabulate import tabulate

from .._core.moves import MoveSet
from .._core.relation import Outcome, RelationMatrix
from .._core.round_result import RoundResult

# ══════════════════════════════════════════════════════════════
# PROMPT TEXTS
# ══════════════════════════════════════════════════════════════

AVAILABLE_MOVES = "Available moves:"
PLAYER_MOVE = "Your move:"
COMPUTER_MOVE = "Computer move:"
DIGEST_LABEL = "HMAC:"
KEY_LABEL = "HMAC key:"
INVALID_INPUT = "Invalid input, try again."
TABLE_CORNER = "You \\ PC"

# ══════════════════════════════════════════════════════════════
# OUTCOME → VERDICT (human's side)
# ══════════════════════════════════════════════════════════════

VERDICTS = {
    Outcome.DRAW: "It's a Draw",
    Outcome.WIN: "You Win!",
    Outcome.LOSE: "You Lose :(",
}


def render_menu(move_set: MoveSet, exit_command: str, help_command: str) -> str:
    """Numbered move list followed by the exit and help sentinels."""
    lines = [AVAILABLE_MOVES]
    for move in move_set:
        lines.append(f"{move.ordinal + 1} - {move.name}")
    lines.append(f"{exit_command} - exit")
    lines.append(f"{help_command} - help")
    return "\n".join(lines)


def render_relation_table(matrix: RelationMatrix) -> str:
    """
    Render the outcome table as a text grid.

    Rows are the human's move, columns the computer's move, and each
    cell reads from the human's side.
    """
    header = [TABLE_CORNER] + matrix.move_set.names
    body: List[List[str]] = [
        [move.name] + [o.value for o in matrix.row(move.ordinal)]
        for move in matrix.move_set
    ]
    return tabulate(body, headers=header, tablefmt="grid", disable_numparse=True)


def render_result(result: RoundResult) -> str:
    return "\n".join([
        f"{PLAYER_MOVE} {result.human_move.name}",
        f"{COMPUTER_MOVE} {result.opponent_move.name}",
        VERDICTS[result.outcome],
        f"{KEY_LABEL} {result.revealed_key}",
    ])
