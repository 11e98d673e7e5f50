"""
library_round.py — Drive a round from your own code
===================================================

Plays one round of rock-spock-paper-lizard-scissors without the
interactive prompt, then checks the opponent's commitment the way a
suspicious human would.

    python examples/library_round.py 3
"""

import logging
import sys

from rps_referee import GameEngine, InvalidSelectionError, validate_moves, verify_commitment

# ── Setup logging (so you can see the round's state changes) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

MOVES = ["Rock", "Spock", "Paper", "Lizard", "Scissors"]


def main() -> int:
    engine = GameEngine(validate_moves(MOVES))

    # The digest is fixed before we choose anything.
    published = engine.start()
    print(f"Published HMAC: {published}")

    choice = sys.argv[1] if len(sys.argv) > 1 else "1"
    try:
        result = engine.submit_selection(choice)
    except InvalidSelectionError as e:
        print(e)
        return 1

    print(f"You played {result.human_move} against {result.opponent_move}: {result.outcome.value}")

    honest = verify_commitment(
        expected_digest=published,
        key=result.revealed_key,
        move_name=result.opponent_move.name,
    )
    print("Commitment verified" if honest else "Commitment MISMATCH")
    return 0 if honest else 1


if __name__ == "__main__":
    raise SystemExit(main())
