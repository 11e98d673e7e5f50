# Area: Shared
"""
rps_referee.cli — Command-line interface
========================================

Provides the CLI entry point for playing a round and checking its proof.

Usage:
    python -m rps_referee play rock paper scissors
    python -m rps_referee play rock spock paper lizard scissors --json
    python -m rps_referee table rock paper scissors
    python -m rps_referee table rock paper scissors --json
    python -m rps_referee verify --key <hex> --move paper --digest <hex>

Settings other than the moves can also come from a JSON file (--config)
or from RPS_* environment variables, including a local .env file.
"""

import argparse
import json
import sys
from typing import List, Optional

from ._core.commitment import DEFAULT_DIGEST_ALGORITHM, verify_commitment
from ._core.moves import validate_moves
from ._core.relation import build_relation_matrix
from ._runner_config import load_config
from ._shared.display import render_relation_table
from ._shared.logging_config import setup_logging
from .errors import ConfigurationError, InvalidMoveSetError, RPSRefereeError
from .runner import EXIT_FAILURE, EXIT_OK, RoundRunner

EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="rps-referee",
        description="Generalized rock-paper-scissors with a provably fair opponent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rps-referee play rock paper scissors
  rps-referee play rock spock paper lizard scissors --json
  rps-referee table rock paper scissors
  rps-referee verify --key <hex> --move paper --digest <hex>
        """,
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play one round against the computer")
    play.add_argument("moves", nargs="*", help="Odd number (3+) of distinct move names")
    play.add_argument("--config", type=str, help="Path to JSON config file")
    play.add_argument("--key-bytes", type=int, default=None, help="Secret key length in bytes")
    play.add_argument("--digest-algorithm", default=None, help="hashlib name for the HMAC")
    play.add_argument("--log-file", default=None, help="Path of the JSON log file")
    play.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    play.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        default=None,
        help="Also print the round result as JSON",
    )

    table = sub.add_parser("table", help="Print the win/lose table for a move list")
    table.add_argument("moves", nargs="+", help="Odd number (3+) of distinct move names")
    table.add_argument(
        "--json",
        dest="output_json",
        action="store_true",
        help="Print the table as JSON instead of a grid",
    )

    verify = sub.add_parser("verify", help="Check a revealed key against a published HMAC")
    verify.add_argument("--key", required=True, help="Revealed HMAC key (hex)")
    verify.add_argument("--move", required=True, help="The computer's move")
    verify.add_argument("--digest", required=True, help="HMAC published before you moved (hex)")
    verify.add_argument("--digest-algorithm", default=DEFAULT_DIGEST_ALGORITHM)

    return parser.parse_args(argv)


def report_startup_error(error: RPSRefereeError) -> int:
    """Print an error raised before logging is configured and return the exit code."""
    print(error.format_error_log(), file=sys.stderr)
    return EXIT_FAILURE


def run_play(args: argparse.Namespace) -> int:
    overrides = {
        "moves": args.moves or None,
        "key_bytes": args.key_bytes,
        "digest_algorithm": args.digest_algorithm,
        "log_file": args.log_file,
        "log_level": args.log_level,
        "output_json": args.output_json,
    }
    try:
        config = load_config(args.config, overrides)
    except ConfigurationError as e:
        return report_startup_error(e)

    setup_logging(log_file_path=config.log_file, level=config.log_level)
    return RoundRunner(config).run()


def run_table(args: argparse.Namespace) -> int:
    try:
        move_set = validate_moves(args.moves)
    except InvalidMoveSetError as e:
        return report_startup_error(e)

    matrix = build_relation_matrix(move_set)
    if args.output_json:
        print(json.dumps(matrix.to_dict(), indent=2))
    else:
        print(render_relation_table(matrix))
    return EXIT_OK


def run_verify(args: argparse.Namespace) -> int:
    try:
        ok = verify_commitment(
            expected_digest=args.digest,
            key=args.key,
            move_name=args.move,
            algorithm=args.digest_algorithm,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print("OK" if ok else "MISMATCH")
    return EXIT_OK if ok else EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    if args.cmd == "table":
        return run_table(args)
    if args.cmd == "verify":
        return run_verify(args)
    return run_play(args)
