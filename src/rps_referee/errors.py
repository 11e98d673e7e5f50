"""
rps_referee.errors — Custom exception classes
=============================================

Defines the exception hierarchy for a single referee round.

Fatal errors (invalid move set, unusable random source, out-of-order
protocol steps, bad configuration) end the round before or instead of
a result. ``InvalidSelectionError`` is the only recoverable error: it is
reported back to the prompt loop, which asks again.

Each fatal exception stores its context and can render a structured
block via ``format_error_log()``.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional, Sequence

from .error_formatter import format_error_block


class MoveSetIssue(Enum):
    """Why a candidate move list was rejected."""
    EVEN_OR_TOO_SHORT = "even_or_too_short"
    DUPLICATE_ENTRIES = "duplicate_entries"


class RPSRefereeError(Exception):
    """Base exception for all rps_referee errors."""

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=type(self).__name__,
            summary=str(self),
            payload=None,
            details=None,
        )


class InvalidMoveSetError(RPSRefereeError):
    """Raised when a move list is not an odd-sized, duplicate-free list of 3+ names."""

    def __init__(
        self,
        reason: MoveSetIssue,
        moves: Sequence[str],
        duplicates: Optional[List[str]] = None,
    ):
        self.reason = reason
        self.moves = list(moves)
        self.duplicates = duplicates or []
        if reason is MoveSetIssue.EVEN_OR_TOO_SHORT:
            message = (
                f"Expected an odd number of moves (at least 3), got {len(self.moves)}"
            )
        else:
            message = f"Duplicate moves are not allowed: {', '.join(self.duplicates)}"
        super().__init__(message)

    def format_error_log(self) -> str:
        details = [
            "Provide an odd number (3, 5, 7, ...) of distinct move names.",
            "Example: rock paper scissors",
        ]
        return format_error_block(
            error_type="INVALID_MOVE_SET",
            summary=str(self),
            payload={
                "reason": self.reason.value,
                "moves": self.moves,
                "duplicates": self.duplicates,
            },
            details=details,
        )


class InvalidSelectionError(RPSRefereeError):
    """Raised when the human's move choice is malformed or out of range."""

    def __init__(self, raw_selection: Any, move_count: int):
        self.raw_selection = raw_selection
        self.move_count = move_count
        super().__init__(
            f"Invalid selection {raw_selection!r}: choose a number from 1 to {move_count}"
        )


class RandomSourceUnavailableError(RPSRefereeError):
    """Raised when the operating system CSPRNG cannot produce random data."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Secure random source unavailable during {operation}{detail}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="RANDOM_SOURCE_UNAVAILABLE",
            summary=str(self),
            payload={"operation": self.operation},
            details=["No secure commitment or unbiased opponent move can be produced."],
        )


class ProtocolOrderError(RPSRefereeError):
    """Raised when a round step is requested in a state that does not allow it."""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while round is {state}")


class ConfigurationError(RPSRefereeError):
    """Raised when the game configuration fails validation."""

    def __init__(self, validation_errors: List[str]):
        self.validation_errors = validation_errors
        super().__init__(f"Invalid configuration: {validation_errors}")

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="CONFIGURATION_ERROR",
            summary="Configuration failed validation",
            payload=None,
            details=self.validation_errors,
        )
