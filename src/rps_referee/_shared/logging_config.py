# Area: Shared
"""
rps_referee._shared.logging_config — Structured logging setup
=============================================================

Two sinks for the package logger: a colored terminal stream on stderr
(stdout belongs to the round transcript) and a JSON-lines file. Records
logged with ``extra={"round_id": ...}`` or ``extra={"error_type": ...}``
carry those fields into the file.

Interactive mode mutes the terminal sink while the prompt loop is
talking to the human; the file keeps everything.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Union

if TYPE_CHECKING:
    from ..errors import RPSRefereeError

# Package logger
logger = logging.getLogger("rps_referee")

TERMINAL_FORMAT = "%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s"

# Optional record attributes copied into the JSON file
CONTEXT_FIELDS = ("round_id", "error_type")

_interactive_mode_enabled = False


class InteractiveFilter(logging.Filter):
    """Drops terminal records while a round is waiting for the human."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _interactive_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colors the level name; the record handed to other handlers is untouched."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with round context when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _terminal_handler(level: Union[int, str]) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(TerminalFormatter(fmt=TERMINAL_FORMAT, datefmt="%H:%M:%S"))
    handler.addFilter(InteractiveFilter())
    return handler


def _file_handler(log_file_path: str, level: Union[int, str]) -> logging.Handler:
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(
    log_file_path: str = "rps_referee.log",
    level: Union[int, str] = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Calling it again replaces the handlers from the previous call.

    Parameters
    ----------
    log_file_path : str
        JSON-lines log file. Parent directories are created as needed.
    level : int or str
        Logging level or level name. Defaults to INFO.
    """
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_terminal_handler(level))
    try:
        logger.addHandler(_file_handler(log_file_path, level))
    except OSError as e:
        logger.warning(f"Could not create log file: {e}")

    logger.propagate = False


def log_fatal_error(error: "RPSRefereeError") -> None:
    """
    Print the error's block to stderr and record it at ERROR.

    Parameters
    ----------
    error : RPSRefereeError
        The error that ended the round.
    """
    print(error.format_error_log(), file=sys.stderr)

    logger.error(
        f"Fatal error: {error.__class__.__name__}: {error}",
        extra={"error_type": error.__class__.__name__},
    )


def enable_interactive_mode() -> None:
    """Suppress terminal log records; file logging is unchanged."""
    global _interactive_mode_enabled
    _interactive_mode_enabled = True


def disable_interactive_mode() -> None:
    """Restore terminal log records."""
    global _interactive_mode_enabled
    _interactive_mode_enabled = False
