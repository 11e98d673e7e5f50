# Area: Shared Tests
"""Tests for logging setup and fatal error logging."""

import json
import logging
import sys

from rps_referee._shared import logging_config
from rps_referee._shared.logging_config import (
    InteractiveFilter,
    JSONFormatter,
    disable_interactive_mode,
    enable_interactive_mode,
    log_fatal_error,
    setup_logging,
)
from rps_referee.errors import ProtocolOrderError


def _flush():
    for handler in logging.getLogger("rps_referee").handlers:
        handler.flush()


def _records(log_file):
    return [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_json_lines(self, tmp_path):
        log_file = tmp_path / "sub" / "rps.log"
        setup_logging(log_file_path=str(log_file), level="DEBUG")
        logging.getLogger("rps_referee.engine").info("hello")
        _flush()
        record = _records(log_file)[-1]
        assert record["message"] == "hello"
        assert record["logger"] == "rps_referee.engine"
        assert record["level"] == "INFO"
        assert "round_id" not in record

    def test_replaces_handlers(self, tmp_path):
        setup_logging(log_file_path=str(tmp_path / "a.log"))
        setup_logging(log_file_path=str(tmp_path / "b.log"))
        pkg_logger = logging.getLogger("rps_referee")
        assert len(pkg_logger.handlers) == 2
        assert pkg_logger.propagate is False

    def test_unwritable_log_file_keeps_terminal(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        setup_logging(log_file_path=str(blocker / "rps.log"))
        assert len(logging.getLogger("rps_referee").handlers) == 1

    def test_round_id_reaches_file(self, tmp_path):
        from rps_referee._core.engine import GameEngine
        from rps_referee._core.moves import validate_moves

        log_file = tmp_path / "rps.log"
        setup_logging(log_file_path=str(log_file))
        engine = GameEngine(validate_moves(["a", "b", "c"]), round_id="r-42")
        engine.start()
        _flush()
        records = _records(log_file)
        assert records
        assert all(r.get("round_id") == "r-42" for r in records)


class TestInteractiveMode:
    """Tests for terminal suppression during the prompt loop."""

    def test_toggle(self):
        enable_interactive_mode()
        assert logging_config._interactive_mode_enabled is True
        disable_interactive_mode()
        assert logging_config._interactive_mode_enabled is False

    def test_filter(self):
        record = logging.makeLogRecord({"msg": "x"})
        enable_interactive_mode()
        assert InteractiveFilter().filter(record) is False
        disable_interactive_mode()
        assert InteractiveFilter().filter(record) is True


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.makeLogRecord({"msg": "failed", "exc_info": sys.exc_info()})
        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]

    def test_context_fields(self):
        record = logging.makeLogRecord({"msg": "x", "round_id": "abc", "error_type": "E"})
        data = json.loads(JSONFormatter().format(record))
        assert data["round_id"] == "abc"
        assert data["error_type"] == "E"


class TestFatalErrorLogging:
    """Tests for log_fatal_error()."""

    def test_log_fatal_error(self, capsys, caplog):
        error = ProtocolOrderError("reveal the key", "AWAITING_HUMAN_MOVE")
        with caplog.at_level(logging.ERROR, logger="rps_referee"):
            log_fatal_error(error)
        assert "ProtocolOrderError" in capsys.readouterr().err
        record = next(r for r in caplog.records if "Fatal error" in r.message)
        assert record.error_type == "ProtocolOrderError"

    def test_error_type_in_file(self, tmp_path, capsys):
        log_file = tmp_path / "rps.log"
        setup_logging(log_file_path=str(log_file))
        log_fatal_error(ProtocolOrderError("start the round", "RESOLVED"))
        _flush()
        assert _records(log_file)[-1]["error_type"] == "ProtocolOrderError"

    def test_module_flag_default(self):
        assert logging_config._interactive_mode_enabled is False
