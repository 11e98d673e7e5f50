"""
rps_referee.runner — Interactive round loop
===========================================

The RoundRunner is what the CLI instantiates and calls .run() on.
It validates the moves, starts a GameEngine, shows the digest, then
prompts until the human picks a move, asks to exit, or input ends.
"""

from __future__ import annotations
import json
import logging
from typing import Callable, Optional

from ._core.engine import GameEngine
from ._core.moves import validate_moves
from ._core.round_result import RoundResult
from ._runner_config import GameConfig
from ._shared.display import (
    DIGEST_LABEL,
    INVALID_INPUT,
    PLAYER_MOVE,
    render_menu,
    render_relation_table,
    render_result,
)
from ._shared.logging_config import (
    disable_interactive_mode,
    enable_interactive_mode,
    log_fatal_error,
)
from .errors import InvalidMoveSetError, InvalidSelectionError, RandomSourceUnavailableError

logger = logging.getLogger("rps_referee.runner")

EXIT_OK = 0
EXIT_FAILURE = 1


class RoundRunner:
    """
    Runs one round against the terminal (or injected I/O).

    Usage
    -----
        from rps_referee import RoundRunner, load_config

        config = load_config(overrides={"moves": ["rock", "paper", "scissors"]})
        exit_code = RoundRunner(config).run()

    ``input_fn`` and ``output_fn`` default to ``input`` and ``print``.
    """

    def __init__(
        self,
        config: GameConfig,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self._read = input_fn or input
        self._write = output_fn or print
        self.engine: Optional[GameEngine] = None
        self.result: Optional[RoundResult] = None

    def run(self) -> int:
        """Play one round. Returns the process exit code."""
        try:
            move_set = validate_moves(self.config.moves)
        except InvalidMoveSetError as e:
            log_fatal_error(e)
            return EXIT_FAILURE

        self.engine = GameEngine(
            move_set,
            key_bytes=self.config.key_bytes,
            digest_algorithm=self.config.digest_algorithm,
        )
        try:
            digest = self.engine.start()
        except RandomSourceUnavailableError as e:
            log_fatal_error(e)
            return EXIT_FAILURE

        self._write(f"{DIGEST_LABEL} {digest}")

        enable_interactive_mode()
        try:
            return self._prompt_loop(self.engine)
        finally:
            disable_interactive_mode()

    def _prompt_loop(self, engine: GameEngine) -> int:
        menu = render_menu(engine.move_set, self.config.exit_command, self.config.help_command)

        while True:
            self._write(menu)
            try:
                choice = self._read(f"{PLAYER_MOVE} ").strip()
            except (EOFError, KeyboardInterrupt):
                self._write("")
                logger.info(
                    f"[{engine.round_id}] Input closed before a move was chosen",
                    extra={"round_id": engine.round_id},
                )
                engine.abort()
                return EXIT_FAILURE

            if choice == self.config.exit_command:
                engine.abort()
                return EXIT_OK

            if choice == self.config.help_command:
                self._write(render_relation_table(engine.request_help()))
                continue

            try:
                self.result = engine.submit_selection(choice)
            except InvalidSelectionError as e:
                logger.info(
                    f"[{engine.round_id}] {e}",
                    extra={"round_id": engine.round_id},
                )
                self._write(INVALID_INPUT)
                continue

            self._write(render_result(self.result))
            if self.config.output_json:
                self._write(json.dumps(self.result.to_dict(), indent=2))
            return EXIT_OK
