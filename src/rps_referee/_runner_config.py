# Area: Shared
"""
rps_referee._runner_config — Runner Configuration
=================================================

GameConfig model and loading from a JSON file, environment variables
(``.env`` supported) and explicit overrides, in that order of precedence.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ._core.commitment import (
    DEFAULT_DIGEST_ALGORITHM,
    DEFAULT_KEY_BYTES,
    MAX_KEY_BYTES,
    MIN_KEY_BYTES,
    normalize_digest_algorithm,
)
from .errors import ConfigurationError

logger = logging.getLogger("rps_referee")

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Environment variable → config key
ENV_MAPPINGS = {
    "RPS_KEY_BYTES": "key_bytes",
    "RPS_DIGEST_ALGORITHM": "digest_algorithm",
    "RPS_LOG_FILE": "log_file",
    "RPS_LOG_LEVEL": "log_level",
    "RPS_OUTPUT_JSON": "output_json",
}


class GameConfig(BaseModel):
    """
    Settings for one invocation.

    The move list is only type-checked here; the odd-count and
    duplicate rules belong to the move validator so they can report
    their own reasons.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    moves: List[str]
    key_bytes: int = Field(default=DEFAULT_KEY_BYTES, ge=MIN_KEY_BYTES, le=MAX_KEY_BYTES)
    digest_algorithm: str = DEFAULT_DIGEST_ALGORITHM
    exit_command: str = Field(default="0", min_length=1)
    help_command: str = Field(default="?", min_length=1)
    log_file: str = "rps_referee.log"
    log_level: str = "INFO"
    output_json: bool = False

    @field_validator("digest_algorithm")
    @classmethod
    def _known_algorithm(cls, value: str) -> str:
        return normalize_digest_algorithm(value)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("exit_command", "help_command")
    @classmethod
    def _not_a_move_number(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("sentinel must not be blank")
        if value.isdecimal() and int(value) > 0:
            raise ValueError("sentinel must not look like a move number")
        return value

    @model_validator(mode="after")
    def _distinct_sentinels(self) -> "GameConfig":
        if self.exit_command == self.help_command:
            raise ValueError("exit_command and help_command must differ")
        return self


def read_env_overrides() -> Dict[str, Any]:
    """Collect config values from environment variables (after loading .env)."""
    load_dotenv(find_dotenv(usecwd=True))
    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]
    return values


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameConfig:
    """
    Build a GameConfig from file, environment and overrides.

    Args:
        config_path: Optional path to a JSON object with config keys
        overrides: Values that win over file and environment (None values ignored)

    Returns:
        Validated GameConfig

    Raises:
        ConfigurationError: If the file cannot be read or validation fails
    """
    data: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError([f"cannot read config file {path}: {e}"]) from e
        if not isinstance(data, dict):
            raise ConfigurationError([f"config file {path} must contain a JSON object"])

    data.update(read_env_overrides())
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})

    try:
        config = GameConfig.model_validate(data)
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(messages) from e

    logger.debug(f"Loaded config with {len(config.moves)} moves")
    return config
