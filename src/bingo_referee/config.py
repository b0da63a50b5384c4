# Area: Shared
"""
bingo_referee.config — Round configuration
==========================================

Validated settings for one game process.

Settings are layered: defaults, then an optional JSON file, then a
``.env`` file, then environment variables.

Usage:
    config = load_config("config.json")
    game = BingoGame(config=config)
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from ._core.card_builder import CARD_SIZE, cell_count
from ._core.entropy import MIN_BLOCK_BYTES
from ._core.enums import WinPolicy
from .errors import ConfigurationError


class BingoConfig(BaseModel):
    """
    Settings of a bingo round.

    Fields
    ------
    required_players : int
        Quorum of distinct players that starts the round.
    number_min, number_max : int
        Inclusive number domain used for cards and draws.
    free_center : bool
        Whether the center cell is a free, always-covered cell.
    call_interval_seconds : float
        Delay between two called numbers.
    entropy_bytes : int
        Size of the block requested from the entropy source per operation
        (at least 32 bytes).
    win_policy : WinPolicy
        ``claim`` (players claim) or ``auto`` (every draw checks all cards).
    auto_start : bool
        Start the round as soon as the quorum registers. When False an
        operator calls ``start_round``.
    log_file : str
        Path of the JSON log file.
    """

    required_players: int = Field(default=10, ge=1)
    number_min: int = Field(default=1, ge=1)
    number_max: int = 99
    card_size: int = Field(default=CARD_SIZE, ge=CARD_SIZE, le=CARD_SIZE)
    free_center: bool = False
    call_interval_seconds: float = Field(default=15.0, gt=0)
    entropy_bytes: int = Field(default=MIN_BLOCK_BYTES, ge=MIN_BLOCK_BYTES)
    win_policy: WinPolicy = WinPolicy.CLAIM
    auto_start: bool = True
    log_file: str = "bingo_referee.log"

    @model_validator(mode="after")
    def _domain_fits_card(self) -> "BingoConfig":
        needed = cell_count(self.card_size, self.free_center)
        domain_size = self.number_max - self.number_min + 1
        if domain_size < needed:
            raise ValueError(
                f"Domain {self.number_min}..{self.number_max} has "
                f"{max(domain_size, 0)} numbers, a card needs {needed}"
            )
        return self

    @property
    def domain_size(self) -> int:
        return self.number_max - self.number_min + 1


# Environment variable → config key
ENV_MAPPINGS = {
    "BINGO_REQUIRED_PLAYERS": "required_players",
    "BINGO_NUMBER_MIN": "number_min",
    "BINGO_NUMBER_MAX": "number_max",
    "BINGO_FREE_CENTER": "free_center",
    "BINGO_CALL_INTERVAL_SECONDS": "call_interval_seconds",
    "BINGO_ENTROPY_BYTES": "entropy_bytes",
    "BINGO_WIN_POLICY": "win_policy",
    "BINGO_AUTO_START": "auto_start",
    "BINGO_LOG_FILE": "log_file",
}


def build_config(values: Dict[str, Any]) -> BingoConfig:
    """
    Validate a raw settings dict.

    Raises:
        ConfigurationError: If any value is missing its constraints
    """
    try:
        return BingoConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> BingoConfig:
    """Load config from file, ``.env`` and environment."""
    values: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        with open(path, encoding="utf-8") as f:
            values = json.load(f)

    load_dotenv(dotenv_path=env_file)

    # Pydantic coerces the strings ("12", "true", "auto")
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]

    return build_config(values)
