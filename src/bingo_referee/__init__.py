"""
bingo_referee — Authoritative bingo round logic
===============================================

Card issuance, entropy-driven card randomization, the number-calling
loop and win detection for a single multiplayer bingo round.

Quick Start:
    from bingo_referee import BingoGame, BingoService, load_config

    game = BingoGame(config=load_config("config.json"))
    service = BingoService(game)
    result = await service.register_card(caller)

Plug the host's randomness service in by subclassing EntropySource:

    class HostEntropy(EntropySource):
        async def fetch(self, n_bytes): ...

    game = BingoGame(config=config, entropy_source=HostEntropy())

Type Definitions
----------------
All response types are available for import:

    from bingo_referee import CardResult, ClaimResult, StateSnapshot
"""

from .config import BingoConfig, load_config
from ._core.entropy import EntropySource, SystemEntropySource
from ._core.enums import FinishReason, RoundState, WinPolicy
from ._core.game import BingoGame
from ._core.scheduler import RoundScheduler
from ._core.state import Card
from ._core.win_detector import WinningLine, find_winning_line, is_winner
from .service import BingoService
from .errors import (
    BingoRefereeError,
    AlreadyActive,
    AlreadyRegistered,
    PlayerNotFound,
    QuorumNotMet,
    EntropyUnavailable,
    RoundNotActive,
    InvalidTransition,
    ConfigurationError,
)
from .types import (
    ErrorPayload,
    CardPayload,
    CardResult,
    ClaimResult,
    ActionResult,
    StateSnapshot,
)

__all__ = [
    # Main classes
    "BingoGame",
    "BingoService",
    "BingoConfig",
    "load_config",
    "EntropySource",
    "SystemEntropySource",
    "RoundScheduler",
    "Card",
    "RoundState",
    "FinishReason",
    "WinPolicy",
    "WinningLine",
    "find_winning_line",
    "is_winner",
    # Errors
    "BingoRefereeError",
    "AlreadyActive",
    "AlreadyRegistered",
    "PlayerNotFound",
    "QuorumNotMet",
    "EntropyUnavailable",
    "RoundNotActive",
    "InvalidTransition",
    "ConfigurationError",
    # Response types
    "ErrorPayload",
    "CardPayload",
    "CardResult",
    "ClaimResult",
    "ActionResult",
    "StateSnapshot",
]
__version__ = "1.0.0"
