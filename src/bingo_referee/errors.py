"""
bingo_referee.errors — Custom exception classes
================================================

Defines the exception hierarchy for round operations.
Each exception carries a stable ``code`` plus the context it was raised
with, so the service layer can turn it into an explicit result value.
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class BingoRefereeError(Exception):
    """Base exception for all bingo_referee errors."""

    code = "BINGO_REFEREE_ERROR"

    def to_payload(self) -> Dict[str, Any]:
        """Return the error as a serializable result value."""
        return {"code": self.code, "message": str(self)}


class AlreadyActive(BingoRefereeError):
    """Raised when a registration, reset or start hits a round that is not forming."""

    code = "ALREADY_ACTIVE"

    def __init__(self, operation: str, round_state: str):
        self.operation = operation
        self.round_state = round_state
        super().__init__(
            f"Cannot {operation}: round is {round_state}, not forming"
        )


class AlreadyRegistered(BingoRefereeError):
    """Raised when a player that already holds a card registers again."""

    code = "ALREADY_REGISTERED"

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player {player_id} already holds a card")


class PlayerNotFound(BingoRefereeError):
    """Raised when an operation references a player without a card."""

    code = "PLAYER_NOT_FOUND"

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Player {player_id} has no card")


class QuorumNotMet(BingoRefereeError):
    """Raised by a manual start when fewer than the required players joined."""

    code = "QUORUM_NOT_MET"

    def __init__(self, player_count: int, required_players: int):
        self.player_count = player_count
        self.required_players = required_players
        super().__init__(
            f"Need {required_players} players to start, got {player_count}"
        )


class EntropyUnavailable(BingoRefereeError):
    """Raised when the external randomness source fails or misbehaves."""

    code = "ENTROPY_UNAVAILABLE"

    def __init__(self, reason: str, n_bytes: Optional[int] = None):
        self.reason = reason
        self.n_bytes = n_bytes
        if n_bytes is None:
            super().__init__(f"Entropy source unavailable: {reason}")
        else:
            super().__init__(
                f"Entropy source unavailable ({n_bytes} bytes requested): {reason}"
            )


class RoundNotActive(BingoRefereeError):
    """Raised when a win is claimed outside an active round."""

    code = "ROUND_NOT_ACTIVE"

    def __init__(self, round_state: str):
        self.round_state = round_state
        super().__init__(f"Round is {round_state}, not active")


class InvalidTransition(BingoRefereeError):
    """Raised when the round state machine rejects an event."""

    code = "INVALID_TRANSITION"

    def __init__(self, event: str, round_state: str):
        self.event = event
        self.round_state = round_state
        super().__init__(f"Invalid transition: {event} from {round_state}")


class ConfigurationError(BingoRefereeError):
    """Raised when the configured number domain or card layout is unusable."""

    code = "CONFIGURATION_ERROR"
