"""
bingo_referee.types — TypedDict schemas for service responses
=============================================================

This module documents the exact structure of the dictionaries returned
by ``BingoService``. All types are exported from the main package:

    from bingo_referee import CardPayload, StateSnapshot, ...

Use __annotations__ to inspect fields:

    >>> CardPayload.__annotations__
    {'owner': str, 'numbers': List[List[int]], 'free_center': bool}
"""

from typing import Dict, List, Optional, TypedDict


class ErrorPayload(TypedDict):
    """An operation rejected by the round."""
    code: str               # e.g. "ALREADY_ACTIVE"
    message: str


class CardPayload(TypedDict):
    """A player's card. A free center cell holds 0."""
    owner: str
    numbers: List[List[int]]
    free_center: bool


class CardResult(TypedDict):
    """Result of RegisterCard / ResetCard.

    Fields
    ------
    ok : bool
        True when ``card`` holds the issued card.
    card : Optional[CardPayload]
        The new card, None on error.
    error : Optional[ErrorPayload]
        Why the request was rejected, None on success.
    """
    ok: bool
    card: Optional[CardPayload]
    error: Optional[ErrorPayload]


class ClaimResult(TypedDict):
    """Result of ClaimWin."""
    ok: bool
    won: bool
    error: Optional[ErrorPayload]


class ActionResult(TypedDict):
    """Result of operator actions (StartRound, StartNewRound)."""
    ok: bool
    error: Optional[ErrorPayload]


class StateSnapshot(TypedDict):
    """Full read-only view of the round.

    Fields
    ------
    round_number : int
        1 for the first round, incremented by StartNewRound.
    state : str
        "FORMING", "ACTIVE" or "FINISHED".
    is_active : bool
        Shortcut for state == "ACTIVE".
    players : List[str]
        Player ids in registration order.
    cards : Dict[str, CardPayload]
        Every card keyed by owner.
    called_numbers : List[int]
        Called numbers in draw order.
    last_called : Optional[int]
        Most recent draw, None before the first.
    winners : List[str]
        Winning players in the order they won.
    finish_reason : Optional[str]
        "WINNER" or "EXHAUSTED" once finished.
    required_players : int
        The configured quorum.
    remaining_slots : int
        Players still needed for the quorum, never below 0.
    """
    round_number: int
    state: str
    is_active: bool
    players: List[str]
    cards: Dict[str, CardPayload]
    called_numbers: List[int]
    last_called: Optional[int]
    winners: List[str]
    finish_reason: Optional[str]
    required_players: int
    remaining_slots: int
