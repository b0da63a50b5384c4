# Area: Core
"""
bingo_referee._core.snapshot — Round state snapshot builder
===========================================================

Builds serializable copies of the round state. Snapshots share no
mutable objects with the live ``GameState``.
"""

from .state import Card, GameState
from ..types import CardPayload, StateSnapshot


def card_payload(card: Card) -> CardPayload:
    """Serializable form of one card."""
    return {
        "owner": card.owner,
        "numbers": [list(row) for row in card.numbers],
        "free_center": card.free_center,
    }


def build_state_snapshot(state: GameState) -> StateSnapshot:
    """Build the full round snapshot."""
    return {
        "round_number": state.round_number,
        "state": state.round_state.value,
        "is_active": state.is_active,
        "players": list(state.cards),
        "cards": {owner: card_payload(card) for owner, card in state.cards.items()},
        "called_numbers": list(state.draw_history),
        "last_called": state.draw_history[-1] if state.draw_history else None,
        "winners": list(state.winners),
        "finish_reason": state.finish_reason.value if state.finish_reason else None,
        "required_players": state.required_players,
        "remaining_slots": state.remaining_slots,
    }
