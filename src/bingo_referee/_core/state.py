# Area: Core
"""
bingo_referee._core.state — Round state tracker
===============================================

Holds everything a round shares between requests: the cards keyed by
player, the called numbers, the winners and the lifecycle state.

Only ``BingoGame`` writes to a ``GameState``, and only inside the
critical section provided by ``StateGuard``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple
import logging

from .enums import FinishReason, RoundEvent, RoundState
from .state_machine import RoundStateMachine

logger = logging.getLogger("bingo_referee.state")

# Value stored in the free center cell.
FREE_CELL = 0


@dataclass(frozen=True)
class Card:
    """A player's 5x5 card. Replaced wholesale, never edited cell by cell."""
    owner: str
    numbers: Tuple[Tuple[int, ...], ...]
    free_center: bool = False

    @property
    def size(self) -> int:
        return len(self.numbers)

    def is_free(self, row: int, col: int) -> bool:
        center = self.size // 2
        return self.free_center and row == center and col == center

    def values(self) -> List[int]:
        """All drawn numbers on the card in row-major order (free cell excluded)."""
        return [
            value
            for r, row in enumerate(self.numbers)
            for c, value in enumerate(row)
            if not self.is_free(r, c)
        ]

    def row(self, index: int) -> List[int]:
        """Drawn numbers of one row (free cell excluded)."""
        return [v for c, v in enumerate(self.numbers[index]) if not self.is_free(index, c)]


@dataclass
class GameState:
    """
    Full state of the single process-wide round.

    ``cards`` keeps insertion order, which is the registration order used
    to break ties between simultaneous winners.
    """
    required_players: int
    number_min: int = 1
    number_max: int = 99
    round_number: int = 1
    cards: Dict[str, Card] = field(default_factory=dict)
    called_numbers: Set[int] = field(default_factory=set)
    draw_history: List[int] = field(default_factory=list)
    winners: List[str] = field(default_factory=list)
    finish_reason: Optional[FinishReason] = None
    machine: RoundStateMachine = field(default_factory=RoundStateMachine)

    # ── Read helpers ─────────────────────────────────────────

    @property
    def round_state(self) -> RoundState:
        return self.machine.current_state

    @property
    def is_active(self) -> bool:
        return self.round_state == RoundState.ACTIVE

    @property
    def is_forming(self) -> bool:
        return self.round_state == RoundState.FORMING

    @property
    def player_count(self) -> int:
        return len(self.cards)

    @property
    def remaining_slots(self) -> int:
        return max(0, self.required_players - self.player_count)

    def remaining_numbers(self) -> List[int]:
        """Numbers of the domain not called yet, in ascending order."""
        return [
            n for n in range(self.number_min, self.number_max + 1)
            if n not in self.called_numbers
        ]

    # ── Mutations (called inside the critical section) ───────

    def record_draw(self, number: int) -> None:
        if number in self.called_numbers:
            raise ValueError(f"Number {number} was already called this round")
        self.called_numbers.add(number)
        self.draw_history.append(number)

    def start(self, event: RoundEvent) -> None:
        self.called_numbers.clear()
        self.draw_history.clear()
        self.winners.clear()
        self.finish_reason = None
        self.machine.transition(event)

    def finish(self, reason: FinishReason, winner: Optional[str] = None) -> None:
        event = (
            RoundEvent.WINNER_FOUND if reason == FinishReason.WINNER
            else RoundEvent.DOMAIN_EXHAUSTED
        )
        self.machine.transition(event)
        if winner is not None:
            self.winners.append(winner)
        self.finish_reason = reason

    def reset_for_new_round(self) -> None:
        """Purge cards, draws and winners and go back to FORMING."""
        self.machine.transition(RoundEvent.NEW_ROUND)
        logger.info(f"Resetting state for round {self.round_number + 1}")
        self.cards.clear()
        self.called_numbers.clear()
        self.draw_history.clear()
        self.winners.clear()
        self.finish_reason = None
        self.round_number += 1
