# Area: Core
"""
bingo_referee._core.game — Game State Machine
=============================================

``BingoGame`` owns the single round of the process: it issues cards,
starts the round once the quorum has registered, calls numbers on every
scheduler tick and settles win claims.

Every mutating operation follows the same pattern:

1. fast precondition check (no suspension)
2. entropy fetch, the only suspension point
3. critical section: re-check preconditions, then commit

Another request may run to completion while step 2 is suspended, so
step 3 never trusts what step 1 saw.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import BingoConfig
from ..errors import (
    AlreadyActive,
    AlreadyRegistered,
    PlayerNotFound,
    QuorumNotMet,
    RoundNotActive,
)
from ..types import StateSnapshot
from .card_builder import build_card, check_domain
from .entropy import EntropySource, SystemEntropySource
from .enums import FinishReason, RoundEvent, WinPolicy
from .locks import StateGuard
from .random_sequence import RandomSequenceGenerator, shuffle_with
from .scheduler import RoundScheduler
from .snapshot import build_state_snapshot
from .state import Card, GameState
from .win_detector import find_winning_line

logger = logging.getLogger("bingo_referee.game")


class BingoGame:
    """
    Authoritative logic of one bingo round.

    Attributes:
        config: Round settings
        state: The shared round state
        guard: Critical section around ``state``
        generator: Entropy-driven shuffles
        scheduler: Timer driving ``advance_round``
    """

    def __init__(
        self,
        config: Optional[BingoConfig] = None,
        entropy_source: Optional[EntropySource] = None,
        scheduler: Optional[RoundScheduler] = None,
    ):
        self.config = config or BingoConfig()
        check_domain(
            self.config.number_min,
            self.config.number_max,
            self.config.card_size,
            self.config.free_center,
        )
        self.state = GameState(
            required_players=self.config.required_players,
            number_min=self.config.number_min,
            number_max=self.config.number_max,
        )
        self.guard = StateGuard(self.state)
        self.generator = RandomSequenceGenerator(
            entropy_source or SystemEntropySource(),
            block_bytes=self.config.entropy_bytes,
        )
        self.scheduler = scheduler or RoundScheduler()

    # ══════════════════════════════════════════════════════════
    # Player operations
    # ══════════════════════════════════════════════════════════

    async def register_card(self, player: str) -> Card:
        """
        Issue the first card of ``player``.

        The registration that brings the player count to the quorum
        starts the round and arms the timer.

        Raises:
            AlreadyActive: The round is not forming
            AlreadyRegistered: The player already holds a card
            EntropyUnavailable: The entropy source failed (nothing changed)
        """
        self._check_can_register(self.state, player)
        card = await self._build_card(player)

        with self.guard.exclusive() as state:
            self._check_can_register(state, player)
            state.cards[player] = card
            logger.info(
                f"Registered {player} ({state.player_count}/{state.required_players})"
            )
            self._maybe_auto_start(state)
        return card

    async def reset_card(self, player: str) -> Card:
        """
        Replace the card of ``player``, or issue one if there is none.

        Raises:
            AlreadyActive: The round is not forming
            EntropyUnavailable: The entropy source failed (nothing changed)
        """
        self._check_forming(self.state, "reset a card")
        card = await self._build_card(player)

        with self.guard.exclusive() as state:
            self._check_forming(state, "reset a card")
            is_new = player not in state.cards
            # Re-assigning an existing key keeps the registration position
            state.cards[player] = card
            if is_new:
                logger.info(
                    f"Registered {player} via reset "
                    f"({state.player_count}/{state.required_players})"
                )
                self._maybe_auto_start(state)
            else:
                logger.info(f"Reset card of {player}")
        return card

    async def claim_win(self, player: str) -> bool:
        """
        Check the card of ``player`` against the called numbers.

        A valid claim records the winner and finishes the round.

        Raises:
            PlayerNotFound: The player has no card
            RoundNotActive: The round is forming or already finished
        """
        with self.guard.exclusive() as state:
            card = state.cards.get(player)
            if card is None:
                raise PlayerNotFound(player)
            if not state.is_active:
                raise RoundNotActive(state.round_state.value)

            line = find_winning_line(card, state.called_numbers)
            if line is None:
                logger.info(f"Claim by {player} rejected: no covered line")
                return False

            logger.info(f"Claim by {player} accepted: {line.kind} {line.index}")
            self._finish(state, FinishReason.WINNER, player)
            return True

    # ══════════════════════════════════════════════════════════
    # Round loop
    # ══════════════════════════════════════════════════════════

    async def advance_round(self) -> Optional[int]:
        """
        Call the next number. Invoked by the scheduler on every tick.

        Returns:
            The called number, or None if nothing was called (round not
            active, or the domain ran out and the round finished)

        Raises:
            EntropyUnavailable: The entropy source failed (nothing changed)
        """
        with self.guard.exclusive() as state:
            if not state.is_active:
                return None
            if not state.remaining_numbers():
                self._finish(state, FinishReason.EXHAUSTED)
                return None

        block = await self.generator.fetch_block()

        with self.guard.exclusive() as state:
            if not state.is_active:
                logger.debug("Round ended while waiting for entropy, draw dropped")
                return None
            remaining = state.remaining_numbers()
            if not remaining:
                self._finish(state, FinishReason.EXHAUSTED)
                return None

            number = shuffle_with(remaining, block)[0]
            state.record_draw(number)
            logger.info(
                f"Called {number} ({len(state.draw_history)}/{self.config.domain_size})"
            )
            if self.config.win_policy == WinPolicy.AUTO:
                self._detect_winner(state)
        return number

    # ══════════════════════════════════════════════════════════
    # Operator operations
    # ══════════════════════════════════════════════════════════

    async def start_round(self) -> None:
        """
        Start a forming round by hand (used when auto-start is off).

        Raises:
            AlreadyActive: The round is not forming
            QuorumNotMet: Fewer than the required players registered
        """
        with self.guard.exclusive() as state:
            self._check_forming(state, "start the round")
            if state.player_count < state.required_players:
                raise QuorumNotMet(state.player_count, state.required_players)
            self._activate(state, RoundEvent.MANUAL_START)

    async def start_new_round(self) -> None:
        """
        Leave a finished round and open registrations for the next one.

        All cards, draws and winners are purged; players register again.

        Raises:
            AlreadyActive: The round is still running
            InvalidTransition: The round is already forming
        """
        with self.guard.exclusive() as state:
            if state.is_active:
                raise AlreadyActive("start a new round", state.round_state.value)
            state.reset_for_new_round()

    def close(self) -> None:
        """Stop the timer and the scheduler."""
        self.scheduler.shutdown()

    # ══════════════════════════════════════════════════════════
    # Queries
    # ══════════════════════════════════════════════════════════

    def get_state(self) -> StateSnapshot:
        return build_state_snapshot(self.state)

    def get_player_count(self) -> int:
        return self.state.player_count

    def get_remaining_slots(self) -> int:
        return self.state.remaining_slots

    def get_card(self, player: str) -> Optional[Card]:
        return self.state.cards.get(player)

    # ══════════════════════════════════════════════════════════
    # Internals (the _activate/_finish pair keeps ACTIVE ⇔ armed)
    # ══════════════════════════════════════════════════════════

    async def _build_card(self, player: str) -> Card:
        return await build_card(
            player,
            self.generator,
            number_min=self.config.number_min,
            number_max=self.config.number_max,
            card_size=self.config.card_size,
            free_center=self.config.free_center,
        )

    @staticmethod
    def _check_forming(state: GameState, operation: str) -> None:
        if not state.is_forming:
            raise AlreadyActive(operation, state.round_state.value)

    def _check_can_register(self, state: GameState, player: str) -> None:
        self._check_forming(state, "register a card")
        if player in state.cards:
            raise AlreadyRegistered(player)

    def _maybe_auto_start(self, state: GameState) -> None:
        if self.config.auto_start and state.player_count == state.required_players:
            self._activate(state, RoundEvent.QUORUM_REACHED)

    def _activate(self, state: GameState, event: RoundEvent) -> None:
        self.scheduler.arm(self.config.call_interval_seconds, self.advance_round)
        state.start(event)
        logger.info(
            f"Round {state.round_number} started with {state.player_count} players"
        )

    def _finish(
        self, state: GameState, reason: FinishReason, winner: Optional[str] = None
    ) -> None:
        self.scheduler.disarm()
        state.finish(reason, winner)
        if winner is None:
            logger.info(f"Round {state.round_number} finished: {reason.value}")
        else:
            logger.info(
                f"Round {state.round_number} finished: {winner} wins "
                f"after {len(state.draw_history)} draws"
            )

    def _detect_winner(self, state: GameState) -> None:
        """First covered card in registration order wins."""
        for owner, card in state.cards.items():
            line = find_winning_line(card, state.called_numbers)
            if line is not None:
                logger.info(f"Auto-detected win for {owner}: {line.kind} {line.index}")
                self._finish(state, FinishReason.WINNER, owner)
                return
