# Area: Shared
"""
bingo_referee.demo_round — Simulated local round
================================================

Runs one complete round in-process: simulated players register through
``BingoService``, the scheduler calls numbers, and every player checks
its own card after each draw and claims when it is covered.

Usage:
    snapshot = asyncio.run(run_demo_round(config))
    print(snapshot["winners"])
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from ._core.enums import RoundState
from ._core.entropy import EntropySource
from ._core.game import BingoGame
from ._core.state import Card
from ._core.win_detector import is_winner
from .config import BingoConfig
from .service import BingoService
from .types import StateSnapshot

logger = logging.getLogger("bingo_referee.demo")


def demo_player_ids(count: int) -> List[str]:
    """Player ids used by the demo: player-1 .. player-N."""
    return [f"player-{i}" for i in range(1, count + 1)]


async def run_demo_round(
    config: BingoConfig,
    entropy_source: Optional[EntropySource] = None,
    timeout_seconds: Optional[float] = None,
) -> StateSnapshot:
    """
    Play one round to the end and return the final snapshot.

    Args:
        config: Round settings; ``required_players`` players are simulated
        entropy_source: Optional entropy source (defaults to the OS CSPRNG)
        timeout_seconds: Give up after this long. Defaults to enough time
            to call the whole domain twice.

    Raises:
        asyncio.TimeoutError: If the round did not finish in time
    """
    game = BingoGame(config=config, entropy_source=entropy_source)
    service = BingoService(game)
    if timeout_seconds is None:
        timeout_seconds = 2 * (config.domain_size + 1) * config.call_interval_seconds

    try:
        for player in demo_player_ids(config.required_players):
            result = await service.register_card(player)
            if not result["ok"]:
                logger.warning(f"Demo registration of {player} failed: {result['error']}")

        if not config.auto_start:
            await service.start_round()

        await asyncio.wait_for(_play(game, service), timeout=timeout_seconds)
        return service.get_state()
    finally:
        game.close()


async def _play(game: BingoGame, service: BingoService) -> None:
    seen_draws = 0
    poll = game.config.call_interval_seconds / 4
    while game.state.round_state != RoundState.FINISHED:
        await asyncio.sleep(poll)
        draws = len(game.state.draw_history)
        if draws == seen_draws:
            continue
        seen_draws = draws
        called = set(game.state.called_numbers)
        for player in list(game.state.cards):
            card: Card = game.state.cards[player]
            if is_winner(card, called):
                result = await service.claim_win(player)
                if result["won"]:
                    logger.info(f"{player} called BINGO after {draws} draws")
                    return
