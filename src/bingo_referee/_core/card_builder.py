# Area: Core
"""
bingo_referee._core.card_builder — Card issuance
================================================

Builds a player's card from one shuffle of the whole number domain.
The shuffled sequence is walked left to right and unused values are
placed into row-major cells. The free center, when enabled, is skipped
without consuming a value.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from .random_sequence import RandomSequenceGenerator
from .state import Card, FREE_CELL
from ..errors import ConfigurationError

logger = logging.getLogger("bingo_referee.card_builder")

CARD_SIZE = 5


def cell_count(card_size: int = CARD_SIZE, free_center: bool = False) -> int:
    """Number of cells that need a drawn value."""
    return card_size * card_size - (1 if free_center else 0)


def check_domain(
    number_min: int,
    number_max: int,
    card_size: int = CARD_SIZE,
    free_center: bool = False,
) -> None:
    """
    Fail fast on a domain that cannot fill a card.

    Raises:
        ConfigurationError: If the domain is empty or smaller than the card
    """
    if card_size < 1:
        raise ConfigurationError(f"Card size must be positive, got {card_size}")
    if free_center and card_size % 2 == 0:
        raise ConfigurationError(
            f"A free center needs an odd card size, got {card_size}"
        )
    if number_min < 1:
        raise ConfigurationError(f"Numbers must be positive, got minimum {number_min}")
    domain_size = number_max - number_min + 1
    needed = cell_count(card_size, free_center)
    if domain_size < needed:
        raise ConfigurationError(
            f"Domain {number_min}..{number_max} has {max(domain_size, 0)} numbers, "
            f"a card needs {needed}"
        )


def fill_grid(
    owner: str,
    sequence: Iterable[int],
    card_size: int = CARD_SIZE,
    free_center: bool = False,
) -> Card:
    """
    Lay ``sequence`` out on a card, skipping repeats and the free center.

    Raises:
        ConfigurationError: If the sequence runs out before the card is full
    """
    center = card_size // 2
    positions = [
        (r, c)
        for r in range(card_size)
        for c in range(card_size)
        if not (free_center and r == center and c == center)
    ]
    grid: List[List[int]] = [[FREE_CELL] * card_size for _ in range(card_size)]
    used = set()
    filled = 0

    for value in sequence:
        if filled == len(positions):
            break
        if value in used:
            continue
        used.add(value)
        r, c = positions[filled]
        grid[r][c] = value
        filled += 1

    if filled < len(positions):
        raise ConfigurationError(
            f"Sequence yielded {filled} distinct numbers, card needs {len(positions)}"
        )

    return Card(
        owner=owner,
        numbers=tuple(tuple(row) for row in grid),
        free_center=free_center,
    )


async def build_card(
    owner: str,
    generator: RandomSequenceGenerator,
    number_min: int = 1,
    number_max: int = 99,
    card_size: int = CARD_SIZE,
    free_center: bool = False,
) -> Card:
    """
    Build a fresh card for ``owner``.

    Performs one entropy fetch. Never touches shared round state.

    Raises:
        ConfigurationError: If the domain cannot fill a card
        EntropyUnavailable: If the entropy source fails
    """
    check_domain(number_min, number_max, card_size, free_center)
    sequence = await generator.shuffle(range(number_min, number_max + 1))
    card = fill_grid(owner, sequence, card_size, free_center)
    logger.debug(f"Built card for {owner}: {card.numbers}")
    return card
