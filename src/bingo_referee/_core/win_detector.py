# Area: Core
"""
bingo_referee._core.win_detector — Bingo line detection
=======================================================

Pure functions deciding whether a card is won against a set of called
numbers. Used both for server-side auto-detection and for player claims.

A line is any full row, any full column, the main diagonal or the
anti-diagonal. The free center, if the card has one, is always covered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterator, List, Optional, Tuple

from .state import Card

ROW = "row"
COLUMN = "column"
DIAGONAL = "diagonal"
ANTI_DIAGONAL = "anti_diagonal"


@dataclass(frozen=True)
class WinningLine:
    """The covered line found on a card."""
    kind: str
    index: int = 0


def _lines(size: int) -> Iterator[Tuple[WinningLine, List[Tuple[int, int]]]]:
    """Yield every line with its cell coordinates: rows, columns, diagonals."""
    for r in range(size):
        yield WinningLine(ROW, r), [(r, c) for c in range(size)]
    for c in range(size):
        yield WinningLine(COLUMN, c), [(r, c) for r in range(size)]
    yield WinningLine(DIAGONAL), [(i, i) for i in range(size)]
    yield WinningLine(ANTI_DIAGONAL), [(i, size - 1 - i) for i in range(size)]


def find_winning_line(card: Card, called: AbstractSet[int]) -> Optional[WinningLine]:
    """
    Return the first covered line of ``card``, or None.

    Lines are checked rows first, then columns, then the main and
    anti diagonal.
    """
    def covered(r: int, c: int) -> bool:
        return card.is_free(r, c) or card.numbers[r][c] in called

    for line, cells in _lines(card.size):
        if all(covered(r, c) for r, c in cells):
            return line
    return None


def is_winner(card: Card, called: AbstractSet[int]) -> bool:
    """True if at least one line of ``card`` is fully covered by ``called``."""
    return find_winning_line(card, called) is not None
