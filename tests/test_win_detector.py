# Area: Core Tests
"""Tests for bingo line detection."""

import pytest

from bingo_referee._core.card_builder import fill_grid
from bingo_referee._core.win_detector import (
    ANTI_DIAGONAL,
    COLUMN,
    DIAGONAL,
    ROW,
    WinningLine,
    find_winning_line,
    is_winner,
)


@pytest.fixture
def card():
    """Rows 1-5, 6-10, 11-15, 16-20, 21-25."""
    return fill_grid("alice", range(1, 26))


@pytest.fixture
def free_card():
    """Rows 1-5, 6-10, (11, 12, FREE, 13, 14), 15-19, 20-24."""
    return fill_grid("alice", range(1, 25), free_center=True)


class TestLines:
    """Each kind of line wins on its own."""

    def test_no_numbers_called(self, card):
        assert is_winner(card, set()) is False

    def test_full_row(self, card):
        assert find_winning_line(card, {6, 7, 8, 9, 10}) == WinningLine(ROW, 1)

    def test_full_column(self, card):
        assert find_winning_line(card, {3, 8, 13, 18, 23}) == WinningLine(COLUMN, 2)

    def test_main_diagonal(self, card):
        assert find_winning_line(card, {1, 7, 13, 19, 25}) == WinningLine(DIAGONAL)

    def test_anti_diagonal(self, card):
        assert find_winning_line(card, {5, 9, 13, 17, 21}) == WinningLine(ANTI_DIAGONAL)

    def test_partial_lines_do_not_win(self, card):
        # Everything but the main diagonal; 13 also breaks the anti-diagonal
        called = set(range(1, 26)) - {1, 7, 13, 19, 25}
        assert is_winner(card, called) is False

    def test_numbers_not_on_card_ignored(self, card):
        assert is_winner(card, set(range(26, 100))) is False

    def test_rows_checked_before_columns(self, card):
        called = {1, 2, 3, 4, 5, 6, 11, 16, 21}
        assert find_winning_line(card, called) == WinningLine(ROW, 0)


class TestFreeCenter:
    """The free center never blocks a line."""

    def test_center_row(self, free_card):
        assert find_winning_line(free_card, {11, 12, 13, 14}) == WinningLine(ROW, 2)

    def test_center_column(self, free_card):
        assert find_winning_line(free_card, {3, 8, 17, 22}) == WinningLine(COLUMN, 2)

    def test_diagonal_through_center(self, free_card):
        assert find_winning_line(free_card, {1, 7, 18, 24}) == WinningLine(DIAGONAL)

    def test_anti_diagonal_through_center(self, free_card):
        assert find_winning_line(free_card, {5, 9, 16, 20}) == WinningLine(ANTI_DIAGONAL)

    def test_free_alone_not_enough(self, free_card):
        assert is_winner(free_card, {11, 12, 13}) is False

    def test_zero_in_called_set_does_not_matter(self, card):
        """Without a free center, 0 is never on a card."""
        assert is_winner(card, {0, 1, 2, 3, 4}) is False


class TestPurity:
    """The detector has no side effects."""

    def test_called_set_untouched(self, card):
        called = {1, 2, 3, 4, 5}
        is_winner(card, called)
        assert called == {1, 2, 3, 4, 5}

    def test_deterministic(self, card):
        called = {5, 9, 13, 17, 21}
        results = {find_winning_line(card, called) for _ in range(5)}
        assert results == {WinningLine(ANTI_DIAGONAL)}

    def test_accepts_frozenset(self, card):
        assert is_winner(card, frozenset({1, 2, 3, 4, 5})) is True
