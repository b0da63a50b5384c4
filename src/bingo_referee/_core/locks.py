# Area: Core
"""
bingo_referee._core.locks — Critical section for the shared round state
=======================================================================

The round runs on one event loop, so code between two ``await`` points
already runs without interleaving. ``StateGuard`` makes that span
explicit: every read-validate-commit on ``GameState`` happens inside
``guard.exclusive()``, and the block must not suspend.

The guard is non-reentrant. Entering it while it is held means a
state-mutating operation called into another one, which raises.
"""

from contextlib import contextmanager
from typing import Iterator

from .state import GameState


class StateGuard:
    """Single-owner, non-reentrant access to a ``GameState``."""

    def __init__(self, state: GameState):
        self._state = state
        self._held = False

    @contextmanager
    def exclusive(self) -> Iterator[GameState]:
        """
        Enter the critical section.

        Example:
            with guard.exclusive() as state:
                if not state.is_forming:
                    raise AlreadyActive("register", state.round_state.value)
                state.cards[player] = card

        Raises:
            RuntimeError: If the section is already held
        """
        if self._held:
            raise RuntimeError("GameState critical section re-entered")
        self._held = True
        try:
            yield self._state
        finally:
            self._held = False
