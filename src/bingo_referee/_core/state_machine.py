# Area: Core
"""
bingo_referee._core.state_machine — Round State Machine
=======================================================

Table-driven lifecycle of a single bingo round. Every change of
``RoundState`` goes through ``RoundStateMachine.transition``.
"""

import logging

from .enums import RoundEvent, RoundState
from ..errors import InvalidTransition

logger = logging.getLogger("bingo_referee.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RoundState.FORMING: {
        RoundEvent.QUORUM_REACHED: RoundState.ACTIVE,
        RoundEvent.MANUAL_START: RoundState.ACTIVE,
    },
    RoundState.ACTIVE: {
        RoundEvent.WINNER_FOUND: RoundState.FINISHED,
        RoundEvent.DOMAIN_EXHAUSTED: RoundState.FINISHED,
    },
    RoundState.FINISHED: {
        RoundEvent.NEW_ROUND: RoundState.FORMING,
    },
}


class RoundStateMachine:
    """
    State machine for the round lifecycle.

    Attributes:
        current_state: The current state of the round
    """

    def __init__(self):
        """Initialize state machine in FORMING."""
        self.current_state = RoundState.FORMING

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RoundEvent) -> RoundState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidTransition: If the event is not valid from the current state
        """
        if not self.can_transition(event):
            raise InvalidTransition(event.value, self.current_state.value)

        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.info(
            f"Round state: {previous.value} → {self.current_state.value} ({event.value})"
        )
        return self.current_state
