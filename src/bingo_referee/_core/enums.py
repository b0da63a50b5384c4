# Area: Core
"""
bingo_referee._core.enums — Round State Machine Enums
=====================================================

Defines the states, events and policies of a bingo round.
"""

from enum import Enum


class RoundState(Enum):
    """
    States of a bingo round.

    State transitions:
    FORMING -> ACTIVE (on QUORUM_REACHED or MANUAL_START)
    ACTIVE -> FINISHED (on WINNER_FOUND or DOMAIN_EXHAUSTED)
    FINISHED -> FORMING (on NEW_ROUND)
    """
    FORMING = "FORMING"
    ACTIVE = "ACTIVE"
    FINISHED = "FINISHED"


class RoundEvent(Enum):
    """
    Events that trigger round state transitions.

    Events are triggered by:
    - QUORUM_REACHED: a registration brought the player count to the quorum
    - MANUAL_START: operator start with auto-start disabled
    - WINNER_FOUND: a claim or auto-detection confirmed a covered line
    - DOMAIN_EXHAUSTED: every number in the domain has been called
    - NEW_ROUND: operator reset of a finished round
    """
    QUORUM_REACHED = "QUORUM_REACHED"
    MANUAL_START = "MANUAL_START"
    WINNER_FOUND = "WINNER_FOUND"
    DOMAIN_EXHAUSTED = "DOMAIN_EXHAUSTED"
    NEW_ROUND = "NEW_ROUND"


class FinishReason(Enum):
    """Why a round reached FINISHED."""
    WINNER = "WINNER"
    EXHAUSTED = "EXHAUSTED"


class WinPolicy(Enum):
    """
    How winners are detected during an active round.

    CLAIM: only player-submitted claims are evaluated.
    AUTO: every draw scans cards in registration order and the first
    covered card wins.
    """
    CLAIM = "claim"
    AUTO = "auto"
