# Area: Core
"""
Core round logic.

This package contains:
- entropy / random_sequence: entropy-driven integers and shuffles
- card_builder: card issuance
- win_detector: bingo line detection
- state / state_machine / locks: shared round state and its lifecycle
- scheduler: timer driving the number-calling loop
- game: BingoGame, the state machine tying it all together
"""
