# Area: Core
"""
bingo_referee._core.random_sequence — Entropy-driven integers and shuffles
==========================================================================

Turns a block of random bytes into either a bounded integer or a
permutation. Each public coroutine performs exactly one entropy fetch.

Both reductions use ``value % range``, which is not perfectly uniform for
ranges that are not a power of two. With a 1..99 domain this bias is an
accepted approximation.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from .entropy import MIN_BLOCK_BYTES, EntropySource, fetch_entropy

T = TypeVar("T")

DEFAULT_BLOCK_BYTES = MIN_BLOCK_BYTES


def int_from_block(block: bytes, min_value: int, max_value: int) -> int:
    """Map the first four bytes (little-endian u32) onto ``[min_value, max_value]``."""
    if max_value < min_value:
        raise ValueError(f"Empty range [{min_value}, {max_value}]")
    value = int.from_bytes(block[0:4], "little")
    return value % (max_value - min_value + 1) + min_value


def shuffle_with(values: Sequence[T], block: bytes) -> List[T]:
    """
    Fisher–Yates shuffle driven by ``block``.

    Walks from the last index down to 1 and swaps index ``i`` with
    ``block[k] % (i + 1)``, where ``k`` cycles through the block.
    Returns a new list; ``values`` is left untouched.
    """
    if not block:
        raise ValueError("Cannot shuffle with an empty entropy block")
    items = list(values)
    k = 0
    for i in range(len(items) - 1, 0, -1):
        j = block[k % len(block)] % (i + 1)
        items[i], items[j] = items[j], items[i]
        k += 1
    return items


class RandomSequenceGenerator:
    """
    Source of random integers and permutations for one game.

    Attributes:
        source: External entropy source
        block_bytes: Size of the block requested per operation
    """

    def __init__(self, source: EntropySource, block_bytes: int = DEFAULT_BLOCK_BYTES):
        self.source = source
        self.block_bytes = block_bytes

    async def fetch_block(self) -> bytes:
        """Fetch one entropy block (raises EntropyUnavailable)."""
        return await fetch_entropy(self.source, self.block_bytes)

    async def random_in_range(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]``."""
        block = await self.fetch_block()
        return int_from_block(block, min_value, max_value)

    async def shuffle(self, values: Sequence[T]) -> List[T]:
        """Return a shuffled copy of ``values``."""
        block = await self.fetch_block()
        return shuffle_with(values, block)

    async def permutation(self, max_value: int) -> List[int]:
        """Return a permutation of ``1..max_value``."""
        return await self.shuffle(range(1, max_value + 1))
