# Area: Core
"""
bingo_referee._core.entropy — External randomness source
========================================================

The round logic has no local random generator. Every random decision is
derived from a block of bytes requested from an ``EntropySource``, a
single-shot asynchronous call that suspends the caller.

Failures of the source are surfaced as ``EntropyUnavailable``. There is no
pseudo-random fallback.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from abc import ABC, abstractmethod

from ..errors import EntropyUnavailable

logger = logging.getLogger("bingo_referee.entropy")

# Smallest block a shuffle may be driven by.
MIN_BLOCK_BYTES = 32


class EntropySource(ABC):
    """
    Abstract base class for a source of random bytes.

    Subclass this to plug in the host environment's randomness service.
    """

    @abstractmethod
    async def fetch(self, n_bytes: int) -> bytes:
        """
        Return a block of ``n_bytes`` random bytes.

        Implementations may raise any exception on failure; the caller
        wraps it into ``EntropyUnavailable``.
        """


class SystemEntropySource(EntropySource):
    """Entropy from the operating system CSPRNG, read off the event loop."""

    async def fetch(self, n_bytes: int) -> bytes:
        return await asyncio.to_thread(secrets.token_bytes, n_bytes)


async def fetch_entropy(source: EntropySource, n_bytes: int) -> bytes:
    """
    Request one block from ``source`` and check it honours the contract.

    Args:
        source: The entropy source to call
        n_bytes: Block size to request, at least ``MIN_BLOCK_BYTES``

    Returns:
        The random block, at least ``n_bytes`` long

    Raises:
        ValueError: If ``n_bytes`` is below ``MIN_BLOCK_BYTES``
        EntropyUnavailable: If the call fails or returns an unusable block
    """
    if n_bytes < MIN_BLOCK_BYTES:
        raise ValueError(
            f"Entropy blocks must be at least {MIN_BLOCK_BYTES} bytes, got {n_bytes}"
        )

    try:
        block = await source.fetch(n_bytes)
    except EntropyUnavailable:
        raise
    except Exception as e:
        logger.warning(f"Entropy fetch of {n_bytes} bytes failed: {e}")
        raise EntropyUnavailable(str(e), n_bytes) from e

    if not isinstance(block, (bytes, bytearray)):
        raise EntropyUnavailable(
            f"source returned {type(block).__name__} instead of bytes", n_bytes
        )
    if len(block) < n_bytes:
        logger.warning(f"Entropy source returned {len(block)} of {n_bytes} bytes")
        raise EntropyUnavailable(
            f"source returned {len(block)} bytes, {n_bytes} requested",
            n_bytes,
        )
    return bytes(block)
