# Area: Core Tests
"""Tests for the entropy wrapper and RandomSequenceGenerator."""

import asyncio

import pytest

from bingo_referee._core.entropy import (
    MIN_BLOCK_BYTES,
    EntropySource,
    SystemEntropySource,
    fetch_entropy,
)
from bingo_referee._core.random_sequence import (
    RandomSequenceGenerator,
    int_from_block,
    shuffle_with,
)
from bingo_referee.errors import EntropyUnavailable


class FixedEntropy(EntropySource):
    """Returns the same block on every call and counts calls."""

    def __init__(self, block: bytes):
        self.block = block
        self.calls = 0

    async def fetch(self, n_bytes):
        self.calls += 1
        return self.block


class BrokenEntropy(EntropySource):
    """Fails every call."""

    async def fetch(self, n_bytes):
        raise OSError("randomness service unreachable")


class TestIntFromBlock:
    """Tests for bounded integer reduction."""

    def test_little_endian_modulo(self):
        block = bytes([1, 0, 0, 0]) + bytes(28)
        assert int_from_block(block, 1, 99) == 2

    def test_max_u32(self):
        # 4294967295 % 99 == 3
        assert int_from_block(b"\xff\xff\xff\xff", 1, 99) == 4

    def test_only_first_four_bytes_used(self):
        a = bytes([7, 0, 0, 0, 1, 2, 3])
        b = bytes([7, 0, 0, 0, 9, 9, 9])
        assert int_from_block(a, 1, 99) == int_from_block(b, 1, 99)

    def test_single_value_range(self):
        assert int_from_block(b"\x12\x34\x56\x78", 42, 42) == 42

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            int_from_block(b"\x00\x00\x00\x00", 5, 4)


class TestShuffleWith:
    """Tests for the entropy-driven Fisher–Yates shuffle."""

    def test_is_permutation(self):
        block = bytes(range(32))
        result = shuffle_with(list(range(1, 100)), block)
        assert sorted(result) == list(range(1, 100))

    def test_does_not_mutate_input(self):
        values = [1, 2, 3, 4]
        shuffle_with(values, b"\x03\x01")
        assert values == [1, 2, 3, 4]

    def test_swaps_follow_block_bytes(self):
        """i=2: j=5%3=2 (no swap); i=1: j=7%2=1 (no swap)."""
        assert shuffle_with([1, 2, 3], b"\x05\x07") == [1, 2, 3]

    def test_block_index_cycles(self):
        """A one-byte block is reused for every swap."""
        # i=2: j=0 -> [3, 2, 1]; i=1: j=0 -> [2, 3, 1]
        assert shuffle_with([1, 2, 3], b"\x00") == [2, 3, 1]

    def test_single_element(self):
        assert shuffle_with([9], b"\x01") == [9]

    def test_empty_block_raises(self):
        with pytest.raises(ValueError):
            shuffle_with([1, 2], b"")


class TestFetchEntropy:
    """Tests for the entropy contract checks."""

    def test_source_failure_becomes_entropy_unavailable(self):
        with pytest.raises(EntropyUnavailable) as exc_info:
            asyncio.run(fetch_entropy(BrokenEntropy(), 32))
        assert exc_info.value.n_bytes == 32
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_short_block_rejected(self):
        with pytest.raises(EntropyUnavailable):
            asyncio.run(fetch_entropy(FixedEntropy(b"\x01\x02"), 32))

    def test_non_bytes_rejected(self):
        with pytest.raises(EntropyUnavailable):
            asyncio.run(fetch_entropy(FixedEntropy([1, 2, 3, 4]), 32))

    def test_truncated_block_rejected(self):
        """A source answering with fewer bytes than requested is not trusted."""
        with pytest.raises(EntropyUnavailable) as exc_info:
            asyncio.run(fetch_entropy(FixedEntropy(b"\x01\x02\x03\x04"), 32))
        assert "4 bytes, 32 requested" in str(exc_info.value)

        with pytest.raises(EntropyUnavailable):
            asyncio.run(fetch_entropy(FixedEntropy(bytes(63)), 64))

    def test_request_below_minimum(self):
        with pytest.raises(ValueError):
            asyncio.run(fetch_entropy(FixedEntropy(bytes(32)), MIN_BLOCK_BYTES - 1))

    def test_longer_block_accepted(self):
        block = asyncio.run(fetch_entropy(FixedEntropy(bytes(40)), 32))
        assert len(block) == 40

    def test_bytearray_accepted(self):
        block = asyncio.run(fetch_entropy(FixedEntropy(bytearray(32)), 32))
        assert block == bytes(32)

    def test_system_source_returns_requested_size(self):
        block = asyncio.run(fetch_entropy(SystemEntropySource(), 32))
        assert isinstance(block, bytes)
        assert len(block) == 32


class TestRandomSequenceGenerator:
    """Tests for the generator coroutines."""

    def test_one_fetch_per_operation(self):
        source = FixedEntropy(bytes(range(32)))
        generator = RandomSequenceGenerator(source)

        asyncio.run(generator.permutation(99))
        asyncio.run(generator.random_in_range(1, 99))

        assert source.calls == 2

    def test_permutation_covers_domain(self):
        generator = RandomSequenceGenerator(SystemEntropySource())
        result = asyncio.run(generator.permutation(99))
        assert sorted(result) == list(range(1, 100))

    def test_random_in_range_bounds(self):
        generator = RandomSequenceGenerator(SystemEntropySource())
        for _ in range(20):
            assert 1 <= asyncio.run(generator.random_in_range(1, 99)) <= 99

    def test_requests_configured_block_size(self):
        requested = []

        class Recording(EntropySource):
            async def fetch(self, n_bytes):
                requested.append(n_bytes)
                return bytes(n_bytes)

        generator = RandomSequenceGenerator(Recording(), block_bytes=64)
        asyncio.run(generator.shuffle([1, 2, 3]))
        assert requested == [64]

    def test_short_source_fails_generator(self):
        generator = RandomSequenceGenerator(FixedEntropy(b"\x01\x02\x03\x04"))
        with pytest.raises(EntropyUnavailable):
            asyncio.run(generator.permutation(99))

    def test_failure_propagates(self):
        generator = RandomSequenceGenerator(BrokenEntropy())
        with pytest.raises(EntropyUnavailable):
            asyncio.run(generator.shuffle([1, 2, 3]))
