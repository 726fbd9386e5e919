"""
Async iteration tests for IntegralRange.
"""

import asyncio

from intrange.models.integral_range import IntegralRange


class TestAsyncIteration:
    """Tests for async for over ranges and windows."""

    async def test_async_matches_sync(self, sample_triples):
        """Test async iteration yields the same values as sync iteration."""
        for start, stop, step in sample_triples:
            r = IntegralRange(start, stop, step)
            assert [v async for v in r] == list(r)

    async def test_async_empty(self, empty_range):
        """Test an empty range yields nothing asynchronously."""
        assert [v async for v in empty_range] == []

    async def test_async_iterator_window(self, descending_range):
        """Test async_iterator honours the window."""
        values = [v async for v in descending_range.async_iterator(9, 2)]
        assert values == [8, 6, 4]

    async def test_concurrent_iterations_are_independent(self, ascending_range):
        """Test concurrent consumers each see the full sequence."""

        async def collect():
            values = []
            async for v in ascending_range:
                values.append(v)
                await asyncio.sleep(0)
            return values

        results = await asyncio.gather(*(collect() for _ in range(5)))
        assert all(values == [0, 2, 4, 6] for values in results)
