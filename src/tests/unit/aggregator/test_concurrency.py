"""Tests for the fan-out helper."""

import asyncio

import pytest

from workload_aggregator.concurrency import gather_or_cancel


async def _after(delay: float, value):
    await asyncio.sleep(delay)
    return value


async def test_results_in_input_order():
    results = await gather_or_cancel([_after(0.03, "a"), _after(0.0, "b"), _after(0.01, "c")])

    assert results == ["a", "b", "c"]


async def test_empty_input():
    assert await gather_or_cancel([]) == []


async def test_first_failure_cancels_siblings():
    finished = []
    cancelled = []

    async def slow(name):
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.append(name)
            raise
        finished.append(name)

    async def failing():
        await asyncio.sleep(0.01)
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await gather_or_cancel([slow("one"), failing(), slow("two")])

    assert finished == []
    assert sorted(cancelled) == ["one", "two"]


async def test_failing_iterable_cancels_started_tasks():
    finished = []

    async def quick(name):
        await asyncio.sleep(0.01)
        finished.append(name)

    def awaitables():
        yield quick("one")
        yield quick("two")
        raise RuntimeError("bad input")

    with pytest.raises(RuntimeError, match="bad input"):
        await gather_or_cancel(awaitables())

    await asyncio.sleep(0.05)
    assert finished == []
