"""Fan-out helpers for asyncio."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import TypeVar

T = TypeVar("T")


async def gather_or_cancel(aws: Iterable[Awaitable[T]]) -> list[T]:
    """Run awaitables concurrently and return their results in input order.

    The first failure is re-raised unchanged and every sibling still running
    is cancelled and awaited before returning.
    """
    tasks: list[asyncio.Future[T]] = []
    try:
        for aw in aws:
            tasks.append(asyncio.ensure_future(aw))
        if not tasks:
            return []
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
