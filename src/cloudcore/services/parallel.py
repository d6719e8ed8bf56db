"""Bounded-concurrency async iteration."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable


async def for_each_async[T](
    items: Iterable[T],
    body: Callable[[T], Awaitable[object]],
    max_parallelism: int,
) -> None:
    """Await ``body(item)`` for every item, at most *max_parallelism* at a time.

    The source is drained by *max_parallelism* partitions sharing one
    iterator; each partition processes its items sequentially.  Completion
    order is unspecified and the first exception propagates.
    """
    if max_parallelism < 1:
        raise ValueError("max_parallelism must be at least 1")

    iterator = iter(items)

    async def partition() -> None:
        for item in iterator:
            await body(item)

    await asyncio.gather(*(partition() for _ in range(max_parallelism)))
