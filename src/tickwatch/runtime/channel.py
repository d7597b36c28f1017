"""Unbuffered hand-off between asyncio tasks."""

from __future__ import annotations

import asyncio
from typing import Generic, TypeVar

T = TypeVar("T")


class Rendezvous(Generic[T]):
    """Single-slot channel whose ``send`` returns only once the item is taken.

    At most one item is ever in flight; nothing is queued, coalesced or
    dropped.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[T] = asyncio.Queue(maxsize=1)

    async def send(self, item: T) -> None:
        """Publish ``item`` and wait until a receiver has taken it."""
        await self._queue.put(item)
        await self._queue.join()

    async def receive(self) -> T:
        """Wait for the next item."""
        item = await self._queue.get()
        self._queue.task_done()
        return item

    @property
    def pending(self) -> bool:
        """True while an item is waiting for a receiver."""
        return not self._queue.empty()
