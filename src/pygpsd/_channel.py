"""Bounded, closable single-writer/single-reader async channel."""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

from pygpsd._constants import DEFAULT_QUEUE_SIZE
from pygpsd.exceptions import ChannelClosedError

T = TypeVar("T")


class Channel(Generic[T]):
    """FIFO queue with a fixed capacity and an explicit end.

    ``send`` waits while the channel is full. ``close`` may be called once;
    values buffered before it remain receivable, after which ``receive``
    raises :class:`ChannelClosedError`.
    """

    def __init__(self, maxsize: int = DEFAULT_QUEUE_SIZE, *, name: str = "") -> None:
        if maxsize <= 0:
            raise ValueError(f"maxsize must be positive, got {maxsize}")
        self._maxsize = maxsize
        self._name = name
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = asyncio.Condition()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Channel {self._name or '?'} {state} {len(self._items)}/{self._maxsize}>"

    def __len__(self) -> int:
        return len(self._items)

    @property
    def name(self) -> str:
        return self._name

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, item: T) -> None:
        """Append *item*, waiting for free capacity if needed."""
        async with self._cond:
            await self._cond.wait_for(lambda: self._closed or len(self._items) < self._maxsize)
            if self._closed:
                raise ChannelClosedError(f"send on closed channel {self._name!r}")
            self._items.append(item)
            self._cond.notify_all()

    async def receive(self) -> T:
        """Pop the oldest value, waiting for one if the channel is empty.

        Raises
        ------
        ChannelClosedError
            Once the channel is closed and every buffered value was received.
        """
        async with self._cond:
            await self._cond.wait_for(lambda: self._closed or bool(self._items))
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            raise ChannelClosedError(f"channel {self._name!r} is closed")

    async def requeue(self, item: T) -> None:
        """Put a received *item* back at the front of the channel.

        Works on a closed channel and ignores ``maxsize``, so a value taken
        by :meth:`receive` but never handled can always be returned.
        """
        async with self._cond:
            self._items.appendleft(item)
            self._cond.notify_all()

    async def close(self) -> None:
        async with self._cond:
            if self._closed:
                raise ChannelClosedError(f"channel {self._name!r} already closed")
            self._closed = True
            self._cond.notify_all()

    def __aiter__(self) -> AsyncIterator[T]:
        return self._drain()

    async def _drain(self) -> AsyncIterator[T]:
        while True:
            try:
                item = await self.receive()
            except ChannelClosedError:
                return
            yield item
