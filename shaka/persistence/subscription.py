"""Queue-backed comment subscription shared by the repositories."""

import asyncio
from collections.abc import Callable

import logfire

from shaka.domain.repository import CommentSubscription, Snapshot

_END = None


class QueueCommentSubscription(CommentSubscription):
    """Delivers snapshots pushed by a store listener through an asyncio queue.

    Store listeners may run on their own threads; they must use
    ``push_threadsafe`` so snapshots are handed to the event loop that
    opened the subscription.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._queue: asyncio.Queue[Snapshot | None] = asyncio.Queue()
        self._release: Callable[[], None] | None = None
        self._closed = False

    def attach(self, release: Callable[[], None]) -> None:
        """Register the callable that detaches the underlying listener."""
        self._release = release

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, snapshot: Snapshot) -> None:
        """Queue a snapshot. Must be called on the subscription's loop."""
        if not self._closed:
            self._queue.put_nowait(snapshot)

    def push_threadsafe(self, snapshot: Snapshot) -> None:
        """Queue a snapshot from any thread."""
        if self._closed:
            return
        try:
            self._loop.call_soon_threadsafe(self.push, snapshot)
        except RuntimeError:
            # Loop already shut down; nobody is left to receive it
            logfire.warn("Snapshot dropped after event loop closed")

    def end(self) -> None:
        """Finish iteration without releasing, e.g. after a listener error."""
        self._queue.put_nowait(_END)

    def end_threadsafe(self) -> None:
        try:
            self._loop.call_soon_threadsafe(self.end)
        except RuntimeError:
            logfire.warn("Subscription end dropped after event loop closed")

    def __aiter__(self) -> "QueueCommentSubscription":
        return self

    async def __anext__(self) -> Snapshot:
        if self._closed and self._queue.empty():
            raise StopAsyncIteration
        snapshot = await self._queue.get()
        if snapshot is _END or self._closed:
            raise StopAsyncIteration
        return snapshot

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._release is not None:
            await asyncio.to_thread(self._release)
            self._release = None
        # Wake a consumer blocked in __anext__
        self._queue.put_nowait(_END)
        logfire.info("Comment subscription closed")
