from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from github_watch.domain import WatchCancelledError
from github_watch.logging_config import get_logger

logger = get_logger("github_watch.scheduling")

T = TypeVar("T")


class CancellationToken:
    """One-shot cancellation signal shared between a caller and running tasks."""

    def __init__(self):
        self._cancelled = False
        self._callbacks: List[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def register(self, callback: Callable[[], None]) -> None:
        """Run `callback` on cancellation (immediately if already cancelled)."""
        if self._cancelled:
            callback()
            return
        self._callbacks.append(callback)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()


class RepeatingTask(Generic[T]):
    """
    Periodically awaits `action` until it produces a result.

    Each tick sleeps `interval` seconds and then awaits `action()`. A `None`
    result re-arms the timer, any other value completes the task with it.
    An exception raised by `action` stops the task and is re-raised from
    `wait()` unchanged. The next tick starts only after the previous action
    has finished, so actions never overlap.
    """

    def __init__(self, action: Callable[[], Awaitable[Optional[T]]], interval: float):
        if interval < 0:
            raise ValueError("interval must be >= 0")
        self._action = action
        self._interval = interval
        self._task: Optional[asyncio.Task] = None
        self._cancel_requested = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> "RepeatingTask[T]":
        if self._task is not None:
            raise RuntimeError("RepeatingTask already started")
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self

    def cancel(self) -> None:
        self._cancel_requested = True
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> T:
        if self._task is None:
            raise RuntimeError("RepeatingTask not started")
        try:
            return await self._task
        except asyncio.CancelledError:
            if self._cancel_requested:
                raise WatchCancelledError("Watch cancelled") from None
            # Cancelled from outside: do not leave the timer running
            self._task.cancel()
            raise

    async def _run(self) -> T:
        tick = 0
        while True:
            await asyncio.sleep(self._interval)
            tick += 1
            logger.debug(f"Tick #{tick}")
            result = await self._action()
            if result is not None:
                return result
