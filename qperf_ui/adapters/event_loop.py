from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future, TimeoutError as FuturesTimeoutError
from typing import Any, Coroutine, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventLoopThread:
    """
    One asyncio loop on a daemon thread: the single context in which the
    session state is touched. Flask handlers hand coroutines over to it.
    """

    def __init__(self, name: str = "qperf-events"):
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._started = False

    def _run(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    def start(self) -> "EventLoopThread":
        if not self._started:
            self._thread.start()
            self._started = True
        return self

    def stop(self, timeout: float = 5.0) -> None:
        if not self._started:
            return
        try:
            asyncio.run_coroutine_threadsafe(self._cancel_pending(), self._loop).result(timeout)
        except FuturesTimeoutError:
            logger.warning("Pending tasks did not finish within %.1fs of shutdown", timeout)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        self._started = False
        if self._thread.is_alive():
            logger.warning("Event loop thread %s did not stop", self._thread.name)
            return
        self._loop.close()

    @property
    def is_closed(self) -> bool:
        return self._loop.is_closed()

    async def _cancel_pending(self) -> None:
        current = asyncio.current_task()
        pending = [t for t in asyncio.all_tasks() if t is not current]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        await self._loop.shutdown_asyncgens()

    def submit(self, coro: Coroutine[Any, Any, T]) -> "Future[T]":
        fut = asyncio.run_coroutine_threadsafe(coro, self._loop)
        fut.add_done_callback(_log_failure)
        return fut

    def call(self, coro: Coroutine[Any, Any, T], timeout: Optional[float] = None) -> T:
        return self.submit(coro).result(timeout)


def _log_failure(fut: Future) -> None:
    if fut.cancelled():
        return
    exc = fut.exception()
    if exc is not None:
        logger.error("Background task failed", exc_info=exc)
