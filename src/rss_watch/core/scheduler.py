from __future__ import annotations

import asyncio
import contextlib

from rss_watch.observability import get_logger

logger = get_logger(__name__)


class WatcherScheduler:
    """Runs ``watcher.check()`` now and then once per interval.

    Cycles never overlap: the next sleep starts only after the previous
    check has returned. An exception from ``check()`` ends the loop and is
    re-raised by ``join()``.
    """

    def __init__(self, interval_seconds: float, watcher: object) -> None:
        if interval_seconds <= 0:
            msg = "interval_seconds must be positive"
            raise ValueError(msg)
        if not hasattr(watcher, "check"):
            msg = "watcher must define check"
            raise TypeError(msg)

        self._interval_seconds = interval_seconds
        self._watcher = watcher
        self._task: asyncio.Task[None] | None = None
        self._stop_event = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run())

    async def join(self) -> None:
        if self._task is None:
            return
        await self._task

    async def shutdown(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        self._stop_event.set()
        if not task.done():
            await task

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            await self._watcher.check()  # type: ignore[attr-defined]
            if self._stop_event.is_set():
                break
            logger.debug("next_check_scheduled", interval_seconds=self._interval_seconds)
            await self._sleep()

    async def _sleep(self) -> None:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_seconds)
