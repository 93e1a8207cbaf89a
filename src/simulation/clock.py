from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """Invokes an async callback once per fixed period on the running loop."""

    def __init__(self, callback: Callable[[], Awaitable[None]], period: float) -> None:
        if period <= 0:
            raise ValueError(f"Tick period must be positive, got {period}")
        self.callback = callback
        self.period = period
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self._task is None:
            logger.info("Ticker started with period %.3fs", self.period)
            self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        if self._task:
            task, self._task = self._task, None
            if task.done():
                if not task.cancelled() and task.exception() is not None:
                    logger.error("Ticker had already exited", exc_info=task.exception())
            else:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
            logger.info("Ticker stopped")

    async def _run(self) -> None:
        while True:
            try:
                await self.callback()
            except Exception:
                # keep ticking after a failed callback
                logger.exception("Tick callback failed")
            await asyncio.sleep(self.period)
