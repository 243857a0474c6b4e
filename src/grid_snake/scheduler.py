"""Asyncio tick loop that reschedules itself after every completed tick."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grid_snake.engine import GameEngine

logger = logging.getLogger(__name__)

TickListener = Callable[[dict], Awaitable[None]]


class TickScheduler:
    """Drives :meth:`GameEngine.tick` at the engine's current interval.

    If a tick or *on_tick* raises, the engine is paused and *on_error*
    receives the paused state so observers do not keep a stale frame.

    At most one loop task exists. The interval is re-read before every
    sleep, so a speed change made by one tick applies to the next one.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_tick: TickListener | None = None,
        on_error: TickListener | None = None,
    ) -> None:
        self.engine = engine
        self.on_tick = on_tick
        self.on_error = on_error
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Arm the loop, discarding any previously armed tick."""
        self.stop()
        self._task = asyncio.create_task(self._tick_loop())

    def stop(self) -> None:
        """Cancel the pending tick, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def aclose(self) -> None:
        """Cancel the pending tick and wait for the loop task to unwind."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def wait_stopped(self) -> None:
        """Wait until the current loop task (if any) has finished."""
        task = self._task
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _tick_loop(self) -> None:
        try:
            while not self.engine.is_paused:
                await asyncio.sleep(self.engine.tick_interval_ms / 1000.0)
                state = self.engine.tick()
                if self.on_tick is not None:
                    await self.on_tick(state)
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise
        except Exception:
            logger.exception("Tick loop error; pausing game.")
            self.engine.is_paused = True
            if self.on_error is not None:
                await self.on_error(self.engine.get_state())
