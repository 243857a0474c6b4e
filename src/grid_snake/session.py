"""A playable game: engine, tick scheduler, and best-score persistence."""

from __future__ import annotations

import logging

from grid_snake.config import GameConfig
from grid_snake.controls import Action, resolve_key
from grid_snake.engine import GameEngine
from grid_snake.scheduler import TickListener, TickScheduler
from grid_snake.snake import Direction
from grid_snake.store import BestScoreSaver, BestScoreStore, MemoryBestScoreStore

logger = logging.getLogger(__name__)


class GameSession:
    """Wires a :class:`GameEngine` to its timer, store, and observers.

    Listeners are awaited with the serialized state after every tick and
    after every control change that alters what a renderer would draw.
    All methods must run on the event loop that drives the scheduler.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.store = store if store is not None else MemoryBestScoreStore()
        best = self.store.load() or 0
        self.engine = GameEngine(self.config, best_score=best, seed=seed)
        self.scheduler = TickScheduler(
            self.engine, on_tick=self._publish, on_error=self._publish,
        )
        self.saver = BestScoreSaver(
            self.engine, self.store, interval_ms=self.config.save_interval_ms,
        )
        self._listeners: list[TickListener] = []
        logger.info("Session created with best score %d.", best)

    def add_listener(self, listener: TickListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: TickListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def get_state(self) -> dict:
        return self.engine.get_state()

    def start(self) -> None:
        """Begin periodic best-score saving."""
        self.saver.start()

    async def close(self) -> None:
        """Cancel the tick loop and flush the best score."""
        await self.scheduler.aclose()
        await self.saver.stop()
        self._listeners.clear()
        logger.info("Session closed.")

    async def toggle(self) -> dict:
        """Pause or resume, arming or cancelling the tick loop to match."""
        if self.engine.toggle():
            self.scheduler.stop()
        else:
            self.scheduler.start()
        return await self._publish(self.engine.get_state())

    async def reset(self) -> dict:
        """Start over in the paused state."""
        self.scheduler.stop()
        self.engine.reset()
        return await self._publish(self.engine.get_state())

    async def restart(self) -> dict:
        """Start over and resume immediately."""
        self.scheduler.stop()
        self.engine.reset()
        self.engine.toggle()
        self.scheduler.start()
        logger.info("Game restarted.")
        return await self._publish(self.engine.get_state())

    def set_direction(self, direction: Direction | tuple[int, int]) -> bool:
        return self.engine.set_direction(direction)

    async def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False for unbound keys."""
        control = resolve_key(key)
        if control is None:
            return False
        if isinstance(control, Direction):
            self.set_direction(control)
        elif control is Action.TOGGLE:
            await self.toggle()
        elif control is Action.RESTART:
            await self.restart()
        return True

    async def _publish(self, state: dict) -> dict:
        for listener in list(self._listeners):
            try:
                await listener(state)
            except Exception:
                logger.exception("Listener %r failed.", listener)
        return state
