"""Best-score persistence across sessions."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from grid_snake.engine import GameEngine

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    """Anything that can load and save a single best score."""

    def load(self) -> int | None: ...

    def save(self, score: int) -> None: ...


class MemoryBestScoreStore:
    """In-process store; contents are lost when the process exits."""

    def __init__(self, initial: int | None = None) -> None:
        self.value = initial
        self.saves = 0

    def load(self) -> int | None:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
        self.saves += 1


class JsonBestScoreStore:
    """Stores the best score as ``{"best_score": n}`` in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> int | None:
        """Return the stored score, or ``None`` if absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text())
            score = int(raw["best_score"])
        except (OSError, ValueError, TypeError, KeyError):
            logger.warning("Ignoring unreadable best-score file %s.", self.path)
            return None
        return score if score >= 0 else None

    def save(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"best_score": score}))
        logger.debug("Best score %d written to %s.", score, self.path)


class BestScoreSaver:
    """Flushes the engine's best score to a store on a fixed cadence.

    A write happens only when the score is positive and differs from the
    last value written or loaded.
    """

    def __init__(
        self,
        engine: GameEngine,
        store: BestScoreStore,
        interval_ms: int = 1000,
    ) -> None:
        if interval_ms < 1:
            raise ValueError("interval_ms must be positive.")
        self.engine = engine
        self.store = store
        self.interval_ms = interval_ms
        self._last_saved = engine.best_score
        self._task: asyncio.Task | None = None

    def flush(self) -> bool:
        """Persist the best score if needed. Returns True if written."""
        best = self.engine.best_score
        if best <= 0 or best == self._last_saved:
            return False
        self.store.save(best)
        self._last_saved = best
        logger.info("Best score %d saved.", best)
        return True

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._save_loop())

    async def stop(self) -> None:
        """Stop the periodic loop and write any unsaved score."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        try:
            self.flush()
        except OSError:
            logger.exception("Failed to save best score on shutdown.")

    async def _save_loop(self) -> None:
        interval = self.interval_ms / 1000.0
        while True:
            await asyncio.sleep(interval)
            try:
                self.flush()
            except OSError:
                logger.exception("Failed to save best score.")
