"""Game configuration: grid size, tick timing, and persistence cadence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable game constants.

    Supports JSON serialization so a server can be started from a file.
    """

    grid_size: int = 20

    # Speed ramp
    base_tick_ms: int = 160
    min_tick_ms: int = 70
    tick_step_ms: int = 6

    # Scoring
    food_score: int = 10

    # Persistence
    save_interval_ms: int = 1000
    best_score_path: str = "~/.grid_snake/best.json"

    def __post_init__(self) -> None:
        if self.grid_size < 8:
            raise ValueError("grid_size must be at least 8.")
        if self.min_tick_ms < 1:
            raise ValueError("min_tick_ms must be positive.")
        if self.base_tick_ms < self.min_tick_ms:
            raise ValueError("base_tick_ms must be >= min_tick_ms.")
        if self.tick_step_ms < 0:
            raise ValueError("tick_step_ms must be >= 0.")
        if self.food_score < 1:
            raise ValueError("food_score must be at least 1.")
        if self.save_interval_ms < 1:
            raise ValueError("save_interval_ms must be positive.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
