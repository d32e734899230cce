"""Game and session configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from snapshot_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board, pacing, and persistence settings for one game.

    Supports JSON serialization so a setup can be shared between runs.
    """

    # Board
    rows: int = 20
    cols: int = 40
    starting_length: int = 3
    initial_direction: str = "right"
    wall_count: int = 0

    # Scoring
    points_per_food: int = 10

    # Pacing
    tick_ms: int = 150
    frame_ms: int = 10

    # Persistence
    high_score_path: str = "game_highest.txt"

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("rows and cols must be at least 1.")
        if self.starting_length < 1:
            raise ValueError("starting_length must be at least 1.")
        if self.points_per_food < 0:
            raise ValueError("points_per_food must be >= 0.")
        if self.wall_count < 0:
            raise ValueError("wall_count must be >= 0.")
        if self.tick_ms < 1 or self.frame_ms < 1:
            raise ValueError("tick_ms and frame_ms must be at least 1.")
        Direction.parse(self.initial_direction)

    @property
    def direction(self) -> Direction:
        return Direction.parse(self.initial_direction)

    @property
    def tick_interval(self) -> float:
        """Seconds between simulation ticks."""
        return self.tick_ms / 1000.0

    @property
    def frame_interval(self) -> float:
        """Seconds between observer polls."""
        return self.frame_ms / 1000.0

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
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
