"""Tick-based simulation engine that publishes immutable snapshots."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snapshot_snake.food import FoodSpawner
from snapshot_snake.grid import CellType, Grid
from snapshot_snake.intake import DirectionIntake
from snapshot_snake.mailbox import SnapshotMailbox
from snapshot_snake.snake import Direction, Snake
from snapshot_snake.snapshot import GameOverReason, Snapshot

if TYPE_CHECKING:
    from snapshot_snake.config import GameConfig

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake simulation with lock-free state publication.

    The engine owns the grid, snake, food spawner, and RNG. Only the thread
    driving :meth:`tick` may touch them. Every other thread talks to the
    engine through two shared slots:

    * :meth:`request_direction` writes the pending-direction intake;
    * :meth:`current_snapshot` reads the snapshot mailbox.

    Each tick ends by copying the mutable state into a fresh
    :class:`Snapshot` and publishing it.
    """

    def __init__(self, seed: int | None = None) -> None:
        # seed=None draws fresh OS entropy, so engines are uncorrelated.
        self.rng = np.random.default_rng(seed)
        self._mailbox = SnapshotMailbox()
        self._intake = DirectionIntake()
        self._sequence = 0

        self.grid: Grid | None = None
        self.snake: Snake | None = None
        self.food: FoodSpawner | None = None
        self.points_per_food = 0
        self.score = 0
        self.tick_count = 0
        self.game_over = False
        self.reason: GameOverReason | None = None

    @classmethod
    def from_config(
        cls, config: GameConfig, seed: int | None = None,
    ) -> GameEngine:
        """Build an engine and initialize it from *config*."""
        engine = cls(seed=seed)
        engine.initialize(
            config.rows,
            config.cols,
            config.starting_length,
            config.points_per_food,
            config.direction,
            wall_count=config.wall_count,
        )
        return engine

    def initialize(
        self,
        rows: int,
        cols: int,
        starting_length: int = 3,
        points_per_food: int = 10,
        initial_direction: Direction = Direction.RIGHT,
        wall_count: int = 0,
    ) -> None:
        """Reset all game state and publish the first snapshot.

        The snake is centered on the board and extends backwards from the
        center, against *initial_direction*. Walls (if any) are placed
        before the first food item.
        """
        if starting_length < 1:
            raise ValueError("starting_length must be at least 1.")
        if points_per_food < 0:
            raise ValueError("points_per_food must be >= 0.")
        if initial_direction is Direction.NONE:
            raise ValueError("initial_direction must be a movement direction.")

        grid = Grid(rows=rows, cols=cols)
        snake = Snake(rows // 2, cols // 2, initial_direction, starting_length)
        if not all(grid.in_bounds(r, c) for r, c in snake.body):
            raise ValueError(
                f"A snake of length {starting_length} heading "
                f"{initial_direction.name.lower()} does not fit on a "
                f"{rows}×{cols} board.",
            )

        for r, c in snake.body:
            grid.set(r, c, CellType.SNAKE)

        self.grid = grid
        self.snake = snake
        self.food = FoodSpawner(grid, rng=self.rng)
        self.points_per_food = points_per_food
        self.score = 0
        self.tick_count = 0
        self.game_over = False
        self.reason = None
        self._intake.clear()

        if wall_count:
            grid.place_walls(wall_count, self.rng)
        self.food.spawn()

        logger.debug(
            "Initialized %dx%d board, snake length %d heading %s.",
            rows, cols, starting_length, initial_direction.name,
        )
        self._publish()

    # -- shared with other threads --

    def request_direction(self, direction: Direction) -> None:
        """Queue a direction change for the next tick. Never blocks."""
        self._intake.request(direction)

    def current_snapshot(self) -> Snapshot:
        """Return the latest published snapshot. Never blocks."""
        snapshot = self._mailbox.current()
        if snapshot is None:
            raise RuntimeError("Engine has not been initialized.")
        return snapshot

    def get_state(self) -> dict:
        """Return the latest published state as a serializable dict."""
        return self.current_snapshot().to_dict()

    # -- simulation thread only --

    @property
    def direction(self) -> Direction:
        self._require_initialized()
        return self.snake.direction

    @property
    def growth_pending(self) -> int:
        self._require_initialized()
        return self.snake.growth_pending

    def tick(self) -> bool:
        """Advance the game by one step.

        Returns True while the snake is alive. Once the game is over every
        further call returns False without touching any state.
        """
        self._require_initialized()
        if self.game_over:
            return False

        self.tick_count += 1
        snake = self.snake
        grid = self.grid

        requested = self._intake.take()
        if requested is not Direction.NONE:
            snake.set_direction(requested)

        next_r, next_c = snake.next_head()

        if not grid.in_bounds(next_r, next_c):
            return self._end(GameOverReason.OUT_OF_BOUNDS)
        if grid.get(next_r, next_c) == CellType.WALL:
            return self._end(GameOverReason.WALL)
        # The tail still counts: stepping onto it is fatal even though it
        # would move away this tick.
        if snake.collides((next_r, next_c)):
            return self._end(GameOverReason.SELF_COLLISION)

        if self.food.position == (next_r, next_c):
            snake.schedule_growth(1)
            self.score += self.points_per_food
            self.food.consume()

        vacated = snake.advance()
        grid.set(next_r, next_c, CellType.SNAKE)
        if vacated is not None:
            grid.set(vacated[0], vacated[1], CellType.EMPTY)

        if not self.food.exists:
            self.food.spawn()

        if not self.food.exists and snake.growth_pending == 0:
            return self._end(GameOverReason.BOARD_FULL)

        self._publish()
        return True

    def _end(self, reason: GameOverReason) -> bool:
        """Mark the game over and publish the terminal snapshot."""
        self.game_over = True
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.tick_count, self.score,
        )
        self._publish()
        return False

    def _publish(self) -> None:
        self._sequence += 1
        self._mailbox.publish(
            Snapshot.capture(
                self._sequence,
                self.grid,
                self.snake,
                self.food,
                score=self.score,
                game_over=self.game_over,
                reason=self.reason,
            ),
        )

    def _require_initialized(self) -> None:
        if self.snake is None:
            raise RuntimeError("Engine has not been initialized.")
