"""Immutable snapshot of the game state, safe to share across threads."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snapshot_snake.grid import CellType
from snapshot_snake.snake import Direction

if TYPE_CHECKING:
    from snapshot_snake.food import FoodSpawner
    from snapshot_snake.grid import Grid
    from snapshot_snake.snake import Snake


class GameOverReason(str, enum.Enum):
    """Why the simulation stopped."""

    OUT_OF_BOUNDS = "out_of_bounds"
    WALL = "wall"
    SELF_COLLISION = "self_collision"
    BOARD_FULL = "board_full"


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Read-only view of one published tick.

    A snapshot owns private copies of the board and the snake body; nothing
    in it refers back into engine state. The board array is flagged
    read-only so accidental writes fail loudly instead of tearing a view
    another thread is reading.
    """

    sequence: int
    rows: int
    cols: int
    score: int
    game_over: bool
    food: tuple[int, int] | None
    snake: tuple[tuple[int, int], ...]
    direction: Direction
    board: np.ndarray
    reason: GameOverReason | None = None

    @classmethod
    def capture(
        cls,
        sequence: int,
        grid: Grid,
        snake: Snake,
        food: FoodSpawner,
        score: int,
        game_over: bool,
        reason: GameOverReason | None = None,
    ) -> Snapshot:
        """Copy the engine's mutable state into a new snapshot."""
        board = grid.cells.copy()
        board.flags.writeable = False
        return cls(
            sequence=sequence,
            rows=grid.rows,
            cols=grid.cols,
            score=score,
            game_over=game_over,
            food=food.position,
            snake=tuple(snake.body),
            direction=snake.direction,
            board=board,
            reason=reason,
        )

    @property
    def food_exists(self) -> bool:
        return self.food is not None

    @property
    def snake_length(self) -> int:
        return len(self.snake)

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def cell_at(self, row: int, col: int) -> CellType:
        """Return the cell at (row, col); anything off the board is a wall."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return CellType(self.board[row, col])
        return CellType.WALL

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return (
            self.sequence == other.sequence
            and self.rows == other.rows
            and self.cols == other.cols
            and self.score == other.score
            and self.game_over == other.game_over
            and self.food == other.food
            and self.snake == other.snake
            and self.direction == other.direction
            and self.reason == other.reason
            and np.array_equal(self.board, other.board)
        )

    def to_dict(self) -> dict:
        """Return a JSON-serializable view of the snapshot."""
        return {
            "sequence": self.sequence,
            "rows": self.rows,
            "cols": self.cols,
            "score": self.score,
            "game_over": self.game_over,
            "reason": self.reason.value if self.reason else None,
            "food": list(self.food) if self.food else None,
            "snake": {
                "body": [list(seg) for seg in self.snake],
                "length": self.snake_length,
                "direction": self.direction.name.lower(),
            },
            "board": self.board.tolist(),
        }
