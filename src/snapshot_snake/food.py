"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snapshot_snake.grid import CellType

if TYPE_CHECKING:
    from snapshot_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Keeps at most one food item on the grid.

    Every placement scans the board for empty cells and draws a single
    uniform index over them.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    @property
    def exists(self) -> bool:
        return self.position is not None

    def spawn(self) -> tuple[int, int] | None:
        """Place food on a random empty cell.

        Returns the new position, or ``None`` if the board has no empty cell
        (food then stays absent).
        """
        if self.position is not None:
            return self.position

        empty = self.grid.empty_cells()
        if not empty:
            logger.debug("No empty cells available for food placement.")
            return None

        pos = empty[int(self.rng.integers(0, len(empty)))]
        self.grid.set(pos[0], pos[1], CellType.FOOD)
        self.position = pos
        return pos

    def consume(self) -> tuple[int, int] | None:
        """Remove the current food item. Returns where it was."""
        pos = self.position
        if pos is None:
            return None
        self.position = None
        self.grid.set(pos[0], pos[1], CellType.EMPTY)
        return pos
